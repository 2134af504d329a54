from pathlib import Path

import pytest
from click.testing import CliRunner
from PIL import Image

from chess_image.cli import main, parse_arrow
from chess_image.square import Square
from chess_image.types import Color, PieceKind


LONE_KINGS_FEN = "4k3/8/8/8/8/8/8/4K3 w - - 0 1"


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    root = tmp_path / "assets"
    for color in Color:
        for kind in PieceKind:
            path = root / "merida" / f"{color.value[0]}{kind.value.upper()}.png"
            path.parent.mkdir(parents=True, exist_ok=True)
            Image.new("RGBA", (10, 10), (0, 128, 0, 255)).save(path)
    return root


def test_parse_arrow() -> None:
    arrow = parse_arrow("c3:f5:green")
    assert arrow.from_square == Square.from_algebraic("c3")
    assert arrow.to_square == Square.from_algebraic("f5")
    assert arrow.color == "green"
    assert parse_arrow("a1:a4").color


def test_cli_renders_png(tmp_path: Path, asset_root: Path) -> None:
    output = tmp_path / "board.png"
    result = CliRunner().invoke(
        main,
        [
            LONE_KINGS_FEN,
            "-o",
            str(output),
            "--size",
            "160",
            "--padding",
            "4",
            "0",
            "4",
            "0",
            "--highlight",
            "e2",
            "--arrow",
            "e1:e4:red",
            "--asset-root",
            str(asset_root),
        ],
    )
    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.size == (160, 168)


def test_cli_reports_parse_errors(tmp_path: Path, asset_root: Path) -> None:
    result = CliRunner().invoke(
        main, ["not-a-fen", "-o", str(tmp_path / "x.png"), "--asset-root", str(asset_root)]
    )
    assert result.exit_code == 1
    assert "FEN could not be read successfully" in result.output


def test_cli_reports_missing_assets(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        main,
        [LONE_KINGS_FEN, "-o", str(tmp_path / "x.png"), "--asset-root", str(tmp_path / "none")],
    )
    assert result.exit_code == 1
    assert "Sprite could not be loaded" in result.output


def test_cli_rejects_bad_arrow(tmp_path: Path) -> None:
    result = CliRunner().invoke(main, [LONE_KINGS_FEN, "--arrow", "e1"])
    assert result.exit_code == 2


def test_cli_rejects_bad_colour(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        main, [LONE_KINGS_FEN, "-o", str(tmp_path / "x.png"), "--light", "notacolor"]
    )
    assert result.exit_code == 2
    assert "Invalid light colour" in result.output
    assert not (tmp_path / "x.png").exists()
