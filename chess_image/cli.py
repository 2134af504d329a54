"""
Command-line interface: render a FEN or PGN position to a PNG file.

Example::

    chess-image "r1bqkbnr/pppp1ppp/2n5/4p3/3PP3/5N2/PPP2PPP/RNBQKB1R w KQkq - 0 1" \\
        -o board.png --highlight a1 --highlight b4 --arrow c3:f5:green
"""

from typing import Tuple
import asyncio
import logging

import click

from chess_image.annotations import Arrow, DEFAULT_ARROW_COLOR
from chess_image.config import (
    DEFAULT_DARK,
    DEFAULT_HIGHLIGHT,
    DEFAULT_LIGHT,
    DEFAULT_SIZE,
    DEFAULT_STYLE,
    RenderConfig,
)
from chess_image.errors import ChessImageError
from chess_image.generator import ChessImageGenerator
from chess_image.logging_config import setup_logging
from chess_image.renderer.sprites import DEFAULT_ASSET_ROOT, STYLE_REGISTRY, SpriteLoader


def parse_arrow(spec: str) -> Arrow:
    """Parse ``FROM:TO`` or ``FROM:TO:COLOR``."""
    parts = spec.split(":", 2)
    if len(parts) < 2:
        raise click.BadParameter(f"expected FROM:TO[:COLOR], got {spec!r}")
    color = parts[2] if len(parts) == 3 and parts[2] else DEFAULT_ARROW_COLOR
    try:
        return Arrow.from_algebraic(parts[0], parts[1], color)
    except ValueError as err:
        raise click.BadParameter(str(err)) from err


async def _generate(generator: ChessImageGenerator, notation: str, pgn: bool, output: str) -> None:
    if pgn:
        await generator.load_pgn(notation)
    else:
        await generator.load_fen(notation)
    await generator.generate_png(output)


@click.command()
@click.argument("notation")
@click.option("-o", "--output", default="board.png", show_default=True, help="PNG file to write")
@click.option("--pgn", is_flag=True, help="Treat NOTATION as PGN instead of FEN")
@click.option("--size", default=DEFAULT_SIZE, show_default=True, help="Board edge in pixels")
@click.option(
    "--padding",
    nargs=4,
    type=int,
    default=(0, 0, 0, 0),
    show_default=True,
    help="Padding as TOP RIGHT BOTTOM LEFT",
)
@click.option("--light", default=DEFAULT_LIGHT, show_default=True, help="Light square colour")
@click.option("--dark", default=DEFAULT_DARK, show_default=True, help="Dark square colour")
@click.option(
    "--highlight-color", default=DEFAULT_HIGHLIGHT, show_default=True, help="Highlight overlay colour"
)
@click.option(
    "--style",
    type=click.Choice(sorted(STYLE_REGISTRY)),
    default=DEFAULT_STYLE,
    show_default=True,
    help="Piece sprite set",
)
@click.option("--flipped", is_flag=True, help="Draw the board from black's side")
@click.option("--highlight", "highlights", multiple=True, help="Square to highlight (repeatable)")
@click.option("--arrow", "arrows", multiple=True, help="Arrow FROM:TO[:COLOR] (repeatable)")
@click.option(
    "--asset-root",
    default=DEFAULT_ASSET_ROOT,
    show_default=True,
    type=click.Path(file_okay=False),
    help="Directory holding <style>/<piece>.png sprites",
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def main(
    notation: str,
    output: str,
    pgn: bool,
    size: int,
    padding: Tuple[int, int, int, int],
    light: str,
    dark: str,
    highlight_color: str,
    style: str,
    flipped: bool,
    highlights: Tuple[str, ...],
    arrows: Tuple[str, ...],
    asset_root: str,
    verbose: bool,
) -> None:
    """Render NOTATION (a FEN, or a PGN with --pgn) to a PNG image."""
    setup_logging(logging.DEBUG if verbose else logging.INFO)

    try:
        config = RenderConfig(
            size=size,
            padding=padding,
            light=light,
            dark=dark,
            highlight=highlight_color,
            style=style,
            flipped=flipped,
        )
        generator = ChessImageGenerator(config, sprite_lookup=SpriteLoader(asset_root))
        generator.highlight_squares(highlights)
    except ValueError as err:
        raise click.BadParameter(str(err)) from err
    generator.add_arrows([parse_arrow(spec) for spec in arrows])

    try:
        asyncio.run(_generate(generator, notation, pgn, output))
    except ChessImageError as err:
        raise click.ClickException(str(err)) from err


if __name__ == "__main__":
    main()
