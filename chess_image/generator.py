"""Render session holding the position and annotations for one board.

``ChessImageGenerator`` is the public entry point::

    generator = ChessImageGenerator(size=400, flipped=True)
    await generator.load_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1")
    generator.highlight_squares(["e2", "e4"])
    generator.add_arrows([("g8", "f6", "green")])
    await generator.generate_png("board.png")

State lives in immutable values (``PositionModel``, ``PSet`` of squares,
``PVector`` of arrows) that are replaced wholesale by each setter and handed
to the pure ``render`` function. One render at a time per session: callers
must not mutate the session while a render is awaited.
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Iterable, Optional, Union
import logging

from PIL import Image
from pyrsistent import pset, pvector
from pyrsistent.typing import PSet, PVector

from chess_image.annotations import Arrow, ArrowLike, arrow_list, highlight_set
from chess_image.config import RenderConfig
from chess_image.export import encode_png, save_png
from chess_image.position import PositionModel, from_grid, from_notation
from chess_image.renderer.board import render
from chess_image.renderer.sprites import SpriteLoader, SpriteLookupFn
from chess_image.rules import Notation, PythonChessEngine, RulesEngine
from chess_image.square import Square
from chess_image.types import Grid


logger = logging.getLogger(__name__)


class ChessImageGenerator:
    config: RenderConfig
    engine: RulesEngine
    sprite_lookup: SpriteLookupFn
    position: PositionModel
    highlights: PSet[Square]
    arrows: PVector[Arrow]

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        *,
        engine: Optional[RulesEngine] = None,
        sprite_lookup: Optional[SpriteLookupFn] = None,
        **options: Any,
    ):
        """
        Arguments:
            config: Base render configuration.
            engine: Rules engine used for FEN / PGN loading.
            sprite_lookup: Sprite source; defaults to ``SpriteLoader()``.
            **options: ``RenderConfig`` fields overriding ``config``.
        """
        base = config or RenderConfig()
        self.config = replace(base, **options) if options else base
        self.engine = engine if engine is not None else PythonChessEngine()
        self.sprite_lookup = sprite_lookup or SpriteLoader()
        self.position = PositionModel.empty()
        self.highlights = pset()
        self.arrows = pvector()

    @property
    def ready(self) -> bool:
        return self.position.ready

    async def load_fen(self, fen: str) -> None:
        """Raises ``ParseError`` and keeps the previous position on failure."""
        self.position = from_notation(fen, Notation.FEN, self.engine)
        logger.debug("Loaded FEN with %d pieces", self.position.occupied())

    async def load_pgn(self, pgn: str) -> None:
        """Load the final position of a PGN game."""
        self.position = from_notation(pgn, Notation.PGN, self.engine)
        logger.debug("Loaded PGN with %d pieces", self.position.occupied())

    def load_array(self, grid: Grid) -> None:
        self.position = from_grid(grid, self.engine)
        logger.debug("Loaded grid with %d pieces", self.position.occupied())

    def highlight_squares(self, squares: Iterable[Union[Square, str]]) -> None:
        self.highlights = highlight_set(squares)

    def add_arrows(self, arrows: Iterable[ArrowLike]) -> None:
        """Replace the arrow list; later arrows are drawn on top."""
        self.arrows = arrow_list(arrows)

    async def generate_image(self) -> Image.Image:
        return await render(
            self.position,
            highlights=self.highlights,
            arrows=self.arrows,
            config=self.config,
            sprite_lookup=self.sprite_lookup,
        )

    async def generate_buffer(self) -> bytes:
        """PNG bytes of the current board. Raises ``NotReadyError`` if unloaded."""
        return encode_png(await self.generate_image())

    async def generate_png(self, path: Union[str, Path]) -> Path:
        """Render and write a PNG file, returning its path after the write."""
        return await save_png(await self.generate_buffer(), path)
