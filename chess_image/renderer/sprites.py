from typing import Callable, Dict, Tuple
import logging
import os

from PIL import Image, UnidentifiedImageError

from chess_image.errors import AssetMissingError
from chess_image.piece import Piece
from chess_image.types import Color, PieceKind


DEFAULT_ASSET_ROOT = "assets"

SpriteKey = Tuple[Color, PieceKind]
SpriteMap = Dict[SpriteKey, str]

# (style, piece, pixel size) -> RGBA sprite
SpriteLookupFn = Callable[[str, Piece, int], Image.Image]

logger = logging.getLogger(__name__)


def style_sprite_map(style: str) -> SpriteMap:
    """Sprites laid out as ``<style>/<w|b><K|Q|R|B|N|P>.png``."""
    return {
        (color, kind): f"{style}/{color.value[0]}{kind.value.upper()}.png"
        for color in Color
        for kind in PieceKind
    }


MERIDA_SPRITE_MAP: SpriteMap = style_sprite_map("merida")
ALPHA_SPRITE_MAP: SpriteMap = style_sprite_map("alpha")
CHEQ_SPRITE_MAP: SpriteMap = style_sprite_map("cheq")

STYLE_REGISTRY: Dict[str, SpriteMap] = {
    "merida": MERIDA_SPRITE_MAP,
    "alpha": ALPHA_SPRITE_MAP,
    "cheq": CHEQ_SPRITE_MAP,
}


def get_path(style: str, piece: Piece, registry: Dict[str, SpriteMap]) -> str:
    if style not in registry:
        raise AssetMissingError(f"Unknown piece style: {style!r}")
    sprite_map = registry[style]
    key = (piece.color, piece.kind)
    if key not in sprite_map:
        raise AssetMissingError(f"Style {style!r} has no sprite for {piece}")
    return sprite_map[key]


def load_sprite(path: str, size: int) -> Image.Image:
    try:
        with Image.open(path) as image:
            return image.convert("RGBA").resize((size, size))
    except (FileNotFoundError, UnidentifiedImageError) as err:
        raise AssetMissingError(f"Sprite could not be loaded: {path}") from err


class SpriteLoader:
    """Filesystem sprite lookup with a per-loader decode cache.

    Instances are ``SpriteLookupFn`` callables. Repeated calls for the same
    (style, piece, size) return the cached image.
    """

    asset_root: str
    registry: Dict[str, SpriteMap]

    def __init__(
        self,
        asset_root: str = DEFAULT_ASSET_ROOT,
        registry: Dict[str, SpriteMap] | None = None,
    ):
        self.asset_root = asset_root
        self.registry = registry or STYLE_REGISTRY
        self._cache: Dict[Tuple[str, int], Image.Image] = {}

    def __call__(self, style: str, piece: Piece, size: int) -> Image.Image:
        path = os.path.join(self.asset_root, get_path(style, piece, self.registry))
        key = (path, size)
        if key in self._cache:
            return self._cache[key]

        logger.debug("Decoding sprite %s at %dpx", path, size)
        sprite = load_sprite(path, size)
        self._cache[key] = sprite
        return sprite
