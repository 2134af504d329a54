"""Exception types raised by the rendering pipeline.

Every error reaches the immediate caller. Wrapping errors keep the original
exception as ``__cause__``.
"""


class ChessImageError(Exception):
    """Base class for all chess_image errors."""


class NotReadyError(ChessImageError):
    """Rendering was attempted before a position was loaded."""

    def __init__(self, message: str = "Load a position first") -> None:
        super().__init__(message)


class ParseError(ChessImageError, ValueError):
    """The rules engine rejected the notation string."""


class AssetMissingError(ChessImageError, LookupError):
    """No sprite exists for the requested style / piece combination."""


class ExportError(ChessImageError, OSError):
    """Encoding the image or writing it to disk failed."""
