"""PNG encoding and file output."""

from io import BytesIO
from pathlib import Path
from typing import Union
import asyncio
import logging

from PIL import Image

from chess_image.errors import ExportError


logger = logging.getLogger(__name__)


def encode_png(image: Image.Image) -> bytes:
    """Encode ``image`` as PNG bytes."""
    buffer = BytesIO()
    try:
        image.save(buffer, format="PNG")
    except (OSError, ValueError) as err:
        raise ExportError(f"Could not encode image as PNG: {err}") from err
    return buffer.getvalue()


async def save_png(data: bytes, path: Union[str, Path]) -> Path:
    """Write encoded bytes to ``path`` and return it once the write finished.

    No retry and no cleanup of a partially written file.
    """
    target = Path(path)
    try:
        await asyncio.to_thread(target.write_bytes, data)
    except OSError as err:
        raise ExportError(f"Could not write {target}: {err}") from err
    logger.info("Wrote %d bytes to %s", len(data), target)
    return target
