"""PNG encoding and output sinks."""

import io
from datetime import datetime
from pathlib import Path
from typing import BinaryIO

from PIL import Image

from ..capture_exceptions import OutputError
from ..logging import get_logger
from .compression import CompressionLevel

logger = get_logger(__name__)

DEFAULT_PREFIX = "screenshot"
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def encode_to(
    image: Image.Image, level: CompressionLevel | int | str, sink: BinaryIO
) -> None:
    """Encode an image as PNG into a binary stream.

    The image is written as-is: same size, same pixel data, no metadata
    changes.

    Args:
        image: Image to encode
        level: Compression level
        sink: Writable binary stream

    Raises:
        OutputError: If encoding or writing fails
    """
    compress_level = CompressionLevel.coerce(level).to_zlib_level()
    try:
        image.save(sink, format="PNG", compress_level=compress_level)
    except (OSError, ValueError) as e:
        raise OutputError(str(e), path=getattr(sink, "name", None)) from e


def encode_bytes(image: Image.Image, level: CompressionLevel | int | str) -> bytes:
    """Encode an image as PNG and return the bytes."""
    buffer = io.BytesIO()
    encode_to(image, level, buffer)
    return buffer.getvalue()


def write_to_file(
    image: Image.Image, level: CompressionLevel | int | str, path: str | Path
) -> Path:
    """Save an image as a PNG file.

    Missing parent directories are created. An existing file is truncated.

    Args:
        image: Image to save
        level: Compression level
        path: Destination file

    Returns:
        Path the image was written to

    Raises:
        OutputError: If the directory or file cannot be created or written
    """
    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"failed to create directory: {e}", path=str(path)) from e

    try:
        with open(path, "wb") as f:
            encode_to(image, level, f)
    except OSError as e:
        raise OutputError(f"failed to create file: {e}", path=str(path)) from e

    logger.info(
        "screenshot_saved",
        path=str(path),
        size=image.size,
        compression=CompressionLevel.coerce(level).name,
    )
    return path


def default_filename(prefix: str = DEFAULT_PREFIX, now: datetime | None = None) -> str:
    """Build a timestamped screenshot filename.

    Two calls within the same second return the same name.

    Args:
        prefix: Filename prefix, "screenshot" if empty
        now: Timestamp to use, current local time if None

    Returns:
        Filename like "screenshot_2024-05-01_13-45-10.png"
    """
    prefix = prefix or DEFAULT_PREFIX
    now = now or datetime.now()
    return f"{prefix}_{now.strftime(TIMESTAMP_FORMAT)}.png"
