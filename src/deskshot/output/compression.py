"""PNG compression levels.

Enumeration of the user-facing speed/size trade-offs and their zlib
settings.
"""

from enum import IntEnum
from typing import Union


class CompressionLevel(IntEnum):
    """Compression preference, ordered from fastest/largest to slowest/smallest."""

    NONE = 0
    """No compression - fastest, largest files."""

    FAST = 1
    """Fastest compressed mode (default)."""

    BALANCED = 2
    """Default zlib compression."""

    BEST = 3
    """Maximum compression - slowest, smallest files."""

    @classmethod
    def coerce(cls, value: Union["CompressionLevel", int, str]) -> "CompressionLevel":
        """Convert user input to a compression level.

        Out-of-range numbers and unknown names fall back to FAST rather
        than failing.

        Args:
            value: Level, numeric level (0-3) or name

        Returns:
            CompressionLevel
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            return _NAMES.get(value.strip().lower(), cls.FAST)

        try:
            return cls(value)
        except ValueError:
            return cls.FAST

    def to_zlib_level(self) -> int:
        """Convert to a zlib compression level.

        Returns:
            zlib level (0-9) as accepted by Pillow's compress_level
        """
        return _ZLIB_LEVELS[self]


_ZLIB_LEVELS = {
    CompressionLevel.NONE: 0,
    CompressionLevel.FAST: 1,
    CompressionLevel.BALANCED: 6,
    CompressionLevel.BEST: 9,
}

_NAMES = {
    "none": CompressionLevel.NONE,
    "raw": CompressionLevel.NONE,
    "fast": CompressionLevel.FAST,
    "balanced": CompressionLevel.BALANCED,
    "medium": CompressionLevel.BALANCED,
    "best": CompressionLevel.BEST,
}


def zlib_level(level: CompressionLevel | int | str) -> int:
    """Get the zlib level for any accepted compression level input."""
    return CompressionLevel.coerce(level).to_zlib_level()
