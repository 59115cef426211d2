"""HAL Interface definitions.

These interfaces define the contracts that all capture strategies must follow.
"""

from .screen_capture import ICaptureStrategy, Monitor

__all__ = [
    "ICaptureStrategy",
    "Monitor",
]
