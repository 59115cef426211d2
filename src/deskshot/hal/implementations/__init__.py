"""Capture strategy implementations."""

from .mss_capture import MSSCaptureStrategy
from .pillow_capture import PillowCaptureStrategy

__all__ = [
    "MSSCaptureStrategy",
    "PillowCaptureStrategy",
]
