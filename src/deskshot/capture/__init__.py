"""Screen capture orchestration."""

from .capturer import ScreenCapturer

__all__ = ["ScreenCapturer"]
