"""Capture and output exceptions.

This module contains the exceptions raised while selecting a capture
strategy, resolving a capture target, and writing the encoded image.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from .base_exceptions import DeskshotException


class CaptureException(DeskshotException):
    """Base exception for screen capture errors."""

    pass


class NoStrategyAvailable(CaptureException):
    """Raised when no registered capture strategy can run in this environment."""

    def __init__(self, registered: list[str] | None = None) -> None:
        registered = registered or []
        message = "No screenshot strategy available"
        if registered:
            message += f" (tried: {', '.join(registered)})"
        else:
            message += " (none registered)"

        super().__init__(
            message,
            error_code="NO_STRATEGY",
            context={"registered": registered},
        )


class NoActiveDisplays(CaptureException):
    """Raised when the active strategy reports zero displays."""

    def __init__(self, strategy: str | None = None) -> None:
        super().__init__(
            "No active displays found",
            error_code="NO_DISPLAYS",
            context={"strategy": strategy},
        )


class MonitorOutOfRange(CaptureException):
    """Raised when a requested monitor index does not exist.

    Attributes:
        index: The requested monitor index
        valid_range: Inclusive (first, last) range of valid indices
    """

    def __init__(self, index: int, display_count: int) -> None:
        self.index = index
        self.valid_range = (0, display_count - 1)

        super().__init__(
            f"Monitor {index} out of range (0-{display_count - 1})",
            error_code="MONITOR_OUT_OF_RANGE",
            context={"index": index, "valid_range": self.valid_range},
        )


class InvalidRegion(CaptureException):
    """Raised when a region specification is malformed or empty."""

    def __init__(self, reason: str, value: str | None = None) -> None:
        message = f"Invalid region: {reason}"
        if value is not None:
            message += f" (got {value!r})"

        super().__init__(
            message,
            error_code="INVALID_REGION",
            context={"reason": reason, "value": value},
        )


class CaptureBackendError(CaptureException):
    """Raised when the underlying capture mechanism fails."""

    def __init__(self, strategy: str, operation: str, reason: str) -> None:
        self.strategy = strategy
        self.operation = operation

        super().__init__(
            f"{strategy} {operation} failed: {reason}",
            error_code="CAPTURE_BACKEND_FAILED",
            context={"strategy": strategy, "operation": operation, "reason": reason},
        )


class OutputError(DeskshotException):
    """Raised when the encoded image cannot be written to its sink."""

    def __init__(self, reason: str, path: str | None = None) -> None:
        message = "Failed to write screenshot"
        if path is not None:
            message += f" to {path}"
        message += f": {reason}"

        super().__init__(
            message,
            error_code="OUTPUT_FAILED",
            context={"reason": reason, "path": path},
        )


class ViewerLaunchError(DeskshotException):
    """Raised when the default image viewer cannot be started."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Failed to open {path} in viewer: {reason}",
            error_code="VIEWER_FAILED",
            context={"path": path, "reason": reason},
        )


@contextmanager
def backend_error_context(strategy: str, operation: str) -> Iterator[None]:
    """Context manager to add strategy context to backend exceptions.

    Usage:
        with backend_error_context("mss", "capture_rect"):
            sct.grab(bbox)

    Args:
        strategy: Name of the capture strategy
        operation: Strategy operation being performed

    Raises:
        CaptureBackendError: Wraps non-deskshot exceptions with strategy context
    """
    try:
        yield
    except DeskshotException:
        raise
    except Exception as e:
        raise CaptureBackendError(strategy, operation, str(e) or type(e).__name__) from e
