"""deskshot - screenshots of monitors or screen regions.

Selects a platform capture strategy, resolves the requested monitor or
region, and writes the result as PNG.

Example:
    >>> from deskshot import CaptureRequest, CompressionLevel, ScreenCapturer, write_to_file
    >>> image = ScreenCapturer().capture(CaptureRequest(monitor_index=0))
    >>> write_to_file(image, CompressionLevel.FAST, "monitor0.png")
"""

__version__ = "0.1.0"

from .base_exceptions import ConfigurationError, DeskshotException  # noqa: E402
from .capture import ScreenCapturer  # noqa: E402
from .capture_exceptions import (  # noqa: E402
    CaptureBackendError,
    CaptureException,
    InvalidRegion,
    MonitorOutOfRange,
    NoActiveDisplays,
    NoStrategyAvailable,
    OutputError,
    ViewerLaunchError,
)
from .hal import HALConfig, ICaptureStrategy, Monitor, StrategyRegistry, create_registry  # noqa: E402
from .model import ALL_MONITORS, CaptureRequest, Region  # noqa: E402
from .output import (  # noqa: E402
    CompressionLevel,
    default_filename,
    encode_bytes,
    encode_to,
    open_in_viewer,
    write_to_file,
)

__all__ = [
    "ALL_MONITORS",
    "CaptureBackendError",
    "CaptureException",
    "CaptureRequest",
    "CompressionLevel",
    "ConfigurationError",
    "DeskshotException",
    "HALConfig",
    "ICaptureStrategy",
    "InvalidRegion",
    "Monitor",
    "MonitorOutOfRange",
    "NoActiveDisplays",
    "NoStrategyAvailable",
    "OutputError",
    "Region",
    "ScreenCapturer",
    "StrategyRegistry",
    "ViewerLaunchError",
    "create_registry",
    "default_filename",
    "encode_bytes",
    "encode_to",
    "open_in_viewer",
    "write_to_file",
]
