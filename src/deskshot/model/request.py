"""Capture request record."""

from dataclasses import dataclass

from .region import Region

ALL_MONITORS = -1


@dataclass(frozen=True)
class CaptureRequest:
    """What to capture.

    Attributes:
        monitor_index: Monitor to capture by enumeration order, or
            ALL_MONITORS for the bounding box of every monitor
        region: Explicit rectangle; when set, monitor_index is ignored
        display_override: Display target (e.g. ":1") for this capture only;
            empty means the ambient default
    """

    monitor_index: int = ALL_MONITORS
    region: Region | None = None
    display_override: str = ""

    @property
    def all_monitors(self) -> bool:
        return self.region is None and self.monitor_index == ALL_MONITORS
