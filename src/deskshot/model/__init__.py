"""Data model for capture requests and screen geometry."""

from .region import Region
from .request import ALL_MONITORS, CaptureRequest

__all__ = ["ALL_MONITORS", "CaptureRequest", "Region"]
