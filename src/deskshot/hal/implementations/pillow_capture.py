"""Pillow ImageGrab capture strategy.

Fallback for environments where MSS cannot be used. ImageGrab has no
monitor enumeration, so this strategy reports a single display covering
the default screen.
"""

import sys

from PIL import Image, ImageGrab

from ...capture_exceptions import backend_error_context
from ...logging import get_logger
from ...model.region import Region
from ..interfaces.screen_capture import ICaptureStrategy

logger = get_logger(__name__)


class PillowCaptureStrategy(ICaptureStrategy):
    """Capture strategy using PIL.ImageGrab."""

    @property
    def name(self) -> str:
        return "pillow"

    def is_available(self) -> bool:
        """Check whether ImageGrab can grab the screen here.

        Returns:
            True on Windows/macOS, or on Linux when Pillow has XCB support
            and the X server answers
        """
        if sys.platform in ("win32", "darwin"):
            return True

        if not getattr(Image.core, "HAVE_XCB", False):
            logger.debug("pillow_unavailable", reason="built without XCB support")
            return False

        try:
            ImageGrab.grab(bbox=(0, 0, 1, 1))
        except OSError as e:
            logger.debug("pillow_unavailable", error=str(e))
            return False

        return True

    def list_displays(self) -> list[Region]:
        """Report the default screen as the only display.

        Returns:
            Single-element list with the screen bounds
        """
        with backend_error_context(self.name, "list_displays"):
            width, height = ImageGrab.grab().size

        return [Region(0, 0, width, height)]

    def capture_rect(self, region: Region) -> Image.Image:
        """Capture a rectangle of the virtual screen.

        Args:
            region: Rectangle to capture

        Returns:
            RGB image of the rectangle
        """
        with backend_error_context(self.name, "capture_rect"):
            image = ImageGrab.grab(bbox=region.as_bbox(), all_screens=True)
            if image.mode != "RGB":
                image = image.convert("RGB")

        logger.debug("pillow_region_captured", region=region.as_bbox(), size=image.size)
        return image
