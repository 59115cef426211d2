"""MSS-based capture strategy."""

import mss
from mss.exception import ScreenShotError
from PIL import Image

from ...capture_exceptions import backend_error_context
from ...logging import get_logger
from ...model.region import Region
from ..interfaces.screen_capture import ICaptureStrategy

logger = get_logger(__name__)


def _physical_monitors(monitors: list[dict[str, int]]) -> list[dict[str, int]]:
    """Drop the combined virtual screen (monitors[0]) and outputs with no area."""
    physical = []
    for mon in monitors[1:]:
        # Disconnected outputs can still be reported with a zero size
        if mon["width"] <= 0 or mon["height"] <= 0:
            logger.debug("mss_monitor_skipped", monitor=dict(mon))
            continue
        physical.append(mon)
    return physical


class MSSCaptureStrategy(ICaptureStrategy):
    """Fast capture strategy using MSS.

    MSS talks to the windowing system directly (XGetImage on X11, GDI on
    Windows, CoreGraphics on macOS). A fresh MSS session is opened for every
    call so that the current $DISPLAY is honoured; sessions are cheap and
    are closed before the call returns.
    """

    @property
    def name(self) -> str:
        return "mss"

    def is_available(self) -> bool:
        """Check that the windowing system can be reached and has a monitor.

        Returns:
            True if MSS reports at least one physical monitor
        """
        try:
            with mss.mss() as sct:
                count = len(_physical_monitors(sct.monitors))
        except ScreenShotError as e:
            logger.debug("mss_unavailable", error=str(e))
            return False

        return count > 0

    def list_displays(self) -> list[Region]:
        """Enumerate physical monitors.

        Returns:
            Monitor bounds in virtual-screen coordinates
        """
        with backend_error_context(self.name, "list_displays"):
            with mss.mss() as sct:
                displays = [
                    Region(mon["left"], mon["top"], mon["width"], mon["height"])
                    for mon in _physical_monitors(sct.monitors)
                ]

        logger.debug("mss_displays_listed", count=len(displays))
        return displays

    def capture_rect(self, region: Region) -> Image.Image:
        """Capture a rectangle of the virtual screen.

        Args:
            region: Rectangle to capture

        Returns:
            RGB image of the rectangle
        """
        with backend_error_context(self.name, "capture_rect"):
            with mss.mss() as sct:
                sct_img = sct.grab(
                    {
                        "left": region.x,
                        "top": region.y,
                        "width": region.width,
                        "height": region.height,
                    }
                )
                image = Image.frombytes("RGB", sct_img.size, sct_img.bgra, "raw", "BGRX")

        logger.debug("mss_region_captured", region=region.as_bbox(), size=image.size)
        return image
