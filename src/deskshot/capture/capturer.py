"""Screen capturer.

Turns a CaptureRequest into an image: selects the active strategy,
resolves which rectangle of the virtual screen to grab, and runs the grab
with the requested display target in place.
"""

from PIL import Image

from ..capture_exceptions import MonitorOutOfRange, NoActiveDisplays, backend_error_context
from ..hal.config import HALConfig, get_config
from ..hal.display import display_target
from ..hal.initialization import create_registry
from ..hal.interfaces.screen_capture import ICaptureStrategy, Monitor
from ..hal.registry import StrategyRegistry
from ..logging import get_logger
from ..model.region import Region
from ..model.request import ALL_MONITORS, CaptureRequest

logger = get_logger(__name__)


class ScreenCapturer:
    """Captures screenshots through the first available strategy.

    The strategy is selected on first use and reused afterwards. Every
    public call runs inside display_target(), so a display override, or
    the fallback display applied for detached sessions, never outlives the
    call.

    Example:
        >>> capturer = ScreenCapturer()
        >>> image = capturer.capture(CaptureRequest(monitor_index=0))
        >>> monitors = capturer.list_monitors()
    """

    def __init__(
        self, registry: StrategyRegistry | None = None, config: HALConfig | None = None
    ) -> None:
        """Initialize the capturer.

        Args:
            registry: Strategy candidates. Built from config if None.
            config: HAL configuration. Uses the global config if None.
        """
        self.config = config or get_config()
        self.registry = registry if registry is not None else create_registry(self.config)
        self._strategy: ICaptureStrategy | None = None

    def _active_strategy(self) -> ICaptureStrategy:
        if self._strategy is None:
            self._strategy = self.registry.active_strategy()
        return self._strategy

    def strategy_name(self, display_override: str = "") -> str:
        """Get the name of the strategy captures go through.

        Raises:
            NoStrategyAvailable: If no strategy is available
        """
        with display_target(display_override, self.config.fallback_display):
            return self._active_strategy().name

    def capture(self, request: CaptureRequest) -> Image.Image:
        """Capture the screen as described by the request.

        Args:
            request: What to capture

        Returns:
            RGB image of the resolved rectangle

        Raises:
            NoStrategyAvailable: If no strategy can run here
            NoActiveDisplays: If the strategy reports no displays
            MonitorOutOfRange: If the requested monitor does not exist
            CaptureBackendError: If the strategy fails
        """
        with display_target(request.display_override, self.config.fallback_display) as display:
            strategy = self._active_strategy()

            if request.region is not None:
                target = request.region
            else:
                target = self._resolve_target(strategy, request.monitor_index)

            logger.info(
                "capture_started",
                strategy=strategy.name,
                display=display,
                monitor=None if request.region is not None else request.monitor_index,
                region=target.as_bbox(),
            )

            with backend_error_context(strategy.name, "capture_rect"):
                image = strategy.capture_rect(target)

        logger.info("capture_completed", strategy=strategy.name, size=image.size)
        return image

    def list_monitors(self, display_override: str = "") -> list[Monitor]:
        """Enumerate the monitors of the display target.

        Args:
            display_override: Display to enumerate instead of the ambient one

        Returns:
            One Monitor per display, indexed in enumeration order

        Raises:
            NoStrategyAvailable: If no strategy can run here
            NoActiveDisplays: If the strategy reports no displays
        """
        with display_target(display_override, self.config.fallback_display):
            strategy = self._active_strategy()
            displays = self._list_displays(strategy)

        return [
            Monitor(index=i, display_name=f"Display {i}", bounds=bounds)
            for i, bounds in enumerate(displays)
        ]

    def _resolve_target(self, strategy: ICaptureStrategy, monitor_index: int) -> Region:
        displays = self._list_displays(strategy)

        if monitor_index == ALL_MONITORS:
            # Bounding box of all monitors; gaps between them are captured as-is
            return Region.union(displays)

        if not 0 <= monitor_index < len(displays):
            raise MonitorOutOfRange(monitor_index, len(displays))

        return displays[monitor_index]

    def _list_displays(self, strategy: ICaptureStrategy) -> list[Region]:
        with backend_error_context(strategy.name, "list_displays"):
            displays = list(strategy.list_displays())

        if not displays:
            raise NoActiveDisplays(strategy.name)
        return displays
