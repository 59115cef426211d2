"""HAL initialization.

Builds the strategy registry from configuration. This should be called
once at application startup.
"""

from collections.abc import Callable

from .config import CaptureBackend, HALConfig, get_config
from .interfaces.screen_capture import ICaptureStrategy
from .registry import StrategyRegistry


def _create_mss_strategy() -> ICaptureStrategy:
    from .implementations.mss_capture import MSSCaptureStrategy

    return MSSCaptureStrategy()


def _create_pillow_strategy() -> ICaptureStrategy:
    from .implementations.pillow_capture import PillowCaptureStrategy

    return PillowCaptureStrategy()


_STRATEGY_FACTORIES: dict[str, Callable[[], ICaptureStrategy]] = {
    CaptureBackend.MSS.value: _create_mss_strategy,
    CaptureBackend.PILLOW.value: _create_pillow_strategy,
}


def create_registry(config: HALConfig | None = None) -> StrategyRegistry:
    """Create a registry holding the configured capture strategies.

    Args:
        config: HAL configuration. If None, uses the global config.

    Returns:
        StrategyRegistry with one strategy per configured backend, in the
        configured order

    Raises:
        ConfigurationError: If the configuration is invalid

    Example:
        >>> registry = create_registry(HALConfig(capture_backends=["pillow"]))
        >>> registry.names()
        ['pillow']
    """
    if config is None:
        config = get_config()
    config.validate()

    registry = StrategyRegistry()
    for backend in config.capture_backends:
        registry.register(_STRATEGY_FACTORIES[backend]())

    return registry
