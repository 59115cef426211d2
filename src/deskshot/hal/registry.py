"""Capture strategy registry.

Holds the capture mechanisms compiled into this build in priority order
and picks the one to use. New mechanisms are added by registering another
candidate; callers never branch on the strategy type.
"""

from ..capture_exceptions import NoStrategyAvailable
from ..logging import get_logger
from .interfaces.screen_capture import ICaptureStrategy

logger = get_logger(__name__)


class StrategyRegistry:
    """Ordered set of capture strategy candidates.

    Example:
        >>> registry = StrategyRegistry()
        >>> registry.register(MSSCaptureStrategy())
        >>> registry.register(PillowCaptureStrategy())
        >>> strategy = registry.active_strategy()
    """

    def __init__(self) -> None:
        self._strategies: list[ICaptureStrategy] = []

    def register(self, strategy: ICaptureStrategy) -> None:
        """Add a candidate. Earlier registrations take precedence.

        Args:
            strategy: Strategy to add
        """
        self._strategies.append(strategy)
        logger.debug(
            "strategy_registered", strategy=strategy.name, priority=len(self._strategies) - 1
        )

    def names(self) -> list[str]:
        """Get the names of all registered strategies in priority order."""
        return [s.name for s in self._strategies]

    def available_strategies(self) -> list[ICaptureStrategy]:
        """Get the registered strategies that can currently run.

        Availability is probed on every call. A probe that raises counts as
        unavailable.

        Returns:
            Available strategies in registration order
        """
        return [s for s in self._strategies if self._probe(s)]

    def active_strategy(self) -> ICaptureStrategy:
        """Get the first available strategy in registration order.

        Returns:
            Strategy to capture with

        Raises:
            NoStrategyAvailable: If no registered strategy is available
        """
        for strategy in self._strategies:
            if self._probe(strategy):
                logger.debug("strategy_selected", strategy=strategy.name)
                return strategy

        raise NoStrategyAvailable(self.names())

    def _probe(self, strategy: ICaptureStrategy) -> bool:
        try:
            return bool(strategy.is_available())
        except Exception as e:
            logger.warning("strategy_probe_failed", strategy=strategy.name, error=str(e))
            return False

    def __len__(self) -> int:
        return len(self._strategies)
