"""Hardware Abstraction Layer for deskshot.

This module provides abstraction over the platform capture mechanisms,
allowing the mechanism to be chosen at runtime via environment variables.
"""

from .config import HALConfig, get_config, reset_config, set_config
from .display import current_display, display_target
from .initialization import create_registry
from .interfaces import ICaptureStrategy, Monitor
from .registry import StrategyRegistry

__all__ = [
    "HALConfig",
    "ICaptureStrategy",
    "Monitor",
    "StrategyRegistry",
    "create_registry",
    "current_display",
    "display_target",
    "get_config",
    "reset_config",
    "set_config",
]
