"""HAL configuration management."""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..base_exceptions import ConfigurationError


class CaptureBackend(Enum):
    """Available screen capture backends."""

    MSS = "mss"
    PILLOW = "pillow"


COMPRESSION_NAMES = ("none", "raw", "fast", "balanced", "medium", "best")


def _split_backends(value: str) -> list[str]:
    return [name.strip().lower() for name in value.split(",") if name.strip()]


@dataclass
class HALConfig:
    """HAL configuration settings.

    Configuration can be set via:
    1. Environment variables (DESKSHOT_* prefix)
    2. Direct instantiation
    3. A dictionary (``from_dict``)
    """

    # Strategy candidates, highest priority first
    capture_backends: list[str] = field(
        default_factory=lambda: _split_backends(
            os.getenv("DESKSHOT_CAPTURE_BACKENDS", "mss,pillow")
        )
    )

    # Display target used when neither an override nor $DISPLAY is set (cron)
    fallback_display: str = field(
        default_factory=lambda: os.getenv("DESKSHOT_FALLBACK_DISPLAY", ":0")
    )

    # Output defaults
    screenshot_dir: str = field(default_factory=lambda: os.getenv("DESKSHOT_SCREENSHOT_DIR", "."))
    filename_prefix: str = field(
        default_factory=lambda: os.getenv("DESKSHOT_FILENAME_PREFIX", "screenshot")
    )
    default_compression: str = field(
        default_factory=lambda: os.getenv("DESKSHOT_COMPRESSION", "fast").lower()
    )

    def validate(self) -> bool:
        """Validate configuration settings.

        Returns:
            True if configuration is valid

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.capture_backends:
            raise ConfigurationError("at least one capture backend is required")

        known = [b.value for b in CaptureBackend]
        for backend in self.capture_backends:
            if backend not in known:
                raise ConfigurationError(
                    f"unknown capture backend: {backend}", capture_backends=self.capture_backends
                )

        if len(set(self.capture_backends)) != len(self.capture_backends):
            raise ConfigurationError(
                "capture backends must not repeat", capture_backends=self.capture_backends
            )

        if self.default_compression not in COMPRESSION_NAMES:
            raise ConfigurationError(f"unknown compression level: {self.default_compression}")

        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Configuration as dictionary
        """
        return {
            "capture_backends": list(self.capture_backends),
            "fallback_display": self.fallback_display,
            "screenshot_dir": self.screenshot_dir,
            "filename_prefix": self.filename_prefix,
            "default_compression": self.default_compression,
        }

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "HALConfig":
        """Create configuration from dictionary.

        Args:
            config_dict: Configuration dictionary

        Returns:
            HALConfig instance
        """
        return cls(**config_dict)

    def __str__(self) -> str:
        """String representation."""
        return (
            f"HALConfig(backends={','.join(self.capture_backends)}, "
            f"fallback_display={self.fallback_display!r})"
        )


# Global configuration instance
_config: HALConfig | None = None


def get_config() -> HALConfig:
    """Get global HAL configuration.

    Returns:
        HALConfig instance
    """
    global _config
    if _config is None:
        _config = HALConfig()
        _config.validate()
    return _config


def set_config(config: HALConfig) -> None:
    """Set global HAL configuration.

    Args:
        config: New configuration
    """
    global _config
    config.validate()
    _config = config


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _config
    _config = None
