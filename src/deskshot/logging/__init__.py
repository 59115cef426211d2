"""Logging module for deskshot."""

from .logger import get_logger, setup_logging, setup_logging_from_env

__all__ = [
    "setup_logging",
    "setup_logging_from_env",
    "get_logger",
]
