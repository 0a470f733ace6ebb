"""Configuration module for emitkit."""

from emitkit.config.logging import configure_logging, get_logger
from emitkit.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_logger", "get_settings"]
