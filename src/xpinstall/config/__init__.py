"""Configuration management."""

from .loader import ConfigLoader
from .schema import XPInstallConfig, InstallConfig, LoggingConfig

__all__ = [
    "ConfigLoader",
    "XPInstallConfig",
    "InstallConfig",
    "LoggingConfig",
]
