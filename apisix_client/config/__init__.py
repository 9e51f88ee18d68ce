"""
Configuration package for the APISIX client.

This package provides configuration management with environment variable support.
"""

from .settings import (
    Settings,
    ClusterConfig,
    LoggingConfig,
    LogLevel,
    get_settings,
    reload_settings
)

__all__ = [
    # Settings classes
    "Settings",
    "ClusterConfig",
    "LoggingConfig",

    # Enums
    "LogLevel",

    # Settings functions
    "get_settings",
    "reload_settings"
]
