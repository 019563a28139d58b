"""Configuration subpackage."""

from dust_burner.config.config import (
    AppSettings,
    BurnerSettings,
    LoggingSettings,
    NetworkSettings,
    NodeSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "BurnerSettings",
    "LoggingSettings",
    "NetworkSettings",
    "NodeSettings",
    "Settings",
    "get_settings",
]
