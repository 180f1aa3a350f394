"""Configuration module for squid."""

from .layout_config import ChartLayoutConfig, DEFAULT_LAYOUT
from .settings import ChartSettings, DEFAULT_SETTINGS, InvalidSettingsError

__all__ = [
    "ChartLayoutConfig",
    "DEFAULT_LAYOUT",
    "ChartSettings",
    "DEFAULT_SETTINGS",
    "InvalidSettingsError",
]
