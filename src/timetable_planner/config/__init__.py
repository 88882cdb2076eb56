"""Configuration loaders for the planner."""

from .loader import DEFAULT_CONFIG_DIR, ConfigLoader
from .preferences import PreferenceConfig
from .slots import SlotTimingConfig

__all__ = [
    "ConfigLoader",
    "DEFAULT_CONFIG_DIR",
    "PreferenceConfig",
    "SlotTimingConfig",
]
