"""Unified configuration loader."""

from pathlib import Path

from .preferences import PreferenceConfig
from .slots import SlotTimingConfig

DEFAULT_CONFIG_DIR = Path("data/reference")


class ConfigLoader:
    """Unified loader for all planner configuration files."""

    def __init__(self, config_dir: Path | None = None):
        """
        Initialize configuration loader.

        Args:
            config_dir: Path to directory containing configuration files.
                       Every file is optional:
                       - slot-timings.json (defaults to the built-in grid)
                       - faculty-preferences.json
                       - lab-faculty-preferences.json
        """
        if config_dir is None:
            config_dir = DEFAULT_CONFIG_DIR

        self.config_dir = Path(config_dir)

        self.slots = SlotTimingConfig(self._get_path("slot-timings.json"))
        self.faculty_preferences = PreferenceConfig(
            self._get_path("faculty-preferences.json")
        )
        self.lab_faculty_preferences = PreferenceConfig(
            self._get_path("lab-faculty-preferences.json")
        )

    def _get_path(self, filename: str) -> Path | None:
        """Get path to config file if it exists."""
        path = self.config_dir / filename
        return path if path.exists() else None
