"""Slot timing configuration loader."""

import json
from pathlib import Path

from ..catalog import default_slot_timings, parse_slot_timings
from ..models import SlotTimings


class SlotTimingConfig:
    """Loader for slot timings from slot-timings.json.

    Falls back to the built-in weekly grid when no file is configured.
    """

    def __init__(self, timings_path: Path | None = None):
        self.is_default = True
        self.timings: SlotTimings = {}

        if timings_path and timings_path.exists():
            self._load(timings_path)
        else:
            self.timings = default_slot_timings()

    def _load(self, path: Path) -> None:
        """Load slot timings from JSON file."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        self.timings = parse_slot_timings(data)
        self.is_default = False

    def get_timings(self) -> SlotTimings:
        """Get the slot code to occurrences mapping."""
        return self.timings

    def get_slot_codes(self) -> list[str]:
        """Get all configured slot codes."""
        return list(self.timings.keys())
