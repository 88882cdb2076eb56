"""Faculty preference configuration loader."""

import json
from pathlib import Path


class PreferenceConfig:
    """Loader for per-course faculty preferences.

    Expected JSON format:
        {"CSE101": ["Dr. Smith", "Dr. Rao"], "MAT201": ["Dr. Lee"]}

    Preferences are best-effort: a course whose preferred faculty teach no
    section is scheduled with all of its sections.
    """

    def __init__(self, preferences_path: Path | None = None):
        self.preferences: dict[str, list[str]] = {}

        if preferences_path and preferences_path.exists():
            self._load(preferences_path)

    def _load(self, path: Path) -> None:
        """Load preferences from JSON file."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        for code, faculty in data.items():
            if isinstance(faculty, str):
                faculty = [faculty]
            names = [str(name).strip() for name in faculty or [] if str(name).strip()]
            if names:
                self.preferences[str(code).strip()] = names

    def get(self, course_code: str) -> list[str]:
        """Get preferred faculty for a course (empty means no preference)."""
        return self.preferences.get(course_code, [])

    def as_dict(self) -> dict[str, list[str]]:
        """Get all preferences keyed by course code."""
        return dict(self.preferences)

    def merge(self, other: "PreferenceConfig") -> None:
        """Override preferences with those from another config."""
        self.preferences.update(other.preferences)
