"""Course catalog loading."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .constants import build_default_slot_timings
from .exceptions import CourseNotFoundError, InvalidCatalogError, InvalidSlotTimingError
from .models import Course, SlotTime, SlotTimings
from .validators import validate_slot_time

logger = logging.getLogger(__name__)


@dataclass
class Catalog:
    """Courses and slot timings loaded from one catalog file."""

    courses: list[Course] = field(default_factory=list)
    slot_timings: SlotTimings = field(default_factory=dict)

    def get_course(self, code: str) -> Course | None:
        """Get a course by code."""
        for course in self.courses:
            if course.code == code:
                return course
        return None

    @property
    def course_codes(self) -> list[str]:
        """Course codes in catalog order."""
        return [c.code for c in self.courses]


def parse_slot_timings(raw: dict[str, Any]) -> SlotTimings:
    """Parse a slot timing mapping.

    Args:
        raw: Mapping of slot code to a list of {"day", "start", "end"} entries

    Returns:
        Slot code to SlotTime list mapping

    Raises:
        InvalidSlotTimingError: If an entry is not a list of complete objects,
            or an occurrence has a bad day or time
    """
    timings: SlotTimings = {}
    for slot, entries in raw.items():
        slot = str(slot).strip()
        if not isinstance(entries, list):
            raise InvalidSlotTimingError(slot, "expected a list of occurrences")
        occurrences = []
        for entry in entries:
            try:
                slot_time = SlotTime.from_dict(entry)
            except (KeyError, TypeError) as e:
                raise InvalidSlotTimingError(slot, f"incomplete occurrence {entry!r}") from e
            is_valid, error = validate_slot_time(slot_time)
            if not is_valid:
                raise InvalidSlotTimingError(slot, error)
            occurrences.append(slot_time)
        timings[slot] = occurrences
    return timings


def default_slot_timings() -> SlotTimings:
    """Slot timings for the built-in weekly grid."""
    return parse_slot_timings(build_default_slot_timings())


def parse_courses(raw: list[dict[str, Any]]) -> list[Course]:
    """Parse a list of course dictionaries, filling missing fields.

    Entries that are not objects are skipped.

    Raises:
        ValueError: If a course has non-numeric credits
    """
    return [Course.from_dict(item) for item in raw if isinstance(item, dict)]


def parse_catalog(data: Any, path: str | None = None) -> Catalog:
    """Build a Catalog from decoded JSON.

    An absent or empty "slots" object selects the built-in slot grid.

    Raises:
        InvalidCatalogError: If the data has no "courses" array or a course
            entry cannot be read
        InvalidSlotTimingError: If a slot timing entry is malformed
    """
    if not isinstance(data, dict) or not isinstance(data.get("courses"), list):
        raise InvalidCatalogError("expected an object with a 'courses' array", path)

    try:
        courses = parse_courses(data["courses"])
    except ValueError as e:
        raise InvalidCatalogError(str(e), path) from e
    raw_slots = data.get("slots") or {}
    if not isinstance(raw_slots, dict):
        raise InvalidCatalogError("'slots' must be an object", path)

    if raw_slots:
        slot_timings = parse_slot_timings(raw_slots)
    else:
        logger.info("Catalog has no slot timings, using the default grid")
        slot_timings = default_slot_timings()

    return Catalog(courses=courses, slot_timings=slot_timings)


def load_catalog(path: Path | str) -> Catalog:
    """Load a catalog JSON file.

    Args:
        path: Path to a JSON file of the form {"courses": [...], "slots": {...}}

    Returns:
        Loaded Catalog

    Raises:
        InvalidCatalogError: If the file is not valid catalog JSON
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidCatalogError(f"failed to parse JSON ({e.msg})", str(path)) from e

    catalog = parse_catalog(data, str(path))
    logger.info(f"Loaded {len(catalog.courses)} courses from {path.name}")
    return catalog


def select_courses(catalog: Catalog, codes: list[str] | None = None) -> list[Course]:
    """Select courses by code, keeping the requested order.

    No codes selects every course in catalog order.

    Raises:
        CourseNotFoundError: If any code is not in the catalog
    """
    if not codes:
        return list(catalog.courses)

    missing = [code for code in codes if catalog.get_course(code) is None]
    if missing:
        raise CourseNotFoundError(missing)

    return [catalog.get_course(code) for code in dict.fromkeys(codes)]
