"""Validation logic for course catalogs and slot timings."""

import re

from .constants import DAYS
from .models import Course, SlotTime, SlotTimings
from .scheduler.conflicts import find_missing_slots

TIME_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def validate_time(value: str) -> tuple[bool, str | None]:
    """Validate an 'HH:MM' time string.

    Args:
        value: Time string to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not value:
        return False, "Time is empty"

    if not TIME_PATTERN.match(str(value).strip()):
        return False, f"Invalid time: '{value}'. Expected HH:MM"

    return True, None


def validate_day(day: str) -> tuple[bool, str | None]:
    """Validate a day code (MON..FRI)."""
    if not day:
        return False, "Day is empty"

    if str(day).strip().upper() not in DAYS:
        return False, f"Invalid day: '{day}'. Expected: {', '.join(DAYS)}"

    return True, None


def validate_slot_time(slot_time: SlotTime) -> tuple[bool, str | None]:
    """Validate one weekly occurrence of a slot.

    Args:
        slot_time: Occurrence to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    for check in (
        validate_day(slot_time.day),
        validate_time(slot_time.start),
        validate_time(slot_time.end),
    ):
        if not check[0]:
            return check

    if slot_time.start_minutes >= slot_time.end_minutes:
        return False, f"Start {slot_time.start} is not before end {slot_time.end}"

    return True, None


def validate_course(course: Course) -> tuple[bool, str | None]:
    """Validate that a course can be scheduled at all."""
    if not course.sections:
        return False, f"Course {course.code} has no sections"

    if not any(s.theory_slot for s in course.sections):
        return False, f"Course {course.code} has no theory slot in any section"

    return True, None


def validate_catalog(courses: list[Course], slot_timings: SlotTimings) -> dict:
    """Validate courses against a slot timing table.

    Slot codes without timing data are reported as warnings: generation still
    runs but cannot detect overlaps for those slots.

    Returns:
        Dictionary with keys 'valid', 'errors' and 'warnings'
    """
    errors: list[str] = []
    warnings: list[str] = []

    for slot, occurrences in slot_timings.items():
        for occurrence in occurrences:
            is_valid, error = validate_slot_time(occurrence)
            if not is_valid:
                errors.append(f"Slot {slot}: {error}")

    seen_codes: set[str] = set()
    for course in courses:
        if course.code in seen_codes:
            warnings.append(f"Duplicate course code: {course.code}")
        seen_codes.add(course.code)

        is_valid, error = validate_course(course)
        if not is_valid:
            warnings.append(error)

    referenced = [slot for course in courses for slot in course.slots]
    for slot in find_missing_slots(referenced, slot_timings):
        warnings.append(f"No timing data for slot {slot}")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }
