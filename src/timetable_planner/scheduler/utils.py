"""Utility functions for timetable generation."""

from collections.abc import Iterable, Sequence

from ..models import Course, SlotTimings
from .constants import FIELD_SEPARATOR, KEY_SEPARATOR, NO_LAB
from .models import CourseOptions, ScheduledCourse, Timetable


def _escape_field(value: str) -> str:
    """Backslash-escape the characters that delimit key fields and tokens."""
    for char in ("\\", FIELD_SEPARATOR, KEY_SEPARATOR):
        value = value.replace(char, "\\" + char)
    return value


def assignment_token(scheduled: ScheduledCourse) -> str:
    """Format one course assignment as a canonical key token.

    Example: 'CSE101:Smith:A1:none:none'. A ':', '|' or backslash inside a
    field is escaped with a backslash, so distinct assignments never share
    a token.
    """
    return FIELD_SEPARATOR.join(
        _escape_field(field)
        for field in (
            scheduled.course_code,
            scheduled.theory_faculty,
            scheduled.theory_slot,
            scheduled.lab_faculty or NO_LAB,
            scheduled.lab_slot or NO_LAB,
        )
    )


def canonical_key(assignment: Iterable[ScheduledCourse]) -> str:
    """Build an order-independent identity key for a complete assignment.

    Tokens are sorted so two assignments listing the same courses in a
    different order share a key.
    """
    return KEY_SEPARATOR.join(sorted(assignment_token(sc) for sc in assignment))


def is_duplicate(key: str, seen: set[str]) -> bool:
    """Check a key against the seen set, recording it when new."""
    if key in seen:
        return True
    seen.add(key)
    return False


def materialize_timetable(
    timetable_id: int, assignment: Sequence[ScheduledCourse]
) -> Timetable:
    """Build the output timetable for an accepted assignment."""
    scheduled = tuple(assignment)
    return Timetable(
        id=timetable_id,
        sections=tuple(sc.to_section() for sc in scheduled),
        scheduled_courses=scheduled,
    )


def count_combinations(course_options: Iterable[CourseOptions]) -> int:
    """Size of the unpruned search space (product of option counts)."""
    total = 1
    for options in course_options:
        total *= len(options.theory_options)
        if options.has_lab:
            total *= len(options.lab_options)
    return total


def total_credits(courses: Iterable[Course]) -> int:
    """Sum of credits over the selected courses."""
    return sum(course.credits for course in courses)


def describe_slot(slot_code: str, slot_timings: SlotTimings) -> str:
    """Readable timing for a slot, e.g. 'MON 09:00-09:50, WED 09:55-10:45'.

    Returns the slot code itself when it has no timing entry.
    """
    timings = slot_timings.get(slot_code)
    if not timings:
        return slot_code
    return ", ".join(f"{t.day} {t.start}-{t.end}" for t in timings)
