"""Slot overlap detection for schedule generation."""

from collections.abc import Iterable

from ..models import SlotTime, SlotTimings, parse_time

__all__ = [
    "conflicts_with_any",
    "find_missing_slots",
    "parse_time",
    "slots_overlap",
    "times_overlap",
]


def times_overlap(first: SlotTime, second: SlotTime) -> bool:
    """Check if two weekly occurrences overlap.

    Intervals are half-open, so a block ending at 10:00 does not conflict
    with one starting at 10:00.
    """
    if first.day != second.day:
        return False
    return (
        first.start_minutes < second.end_minutes
        and second.start_minutes < first.end_minutes
    )


def slots_overlap(slot_a: str, slot_b: str, slot_timings: SlotTimings) -> bool:
    """Check whether two slot codes occupy conflicting time.

    Identical codes always conflict. When either code has no entry in the
    timing table the slots are treated as non-overlapping; callers that need
    strict checking should look for missing entries with find_missing_slots.

    Args:
        slot_a: First slot code (e.g. 'A1')
        slot_b: Second slot code (e.g. 'L1+L2')
        slot_timings: Slot code to weekly occurrences mapping

    Returns:
        True if any pair of occurrences shares a day and overlaps in time
    """
    if not slot_a or not slot_b:
        return False
    if slot_a == slot_b:
        return True

    times_a = slot_timings.get(slot_a)
    times_b = slot_timings.get(slot_b)
    if not times_a or not times_b:
        return False

    for first in times_a:
        for second in times_b:
            if times_overlap(first, second):
                return True
    return False


def conflicts_with_any(
    candidate: str, occupied: Iterable[str], slot_timings: SlotTimings
) -> bool:
    """Check if a slot conflicts with any already occupied slot."""
    for slot in occupied:
        if slots_overlap(candidate, slot, slot_timings):
            return True
    return False


def find_missing_slots(slots: Iterable[str], slot_timings: SlotTimings) -> list[str]:
    """Return slot codes that have no timing entry, in first-seen order."""
    missing: list[str] = []
    for slot in slots:
        if slot and not slot_timings.get(slot) and slot not in missing:
            missing.append(slot)
    return missing
