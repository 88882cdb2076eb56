"""Timetable enumeration engine.

Given selected courses, each offering several faculty/slot combinations and
optionally a separate lab component, the engine enumerates every way to pick
one theory option (and one lab option where the course has labs) per course
so that no two chosen slots overlap.

Main classes:
- TimetableGenerator: Backtracking enumerator with result cap and statistics
- generate_timetables: Functional entry point returning the timetable list

Usage:
    from timetable_planner.scheduler import TimetableGenerator

    generator = TimetableGenerator(slot_timings)
    result = generator.generate(courses, faculty_preferences={"CSE101": ["Smith"]})
"""

from .algorithm import TimetableGenerator, generate_timetables
from .conflicts import conflicts_with_any, find_missing_slots, parse_time, slots_overlap
from .constants import INTERRUPT_CHECK_INTERVAL, MAX_TIMETABLES
from .exporter import export_result_json
from .models import (
    CourseOptions,
    GenerationResult,
    GenerationStatistics,
    ScheduledCourse,
    SlotOption,
    Timetable,
)
from .options import build_course_options, derive_lab_options, derive_theory_options
from .utils import (
    canonical_key,
    count_combinations,
    describe_slot,
    is_duplicate,
    materialize_timetable,
    total_credits,
)

__all__ = [
    # Generator
    "TimetableGenerator",
    "generate_timetables",
    # Models
    "CourseOptions",
    "GenerationResult",
    "GenerationStatistics",
    "ScheduledCourse",
    "SlotOption",
    "Timetable",
    # Overlap detection
    "conflicts_with_any",
    "find_missing_slots",
    "parse_time",
    "slots_overlap",
    # Option extraction
    "build_course_options",
    "derive_lab_options",
    "derive_theory_options",
    # Deduplication and materialization
    "canonical_key",
    "count_combinations",
    "describe_slot",
    "is_duplicate",
    "materialize_timetable",
    "total_credits",
    # Export
    "export_result_json",
    # Constants
    "INTERRUPT_CHECK_INTERVAL",
    "MAX_TIMETABLES",
]
