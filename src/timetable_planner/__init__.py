"""Timetable Planner - conflict-free weekly class timetable generation.

This module enumerates every way to pick one faculty/slot offering per
selected course (plus a lab offering where the course has labs) so that no
two chosen slots overlap in the weekly grid.

Example usage:
    from timetable_planner import load_catalog, TimetableGenerator

    catalog = load_catalog("catalog.json")
    generator = TimetableGenerator(catalog.slot_timings)
    result = generator.generate(catalog.courses, {"CSE101": ["Dr. Smith"]})

    print(f"Timetables: {result.total_timetables}")

    for timetable in result.timetables:
        for sc in timetable.scheduled_courses:
            print(f"{timetable.id} | {sc.course_code} | {sc.theory_slot} | {sc.theory_faculty}")

    # Export to JSON
    from timetable_planner.exporters import JSONExporter
    exporter = JSONExporter()
    exporter.export(result, "output.json")
"""

from .catalog import Catalog, default_slot_timings, load_catalog, parse_catalog, select_courses
from .exceptions import (
    CourseNotFoundError,
    InvalidCatalogError,
    InvalidSlotTimingError,
    MissingSlotTimingError,
    PlannerError,
)
from .exporters import CSVExporter, ExcelExporter, JSONExporter, get_exporter
from .models import Course, Section, SlotTime, SlotTimings
from .scheduler import (
    GenerationResult,
    ScheduledCourse,
    Timetable,
    TimetableGenerator,
    generate_timetables,
)

__version__ = "0.1.0"

__all__ = [
    # Generation
    "TimetableGenerator",
    "generate_timetables",
    # Catalog
    "Catalog",
    "default_slot_timings",
    "load_catalog",
    "parse_catalog",
    "select_courses",
    # Models
    "Course",
    "Section",
    "SlotTime",
    "SlotTimings",
    "GenerationResult",
    "ScheduledCourse",
    "Timetable",
    # Exporters
    "JSONExporter",
    "CSVExporter",
    "ExcelExporter",
    "get_exporter",
    # Exceptions
    "PlannerError",
    "InvalidCatalogError",
    "CourseNotFoundError",
    "InvalidSlotTimingError",
    "MissingSlotTimingError",
]
