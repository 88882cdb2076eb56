"""Test fixtures for timetable planner tests."""

import json

import pytest

from timetable_planner.catalog import default_slot_timings
from timetable_planner.models import Course, Section, SlotTime


def make_course(code: str, *sections: tuple, credits: int = 3) -> Course:
    """Build a course from (faculty, theory_slot[, lab_slot[, lab_faculty]]) tuples."""
    built = []
    for entry in sections:
        faculty, theory_slot, *rest = entry
        lab_slot = rest[0] if len(rest) > 0 else None
        lab_faculty = rest[1] if len(rest) > 1 else None
        built.append(
            Section(
                course_code=code,
                faculty=faculty,
                theory_slot=theory_slot,
                lab_slot=lab_slot,
                lab_faculty=lab_faculty,
            )
        )
    return Course(code=code, title=f"Course {code}", credits=credits, sections=built)


@pytest.fixture
def course_factory():
    """Factory for courses built from section tuples."""
    return make_course


@pytest.fixture
def slot_timings():
    """The built-in weekly slot grid."""
    return default_slot_timings()


@pytest.fixture
def simple_timings():
    """Hand-written timings with one pair of touching blocks."""
    return {
        "X": [SlotTime(day="MON", start="09:00", end="10:00")],
        "Y": [SlotTime(day="MON", start="10:00", end="11:00")],
        "Z": [
            SlotTime(day="MON", start="09:30", end="10:30"),
            SlotTime(day="WED", start="09:00", end="10:00"),
        ],
        "W": [SlotTime(day="TUE", start="09:00", end="10:00")],
    }


@pytest.fixture
def sample_catalog_data():
    """Catalog JSON in the upload format, using the default grid."""
    return {
        "courses": [
            {
                "code": "CSE2001",
                "title": "Data Structures",
                "credits": 4,
                "sections": [
                    {"faculty": "Dr. Monit", "theorySlot": "B1", "labSlot": "L25+L26"},
                    {"faculty": "Dr. Priya", "theorySlot": "A2", "labSlot": "L1+L2"},
                ],
            },
            {
                "code": "MAT2002",
                "title": "Discrete Mathematics",
                "credits": 3,
                "sections": [
                    {"faculty": "Dr. Rao", "theorySlot": "C1"},
                    {"faculty": "Dr. Lee", "theorySlot": "B1"},
                ],
            },
        ],
        "slots": {},
    }


@pytest.fixture
def catalog_file(tmp_path, sample_catalog_data):
    """Write the sample catalog to a temporary JSON file."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(sample_catalog_data), encoding="utf-8")
    return path
