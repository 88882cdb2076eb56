"""Tests for validation functions."""

import pytest

from timetable_planner.models import Course, SlotTime
from timetable_planner.validators import (
    validate_catalog,
    validate_course,
    validate_day,
    validate_slot_time,
    validate_time,
)


class TestValidateTime:
    """Tests for validate_time function."""

    @pytest.mark.parametrize("value", ["09:00", "9:05", "23:59", "00:00"])
    def test_valid(self, value):
        assert validate_time(value) == (True, None)

    @pytest.mark.parametrize("value", ["", "24:00", "09:60", "0900", "9am"])
    def test_invalid(self, value):
        is_valid, error = validate_time(value)
        assert not is_valid
        assert error


class TestValidateDay:
    """Tests for validate_day function."""

    def test_valid(self):
        assert validate_day("mon") == (True, None)

    def test_invalid(self):
        is_valid, error = validate_day("SUN")
        assert not is_valid
        assert "SUN" in error


class TestValidateSlotTime:
    """Tests for validate_slot_time function."""

    def test_valid(self):
        assert validate_slot_time(SlotTime("MON", "09:00", "09:50")) == (True, None)

    def test_start_after_end(self):
        is_valid, error = validate_slot_time(SlotTime("MON", "10:00", "09:00"))
        assert not is_valid
        assert "not before" in error

    def test_bad_time_reported_before_ordering(self):
        is_valid, error = validate_slot_time(SlotTime("MON", "9am", "09:00"))
        assert not is_valid
        assert "Invalid time" in error


class TestValidateCourse:
    """Tests for validate_course function."""

    def test_no_sections(self):
        is_valid, error = validate_course(Course("A", "A"))
        assert not is_valid
        assert "no sections" in error

    def test_no_theory_slot(self):
        course = Course.from_dict({"code": "A", "sections": [{"faculty": "X"}]})
        assert not validate_course(course)[0]

    def test_valid(self, course_factory):
        assert validate_course(course_factory("A", ("X", "A1"))) == (True, None)


class TestValidateCatalog:
    """Tests for validate_catalog function."""

    def test_valid_catalog(self, course_factory, slot_timings):
        courses = [course_factory("A", ("X", "A1", "L1+L2"))]
        validation = validate_catalog(courses, slot_timings)
        assert validation == {"valid": True, "errors": [], "warnings": []}

    def test_missing_timing_is_warning(self, course_factory, slot_timings):
        courses = [course_factory("A", ("X", "Q1"))]
        validation = validate_catalog(courses, slot_timings)
        assert validation["valid"]
        assert validation["warnings"] == ["No timing data for slot Q1"]

    def test_duplicate_course_code(self, course_factory, slot_timings):
        courses = [course_factory("A", ("X", "A1")), course_factory("A", ("Y", "B1"))]
        validation = validate_catalog(courses, slot_timings)
        assert "Duplicate course code: A" in validation["warnings"]

    def test_bad_timing_is_error(self, course_factory):
        timings = {"A1": [SlotTime("MON", "10:00", "09:00")]}
        validation = validate_catalog([course_factory("A", ("X", "A1"))], timings)
        assert not validation["valid"]
        assert validation["errors"][0].startswith("Slot A1:")
