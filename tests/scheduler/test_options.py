"""Tests for theory and lab option extraction."""

from timetable_planner.scheduler.models import SlotOption
from timetable_planner.scheduler.options import (
    build_course_options,
    derive_lab_options,
    derive_theory_options,
)


class TestDeriveTheoryOptions:
    """Tests for derive_theory_options function."""

    def test_first_seen_order(self, course_factory):
        course = course_factory("C1", ("Y", "B1"), ("X", "A1"), ("Y", "C1"))
        options = derive_theory_options(course)
        assert options == [
            SlotOption("Y", "B1"),
            SlotOption("X", "A1"),
            SlotOption("Y", "C1"),
        ]

    def test_duplicates_collapse(self, course_factory):
        course = course_factory("C1", ("X", "A1", "L1+L2"), ("X", "A1", "L3+L4"))
        assert derive_theory_options(course) == [SlotOption("X", "A1")]

    def test_same_slot_different_faculty_kept(self, course_factory):
        course = course_factory("C1", ("X", "A1"), ("Y", "A1"))
        assert len(derive_theory_options(course)) == 2

    def test_preference_restricts(self, course_factory):
        course = course_factory("C1", ("X", "A1"), ("Y", "B1"), ("Z", "C1"))
        options = derive_theory_options(course, ["Z", "Y"])
        assert options == [SlotOption("Y", "B1"), SlotOption("Z", "C1")]

    def test_preference_accepts_set(self, course_factory):
        course = course_factory("C1", ("X", "A1"), ("Y", "B1"))
        assert derive_theory_options(course, {"X"}) == [SlotOption("X", "A1")]

    def test_unmatched_preference_falls_back(self, course_factory):
        course = course_factory("C1", ("X", "A1"), ("Y", "B1"))
        options = derive_theory_options(course, ["Nobody"])
        assert options == [SlotOption("X", "A1"), SlotOption("Y", "B1")]

    def test_empty_preference_is_ignored(self, course_factory):
        course = course_factory("C1", ("X", "A1"), ("Y", "B1"))
        assert len(derive_theory_options(course, [])) == 2

    def test_no_sections(self, course_factory):
        assert derive_theory_options(course_factory("C1")) == []


class TestDeriveLabOptions:
    """Tests for derive_lab_options function."""

    def test_theory_only_course_has_no_labs(self, course_factory):
        course = course_factory("C1", ("X", "A1"), ("Y", "B1"))
        assert derive_lab_options(course) == []

    def test_only_lab_bearing_sections(self, course_factory):
        course = course_factory("C1", ("X", "A1"), ("Y", "B1", "L1+L2"))
        assert derive_lab_options(course) == [SlotOption("Y", "L1+L2")]

    def test_lab_faculty_used_when_present(self, course_factory):
        course = course_factory("C1", ("X", "A1", "L1+L2", "Lab Tutor"))
        assert derive_lab_options(course) == [SlotOption("Lab Tutor", "L1+L2")]

    def test_duplicates_collapse(self, course_factory):
        course = course_factory("C1", ("X", "A1", "L1+L2"), ("X", "B1", "L1+L2"))
        assert derive_lab_options(course) == [SlotOption("X", "L1+L2")]

    def test_preference_restricts(self, course_factory):
        course = course_factory(
            "C1", ("X", "A1", "L1+L2"), ("Y", "B1", "L3+L4", "Lab Tutor")
        )
        assert derive_lab_options(course, ["Lab Tutor"]) == [
            SlotOption("Lab Tutor", "L3+L4")
        ]

    def test_unmatched_preference_falls_back(self, course_factory):
        course = course_factory("C1", ("X", "A1", "L1+L2"), ("Y", "B1", "L3+L4"))
        options = derive_lab_options(course, ["Nobody"])
        assert options == [SlotOption("X", "L1+L2"), SlotOption("Y", "L3+L4")]

    def test_theory_preference_does_not_affect_labs(self, course_factory):
        course = course_factory("C1", ("X", "A1", "L1+L2"), ("Y", "B1", "L3+L4"))
        options = build_course_options([course], {"C1": ["X"]})[0]
        assert options.theory_options == [SlotOption("X", "A1")]
        assert len(options.lab_options) == 2


class TestBuildCourseOptions:
    """Tests for build_course_options function."""

    def test_course_order_kept(self, course_factory):
        courses = [
            course_factory("B", ("X", "A1")),
            course_factory("A", ("Y", "B1", "L1+L2")),
        ]
        options = build_course_options(courses)
        assert [o.code for o in options] == ["B", "A"]
        assert not options[0].has_lab
        assert options[1].has_lab

    def test_preferences_keyed_by_code(self, course_factory):
        courses = [
            course_factory("A", ("X", "A1"), ("Y", "B1")),
            course_factory("B", ("X", "C1"), ("Y", "D1")),
        ]
        options = build_course_options(courses, {"B": ["Y"]})
        assert len(options[0].theory_options) == 2
        assert options[1].theory_options == [SlotOption("Y", "D1")]

    def test_slots_property(self, course_factory):
        course = course_factory("A", ("X", "A1", "L1+L2"), ("Y", "A1"))
        options = build_course_options([course])[0]
        assert options.slots == ["A1", "L1+L2"]
