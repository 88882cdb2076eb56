"""Theory and lab option extraction from course sections."""

from collections.abc import Collection, Iterable

from ..models import Course, Section
from .models import CourseOptions, SlotOption


def _unique_options(pairs: Iterable[tuple[str, str]]) -> list[SlotOption]:
    """Deduplicate (faculty, slot) pairs, keeping first-seen order."""
    seen: set[tuple[str, str]] = set()
    options: list[SlotOption] = []
    for faculty, slot in pairs:
        if (faculty, slot) in seen:
            continue
        seen.add((faculty, slot))
        options.append(SlotOption(faculty=faculty, slot=slot))
    return options


def _theory_pairs(sections: Iterable[Section]) -> list[tuple[str, str]]:
    return [(s.faculty, s.theory_slot) for s in sections]


def _lab_pairs(sections: Iterable[Section]) -> list[tuple[str, str]]:
    return [(s.effective_lab_faculty, s.lab_slot) for s in sections if s.lab_slot]


def derive_theory_options(
    course: Course, preferred_faculty: Collection[str] | None = None
) -> list[SlotOption]:
    """Derive the theory options to search for a course.

    The faculty preference is best-effort, not a hard filter: when it
    excludes every section, all sections are used instead.

    Args:
        course: Course to derive options for
        preferred_faculty: Faculty names to restrict to (empty means any)

    Returns:
        Unique (faculty, slot) options in section order
    """
    if preferred_faculty:
        preferred = [s for s in course.sections if s.faculty in preferred_faculty]
        options = _unique_options(_theory_pairs(preferred))
        if options:
            return options
    return _unique_options(_theory_pairs(course.sections))


def derive_lab_options(
    course: Course, preferred_lab_faculty: Collection[str] | None = None
) -> list[SlotOption]:
    """Derive the lab options to search for a course.

    Only sections carrying a lab slot are considered. An empty result means
    the course has no lab component.

    Args:
        course: Course to derive options for
        preferred_lab_faculty: Lab faculty names to restrict to (empty means any)

    Returns:
        Unique (lab faculty, lab slot) options in section order
    """
    lab_sections = [s for s in course.sections if s.has_lab]
    if preferred_lab_faculty:
        preferred = [
            s for s in lab_sections if s.effective_lab_faculty in preferred_lab_faculty
        ]
        if preferred:
            lab_sections = preferred
    return _unique_options(_lab_pairs(lab_sections))


def build_course_options(
    courses: Iterable[Course],
    faculty_preferences: dict[str, Collection[str]] | None = None,
    lab_faculty_preferences: dict[str, Collection[str]] | None = None,
) -> list[CourseOptions]:
    """Derive theory and lab options for every course, in course order."""
    faculty_preferences = faculty_preferences or {}
    lab_faculty_preferences = lab_faculty_preferences or {}
    return [
        CourseOptions(
            code=course.code,
            theory_options=derive_theory_options(
                course, faculty_preferences.get(course.code)
            ),
            lab_options=derive_lab_options(
                course, lab_faculty_preferences.get(course.code)
            ),
        )
        for course in courses
    ]
