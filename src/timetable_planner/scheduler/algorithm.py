"""Backtracking enumeration of conflict-free timetables."""

import logging
import time
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field

from ..exceptions import MissingSlotTimingError
from ..models import Course, SlotTimings
from .conflicts import conflicts_with_any, find_missing_slots
from .constants import INTERRUPT_CHECK_INTERVAL, MAX_TIMETABLES
from .models import (
    CourseOptions,
    GenerationResult,
    GenerationStatistics,
    ScheduledCourse,
    Timetable,
)
from .options import build_course_options
from .utils import (
    canonical_key,
    count_combinations,
    is_duplicate,
    materialize_timetable,
    total_credits,
)

logger = logging.getLogger(__name__)


@dataclass
class _SearchState:
    """Mutable state private to one generate() call."""

    options: list[CourseOptions]
    assignment: list[ScheduledCourse] = field(default_factory=list)
    occupied: list[str] = field(default_factory=list)
    seen: set[str] = field(default_factory=set)
    timetables: list[Timetable] = field(default_factory=list)
    statistics: GenerationStatistics = field(default_factory=GenerationStatistics)
    deadline: float | None = None
    stop: bool = False


class TimetableGenerator:
    """
    Enumerates every conflict-free assignment of theory and lab options.

    Courses are assigned depth-first in input order. Each course takes one
    theory option and, when it has lab options, one lab option. Branches
    whose slots overlap an already committed slot are pruned. Results are
    deduplicated by canonical key and capped at max_timetables.

    The generator holds only configuration; all search state lives inside a
    single generate() call, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        slot_timings: SlotTimings,
        max_timetables: int = MAX_TIMETABLES,
        time_limit: float | None = None,
        strict_timings: bool = False,
    ):
        """
        Initialize the generator.

        Args:
            slot_timings: Slot code to weekly occurrences mapping.
            max_timetables: Stop once this many timetables are accepted.
            time_limit: Optional wall-clock limit in seconds. Output is only
                        deterministic when no limit is set.
            strict_timings: Raise MissingSlotTimingError instead of treating
                            slots without timing data as non-overlapping.
        """
        self.slot_timings = slot_timings
        self.max_timetables = max_timetables
        self.time_limit = time_limit
        self.strict_timings = strict_timings

    def generate(
        self,
        courses: Sequence[Course],
        faculty_preferences: dict[str, Collection[str]] | None = None,
        lab_faculty_preferences: dict[str, Collection[str]] | None = None,
    ) -> GenerationResult:
        """
        Generate timetables for the selected courses.

        Args:
            courses: Selected courses, in the order they are assigned.
            faculty_preferences: Course code to preferred theory faculty.
            lab_faculty_preferences: Course code to preferred lab faculty.

        Returns:
            GenerationResult with timetables in acceptance order.

        Raises:
            MissingSlotTimingError: In strict mode, when an option's slot
                                    has no timing entry.
        """
        result = GenerationResult(total_credits=total_credits(courses))
        result.statistics.total_courses = len(courses)

        if not courses:
            logger.warning("No courses selected, nothing to generate")
            return result

        options = build_course_options(courses, faculty_preferences, lab_faculty_preferences)

        result.impossible_courses = [o.code for o in options if not o.theory_options]
        if result.impossible_courses:
            logger.warning(
                f"Courses with no theory options: {', '.join(result.impossible_courses)}"
            )
            return result

        all_slots = [slot for o in options for slot in o.slots]
        result.missing_slot_timings = find_missing_slots(all_slots, self.slot_timings)
        if result.missing_slot_timings:
            if self.strict_timings:
                raise MissingSlotTimingError(result.missing_slot_timings)
            logger.warning(
                f"No timing data for slots {', '.join(result.missing_slot_timings)}; "
                "they are treated as non-overlapping"
            )

        state = _SearchState(options=options, statistics=result.statistics)
        state.statistics.total_combinations = count_combinations(options)

        logger.info(
            f"Enumerating timetables for {len(options)} courses "
            f"({state.statistics.total_combinations} raw combinations)"
        )

        started = time.perf_counter()
        if self.time_limit is not None:
            state.deadline = started + self.time_limit

        self._backtrack(state, 0)

        state.statistics.elapsed_seconds = time.perf_counter() - started
        result.timetables = state.timetables

        if state.statistics.truncated:
            logger.warning(
                f"Reached the limit of {self.max_timetables} timetables; "
                "results may be incomplete"
            )
        if state.statistics.interrupted:
            logger.warning(f"Time limit of {self.time_limit}s reached; results may be incomplete")

        logger.info(
            f"Generated {len(result.timetables)} timetables in "
            f"{state.statistics.elapsed_seconds:.3f}s"
        )
        return result

    def _should_stop(self, state: _SearchState) -> bool:
        """Check the cap and, periodically, the time limit."""
        if state.stop:
            return True
        if len(state.timetables) >= self.max_timetables:
            state.statistics.truncated = True
            state.stop = True
            return True
        if (
            state.deadline is not None
            and state.statistics.branches_explored % INTERRUPT_CHECK_INTERVAL == 0
            and time.perf_counter() >= state.deadline
        ):
            state.statistics.interrupted = True
            state.stop = True
            return True
        return False

    def _backtrack(self, state: _SearchState, index: int) -> None:
        """Assign course `index` and recurse on the remaining courses."""
        if self._should_stop(state):
            return
        state.statistics.branches_explored += 1

        if index == len(state.options):
            self._accept(state)
            return

        course = state.options[index]
        for theory in course.theory_options:
            if state.stop:
                return
            if conflicts_with_any(theory.slot, state.occupied, self.slot_timings):
                state.statistics.conflicts_pruned += 1
                continue

            state.occupied.append(theory.slot)
            if not course.has_lab:
                state.assignment.append(
                    ScheduledCourse(
                        course_code=course.code,
                        theory_faculty=theory.faculty,
                        theory_slot=theory.slot,
                    )
                )
                self._backtrack(state, index + 1)
                state.assignment.pop()
            else:
                for lab in course.lab_options:
                    if state.stop:
                        break
                    if conflicts_with_any(lab.slot, state.occupied, self.slot_timings):
                        state.statistics.conflicts_pruned += 1
                        continue
                    state.occupied.append(lab.slot)
                    state.assignment.append(
                        ScheduledCourse(
                            course_code=course.code,
                            theory_faculty=theory.faculty,
                            theory_slot=theory.slot,
                            lab_faculty=lab.faculty,
                            lab_slot=lab.slot,
                        )
                    )
                    self._backtrack(state, index + 1)
                    state.assignment.pop()
                    state.occupied.pop()
            state.occupied.pop()

    def _accept(self, state: _SearchState) -> None:
        """Deduplicate a complete assignment and materialize it."""
        key = canonical_key(state.assignment)
        if is_duplicate(key, state.seen):
            state.statistics.duplicates_skipped += 1
            return
        timetable_id = len(state.timetables) + 1
        state.timetables.append(materialize_timetable(timetable_id, state.assignment))
        if len(state.timetables) >= self.max_timetables:
            state.statistics.truncated = True
            state.stop = True


def generate_timetables(
    courses: Sequence[Course],
    faculty_preferences: dict[str, Collection[str]] | None,
    slot_timings: SlotTimings,
    lab_faculty_preferences: dict[str, Collection[str]] | None = None,
) -> list[Timetable]:
    """Generate every conflict-free timetable, up to MAX_TIMETABLES.

    An empty list means no conflict-free assignment exists, a course had no
    theory options, or no courses were given.
    """
    generator = TimetableGenerator(slot_timings)
    result = generator.generate(courses, faculty_preferences, lab_faculty_preferences)
    return result.timetables
