"""Data models for timetable enumeration."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..models import Section


@dataclass(frozen=True)
class SlotOption:
    """A deduplicated (faculty, slot) choice for one course component."""

    faculty: str
    slot: str


@dataclass
class CourseOptions:
    """Theory and lab options derived for one course."""

    code: str
    theory_options: list[SlotOption] = field(default_factory=list)
    lab_options: list[SlotOption] = field(default_factory=list)

    @property
    def has_lab(self) -> bool:
        """Whether the course has a lab component."""
        return len(self.lab_options) > 0

    @property
    def slots(self) -> list[str]:
        """All slot codes the options may occupy."""
        codes = [o.slot for o in self.theory_options] + [o.slot for o in self.lab_options]
        return [c for c in dict.fromkeys(codes) if c]


@dataclass(frozen=True)
class ScheduledCourse:
    """One committed assignment for a course."""

    course_code: str
    theory_faculty: str
    theory_slot: str
    lab_faculty: str | None = None
    lab_slot: str | None = None

    @property
    def slots(self) -> list[str]:
        """Slot codes this assignment occupies."""
        if self.lab_slot:
            return [self.theory_slot, self.lab_slot]
        return [self.theory_slot]

    def to_section(self) -> Section:
        """Expand into an output section record."""
        return Section(
            id=f"{self.course_code}-{self.theory_faculty}-{self.theory_slot}",
            course_code=self.course_code,
            faculty=self.theory_faculty,
            theory_slot=self.theory_slot,
            lab_slot=self.lab_slot,
            lab_faculty=self.lab_faculty,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "course_code": self.course_code,
            "theory_faculty": self.theory_faculty,
            "theory_slot": self.theory_slot,
            "lab_faculty": self.lab_faculty,
            "lab_slot": self.lab_slot,
        }


@dataclass(frozen=True)
class Timetable:
    """A complete conflict-free assignment, one entry per selected course."""

    id: int
    sections: tuple[Section, ...]
    scheduled_courses: tuple[ScheduledCourse, ...]

    @property
    def occupied_slots(self) -> list[str]:
        """All slot codes used by the timetable, theory and lab."""
        return [slot for sc in self.scheduled_courses for slot in sc.slots]

    @property
    def course_count(self) -> int:
        """Number of courses in the timetable."""
        return len(self.sections)

    def to_dict(self) -> dict[str, Any]:
        """Convert timetable to dictionary."""
        return {
            "id": self.id,
            "sections": [s.to_dict() for s in self.sections],
            "scheduled_courses": [sc.to_dict() for sc in self.scheduled_courses],
        }


@dataclass
class GenerationStatistics:
    """Statistics about a generation run."""

    total_courses: int = 0
    total_combinations: int = 0
    branches_explored: int = 0
    conflicts_pruned: int = 0
    duplicates_skipped: int = 0
    truncated: bool = False
    interrupted: bool = False
    elapsed_seconds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_courses": self.total_courses,
            "total_combinations": self.total_combinations,
            "branches_explored": self.branches_explored,
            "conflicts_pruned": self.conflicts_pruned,
            "duplicates_skipped": self.duplicates_skipped,
            "truncated": self.truncated,
            "interrupted": self.interrupted,
            "elapsed_seconds": self.elapsed_seconds,
        }


@dataclass
class GenerationResult:
    """Result of a generation run."""

    timetables: list[Timetable] = field(default_factory=list)
    statistics: GenerationStatistics = field(default_factory=GenerationStatistics)
    missing_slot_timings: list[str] = field(default_factory=list)
    impossible_courses: list[str] = field(default_factory=list)
    total_credits: int = 0
    generation_date: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def total_timetables(self) -> int:
        """Number of generated timetables."""
        return len(self.timetables)

    @property
    def is_complete(self) -> bool:
        """Whether the search ran to exhaustion (no cap or time limit hit)."""
        return not (self.statistics.truncated or self.statistics.interrupted)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "generation_date": self.generation_date,
            "total_timetables": self.total_timetables,
            "total_credits": self.total_credits,
            "is_complete": self.is_complete,
            "missing_slot_timings": self.missing_slot_timings,
            "impossible_courses": self.impossible_courses,
            "statistics": self.statistics.to_dict(),
            "timetables": [t.to_dict() for t in self.timetables],
        }
