"""Data models for course catalog input."""

from dataclasses import dataclass, field
from typing import Any

from .constants import DEFAULT_CREDITS, DEFAULT_FACULTY


def parse_time(time: str) -> int:
    """Convert an 'HH:MM' string to minutes since midnight.

    Args:
        time: Time string like '09:55'

    Returns:
        Minutes since midnight (e.g. 595)
    """
    hours, minutes = time.split(":")
    return int(hours) * 60 + int(minutes)


def _first_text(data: dict[str, Any], *keys: str) -> str | None:
    """First non-blank value among keys, stripped."""
    for key in keys:
        value = data.get(key)
        if value is not None and str(value).strip():
            return str(value).strip()
    return None


@dataclass(frozen=True)
class SlotTime:
    """One weekly occurrence of a slot: a day and a half-open time range."""

    day: str
    start: str
    end: str

    @property
    def start_minutes(self) -> int:
        """Start time in minutes since midnight."""
        return parse_time(self.start)

    @property
    def end_minutes(self) -> int:
        """End time in minutes since midnight."""
        return parse_time(self.end)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SlotTime":
        """Create a SlotTime from a dictionary."""
        return cls(
            day=str(data["day"]).strip().upper(),
            start=str(data["start"]).strip(),
            end=str(data["end"]).strip(),
        )

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {"day": self.day, "start": self.start, "end": self.end}


# Slot code -> weekly occurrences
SlotTimings = dict[str, list[SlotTime]]


@dataclass(frozen=True)
class Section:
    """One faculty's offering of a course.

    Theory and lab are independent choices even when they come from the
    same section record.
    """

    course_code: str
    faculty: str
    theory_slot: str
    lab_slot: str | None = None
    lab_faculty: str | None = None
    id: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            object.__setattr__(
                self, "id", f"{self.course_code}-{self.faculty}-{self.theory_slot}"
            )

    @property
    def has_lab(self) -> bool:
        """Whether this section carries a lab slot."""
        return bool(self.lab_slot)

    @property
    def effective_lab_faculty(self) -> str:
        """Faculty teaching the lab (falls back to the theory faculty)."""
        return self.lab_faculty or self.faculty

    @classmethod
    def from_dict(cls, data: dict[str, Any], course_code: str = "") -> "Section":
        """Create a Section from a dictionary.

        Missing values are filled the same way uploaded catalogs are cleaned:
        unknown faculty becomes 'TBA' and a missing theory slot becomes ''.
        """
        code = course_code or _first_text(data, "courseCode", "course_code") or ""
        return cls(
            id=_first_text(data, "id") or "",
            course_code=code,
            faculty=_first_text(data, "faculty") or DEFAULT_FACULTY,
            theory_slot=_first_text(data, "theorySlot", "theory_slot") or "",
            lab_slot=_first_text(data, "labSlot", "lab_slot"),
            lab_faculty=_first_text(data, "labFaculty", "lab_faculty"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert section to dictionary."""
        result: dict[str, Any] = {
            "id": self.id,
            "course_code": self.course_code,
            "faculty": self.faculty,
            "theory_slot": self.theory_slot,
        }
        if self.lab_slot:
            result["lab_slot"] = self.lab_slot
        if self.lab_faculty:
            result["lab_faculty"] = self.lab_faculty
        return result


@dataclass(frozen=True)
class Course:
    """A course with its ordered list of sections."""

    code: str
    title: str
    credits: int = DEFAULT_CREDITS
    sections: list[Section] = field(default_factory=list)

    @property
    def faculty(self) -> list[str]:
        """Unique theory faculty in section order."""
        return list(dict.fromkeys(s.faculty for s in self.sections))

    @property
    def lab_faculty(self) -> list[str]:
        """Unique lab faculty in section order."""
        return list(
            dict.fromkeys(s.effective_lab_faculty for s in self.sections if s.has_lab)
        )

    @property
    def slots(self) -> list[str]:
        """All slot codes referenced by the course (theory and lab)."""
        codes: list[str] = []
        for section in self.sections:
            codes.append(section.theory_slot)
            if section.lab_slot:
                codes.append(section.lab_slot)
        return [c for c in dict.fromkeys(codes) if c]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Course":
        """Create a Course from a dictionary.

        Section entries that are not objects are skipped.

        Raises:
            ValueError: If credits is not a whole number
        """
        code = _first_text(data, "code") or "UNKNOWN"
        raw_credits = data.get("credits") or DEFAULT_CREDITS
        try:
            credits = int(raw_credits)
        except (TypeError, ValueError) as e:
            raise ValueError(f"course {code} has invalid credits {raw_credits!r}") from e
        sections = data.get("sections") or []
        if not isinstance(sections, list):
            sections = []
        return cls(
            code=code,
            title=_first_text(data, "title") or code,
            credits=credits,
            sections=[
                Section.from_dict(section, course_code=code)
                for section in sections
                if isinstance(section, dict)
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert course to dictionary."""
        return {
            "code": self.code,
            "title": self.title,
            "credits": self.credits,
            "sections": [s.to_dict() for s in self.sections],
        }
