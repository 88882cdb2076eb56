"""Custom exceptions for the timetable planner."""


class PlannerError(Exception):
    """Base exception for planner errors."""

    pass


class InvalidCatalogError(PlannerError):
    """Catalog data could not be read."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        location = f" in '{path}'" if path else ""
        super().__init__(f"Invalid catalog{location}: {message}")


class CourseNotFoundError(PlannerError):
    """Selected course codes are not in the catalog."""

    def __init__(self, codes: list[str]):
        self.codes = codes
        super().__init__(f"Course(s) not found in catalog: {', '.join(codes)}")


class InvalidSlotTimingError(PlannerError):
    """A slot timing entry is malformed."""

    def __init__(self, slot: str, message: str):
        self.slot = slot
        super().__init__(f"Invalid timing for slot '{slot}': {message}")


class MissingSlotTimingError(PlannerError):
    """Slot codes have no entry in the slot timing table."""

    def __init__(self, slots: list[str]):
        self.slots = slots
        super().__init__(
            f"No timing data for slot(s): {', '.join(slots)}. "
            "Add them to the slot timing table or disable strict timing checks."
        )
