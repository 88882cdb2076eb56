"""Constants for the weekly slot grid."""

# Loader defaults for loosely structured catalog data
DEFAULT_CREDITS = 3
DEFAULT_FACULTY = "TBA"

DAYS = ["MON", "TUE", "WED", "THU", "FRI"]

# Theory periods, 50 minutes each, lunch break 12:35-13:15
THEORY_PERIODS = [
    {"period": 1, "start": "09:00", "end": "09:50"},
    {"period": 2, "start": "09:55", "end": "10:45"},
    {"period": 3, "start": "10:50", "end": "11:40"},
    {"period": 4, "start": "11:45", "end": "12:35"},
    {"period": 5, "start": "13:15", "end": "14:05"},
    {"period": 6, "start": "14:10", "end": "15:00"},
    {"period": 7, "start": "15:05", "end": "15:55"},
    {"period": 8, "start": "16:00", "end": "16:50"},
]

# Lab periods, two theory periods long
LAB_PERIODS = [
    {"period": 1, "start": "09:00", "end": "10:40"},
    {"period": 2, "start": "10:50", "end": "12:30"},
    {"period": 3, "start": "13:15", "end": "14:55"},
    {"period": 4, "start": "15:05", "end": "16:45"},
]

# Slot grid:
# | Period | Mon | Tue | Wed | Thu | Fri |
# |--------|-----|-----|-----|-----|-----|
# | 1      | A1  | B1  | C1  | D1  | E1  |
# | 2      | F1  | G1  | A1  | B1  | C1  |
# | 3      | D1  | E1  | F1  | G1  | A1  |
# | 4      | TC1 | TA1 | B1  | C1  | TB1 |
# | 5      | A2  | B2  | C2  | D2  | E2  |
# | 6      | F2  | G2  | A2  | B2  | C2  |
# | 7      | D2  | E2  | F2  | G2  | A2  |
# | 8      | TC2 | TA2 | B2  | C2  | TB2 |
THEORY_SLOT_CONFIGURATION: dict[str, list[tuple[str, int]]] = {
    "A1": [("MON", 1), ("WED", 2), ("FRI", 3)],
    "A2": [("MON", 5), ("WED", 6), ("FRI", 7)],
    "B1": [("TUE", 1), ("THU", 2), ("WED", 4)],
    "B2": [("TUE", 5), ("THU", 6), ("WED", 8)],
    "C1": [("WED", 1), ("FRI", 2), ("THU", 4)],
    "C2": [("WED", 5), ("FRI", 6), ("THU", 8)],
    "D1": [("THU", 1), ("MON", 3)],
    "D2": [("THU", 5), ("MON", 7)],
    "E1": [("FRI", 1), ("TUE", 3)],
    "E2": [("FRI", 5), ("TUE", 7)],
    "F1": [("MON", 2), ("WED", 3)],
    "F2": [("MON", 6), ("WED", 7)],
    "G1": [("TUE", 2), ("THU", 3)],
    "G2": [("TUE", 6), ("THU", 7)],
    "TA1": [("TUE", 4)],
    "TA2": [("TUE", 8)],
    "TB1": [("FRI", 4)],
    "TB2": [("FRI", 8)],
    "TC1": [("MON", 4)],
    "TC2": [("MON", 8)],
}

# Lab slots: morning labs L1..L20, afternoon labs L21..L40
LAB_SLOT_CONFIGURATION: dict[str, list[tuple[str, int]]] = {
    "L1+L2": [("MON", 1)],
    "L3+L4": [("MON", 2)],
    "L5+L6": [("TUE", 1)],
    "L7+L8": [("TUE", 2)],
    "L9+L10": [("WED", 1)],
    "L11+L12": [("WED", 2)],
    "L13+L14": [("THU", 1)],
    "L15+L16": [("THU", 2)],
    "L17+L18": [("FRI", 1)],
    "L19+L20": [("FRI", 2)],
    "L21+L22": [("MON", 3)],
    "L23+L24": [("MON", 4)],
    "L25+L26": [("TUE", 3)],
    "L27+L28": [("TUE", 4)],
    "L29+L30": [("WED", 3)],
    "L31+L32": [("WED", 4)],
    "L33+L34": [("THU", 3)],
    "L35+L36": [("THU", 4)],
    "L37+L38": [("FRI", 3)],
    "L39+L40": [("FRI", 4)],
}


def get_period_info(period: int, is_lab: bool = False) -> dict | None:
    """Get period info by period number."""
    periods = LAB_PERIODS if is_lab else THEORY_PERIODS
    for info in periods:
        if info["period"] == period:
            return info
    return None


def is_lab_slot(slot_code: str) -> bool:
    """Check whether a slot code names a lab block (e.g. 'L1+L2')."""
    return slot_code.startswith("L")


def build_default_slot_timings() -> dict[str, list[dict[str, str]]]:
    """Build the default slot timing table as plain dictionaries.

    Returns:
        Mapping of slot code to a list of {"day", "start", "end"} entries,
        in the same shape an uploaded catalog's "slots" object uses.

    Raises:
        ValueError: If the configuration references an unknown period
    """
    timings: dict[str, list[dict[str, str]]] = {}
    configurations = [
        (THEORY_SLOT_CONFIGURATION, False),
        (LAB_SLOT_CONFIGURATION, True),
    ]
    for configuration, is_lab in configurations:
        for code, occurrences in configuration.items():
            entries = []
            for day, period in occurrences:
                info = get_period_info(period, is_lab=is_lab)
                if info is None:
                    kind = "lab" if is_lab else "theory"
                    raise ValueError(f"Invalid {kind} period: {period}")
                entries.append({"day": day, "start": info["start"], "end": info["end"]})
            timings[code] = entries
    return timings
