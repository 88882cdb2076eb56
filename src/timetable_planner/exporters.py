"""Export functionality for generated timetables."""

import csv
import json
from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from .catalog import default_slot_timings
from .constants import DAYS
from .models import SlotTimings
from .scheduler.models import GenerationResult, Timetable

# Grid sheets written per workbook (one per timetable)
MAX_GRID_SHEETS = 50

FONT_HEADER = Font(bold=True, color="FFFFFF")
FILL_HEADER = PatternFill(start_color="0A3D7A", end_color="0A3D7A", fill_type="solid")
ALIGN_CENTER = Alignment(horizontal="center", vertical="center", wrap_text=True)
THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)


class BaseExporter(ABC):
    """Base class for exporters."""

    @abstractmethod
    def export(self, result: GenerationResult, output_path: str | Path) -> None:
        """Export generation result to file.

        Args:
            result: GenerationResult to export
            output_path: Path to output file or directory
        """
        pass


def timetable_rows(result: GenerationResult) -> list[dict]:
    """Flatten timetables into one row per course assignment."""
    rows = []
    for timetable in result.timetables:
        for sc in timetable.scheduled_courses:
            rows.append(
                {
                    "timetable_id": timetable.id,
                    "course_code": sc.course_code,
                    "theory_faculty": sc.theory_faculty,
                    "theory_slot": sc.theory_slot,
                    "lab_faculty": sc.lab_faculty or "",
                    "lab_slot": sc.lab_slot or "",
                }
            )
    return rows


def summary_rows(result: GenerationResult) -> list[dict]:
    """Summary metrics of a generation run."""
    stats = result.statistics
    return [
        {"metric": "generation_date", "value": result.generation_date},
        {"metric": "total_timetables", "value": result.total_timetables},
        {"metric": "total_courses", "value": stats.total_courses},
        {"metric": "total_credits", "value": result.total_credits},
        {"metric": "total_combinations", "value": stats.total_combinations},
        {"metric": "conflicts_pruned", "value": stats.conflicts_pruned},
        {"metric": "duplicates_skipped", "value": stats.duplicates_skipped},
        {"metric": "truncated", "value": stats.truncated},
        {"metric": "interrupted", "value": stats.interrupted},
        {"metric": "missing_slot_timings", "value": ", ".join(result.missing_slot_timings)},
        {"metric": "impossible_courses", "value": ", ".join(result.impossible_courses)},
    ]


def build_timetable_grid(timetable: Timetable, slot_timings: SlotTimings) -> pd.DataFrame:
    """Lay a timetable out as a day by time-range grid.

    Columns are the distinct time ranges the timetable occupies, in start
    order. Slots without timing data do not appear in the grid.
    """
    cells: dict[tuple[str, str], list[str]] = {}
    ranges: dict[str, int] = {}
    days = list(DAYS)

    for sc in timetable.scheduled_courses:
        blocks = [(sc.theory_slot, sc.theory_faculty)]
        if sc.lab_slot:
            blocks.append((sc.lab_slot, sc.lab_faculty or sc.theory_faculty))
        for slot, faculty in blocks:
            for occurrence in slot_timings.get(slot, []):
                time_range = f"{occurrence.start}-{occurrence.end}"
                ranges[time_range] = occurrence.start_minutes
                if occurrence.day not in days:
                    days.append(occurrence.day)
                cells.setdefault((occurrence.day, time_range), []).append(
                    f"{sc.course_code} ({slot})\n{faculty}"
                )

    columns = sorted(ranges, key=lambda r: (ranges[r], r))
    data = {
        column: ["\n".join(cells.get((day, column), [])) for day in days]
        for column in columns
    }
    return pd.DataFrame(data, index=days)


class JSONExporter(BaseExporter):
    """Export to JSON format."""

    def __init__(self, indent: int = 2, ensure_ascii: bool = False):
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def export(self, result: GenerationResult, output_path: str | Path) -> None:
        """Export generation result to JSON file."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(
                result.to_dict(),
                f,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
            )


class CSVExporter(BaseExporter):
    """Export to CSV format (multiple files)."""

    def export(self, result: GenerationResult, output_path: str | Path) -> None:
        """Export generation result to CSV files.

        Creates two files:
        - timetables.csv: One row per course assignment
        - summary.csv: Run summary

        Args:
            result: GenerationResult to export
            output_path: Path to output directory
        """
        output_dir = Path(output_path)
        output_dir.mkdir(parents=True, exist_ok=True)

        self._write_csv(output_dir / "timetables.csv", timetable_rows(result))
        self._write_csv(output_dir / "summary.csv", summary_rows(result))

    def _write_csv(self, output_path: Path, rows: list[dict]) -> None:
        """Write rows to CSV file."""
        if not rows:
            return

        with open(output_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=rows[0].keys())
            writer.writeheader()
            writer.writerows(rows)


class ExcelExporter(BaseExporter):
    """Export to Excel format (single workbook with multiple sheets)."""

    def __init__(self, slot_timings: SlotTimings | None = None):
        self.slot_timings = slot_timings if slot_timings is not None else default_slot_timings()

    def export(self, result: GenerationResult, output_path: str | Path) -> None:
        """Export generation result to Excel file.

        Creates workbook with sheets:
        - Timetables: One row per course assignment
        - Summary: Run summary
        - Option N: Weekly grid for each timetable (first MAX_GRID_SHEETS)

        Args:
            result: GenerationResult to export
            output_path: Path to output Excel file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            self._export_timetables_sheet(result, writer)
            self._export_summary_sheet(result, writer)
            for timetable in result.timetables[:MAX_GRID_SHEETS]:
                self._export_grid_sheet(timetable, writer)

    def _export_timetables_sheet(
        self, result: GenerationResult, writer: pd.ExcelWriter
    ) -> None:
        """Export flattened timetables to Excel sheet."""
        columns = [
            "timetable_id",
            "course_code",
            "theory_faculty",
            "theory_slot",
            "lab_faculty",
            "lab_slot",
        ]
        df = pd.DataFrame(timetable_rows(result), columns=columns)
        df.to_excel(writer, sheet_name="Timetables", index=False)

    def _export_summary_sheet(
        self, result: GenerationResult, writer: pd.ExcelWriter
    ) -> None:
        """Export summary to Excel sheet."""
        df = pd.DataFrame(summary_rows(result))
        df.to_excel(writer, sheet_name="Summary", index=False)

    def _export_grid_sheet(self, timetable: Timetable, writer: pd.ExcelWriter) -> None:
        """Export one timetable as a weekly grid and style it."""
        sheet_name = f"Option {timetable.id}"
        grid = build_timetable_grid(timetable, self.slot_timings)
        grid.to_excel(writer, sheet_name=sheet_name, index_label="Day")

        sheet = writer.sheets[sheet_name]
        for cell in sheet[1]:
            cell.font = FONT_HEADER
            cell.fill = FILL_HEADER
        for row in sheet.iter_rows(min_row=1, max_row=sheet.max_row):
            for cell in row:
                cell.alignment = ALIGN_CENTER
                cell.border = THIN_BORDER
        sheet.column_dimensions["A"].width = 8
        for column_cells in list(sheet.columns)[1:]:
            sheet.column_dimensions[column_cells[0].column_letter].width = 22


def get_exporter(format_type: str, slot_timings: SlotTimings | None = None) -> BaseExporter:
    """Get appropriate exporter for format type.

    Args:
        format_type: Export format ('json', 'csv', 'excel')
        slot_timings: Slot timings used to lay out Excel grids

    Returns:
        Exporter instance

    Raises:
        ValueError: If format type is not supported
    """
    exporters = {
        "json": JSONExporter,
        "csv": CSVExporter,
        "excel": ExcelExporter,
    }

    if format_type not in exporters:
        raise ValueError(
            f"Unsupported format: {format_type}. Supported: {', '.join(exporters.keys())}"
        )

    if format_type == "excel":
        return ExcelExporter(slot_timings)
    return exporters[format_type]()
