"""Tests for exporters."""

import csv
import json

import pytest
from openpyxl import load_workbook

from timetable_planner.exporters import (
    CSVExporter,
    ExcelExporter,
    JSONExporter,
    build_timetable_grid,
    get_exporter,
    timetable_rows,
)
from timetable_planner.scheduler import TimetableGenerator


@pytest.fixture
def sample_result(course_factory, slot_timings):
    """A generation result with two timetables."""
    courses = [
        course_factory("A", ("X", "A1"), ("Y", "A2")),
        course_factory("B", ("Z", "B1", "L25+L26", "Tutor")),
    ]
    return TimetableGenerator(slot_timings).generate(courses)


class TestTimetableRows:
    """Tests for timetable_rows function."""

    def test_one_row_per_course(self, sample_result):
        rows = timetable_rows(sample_result)
        assert len(rows) == 4
        assert rows[0]["timetable_id"] == 1
        assert rows[1]["lab_slot"] == "L25+L26"
        assert rows[0]["lab_slot"] == ""


class TestTimetableGrid:
    """Tests for build_timetable_grid function."""

    def test_cells_placed_by_day_and_time(self, sample_result, slot_timings):
        grid = build_timetable_grid(sample_result.timetables[0], slot_timings)

        assert list(grid.index)[:5] == ["MON", "TUE", "WED", "THU", "FRI"]
        assert grid.loc["MON", "09:00-09:50"] == "A (A1)\nX"
        assert grid.loc["TUE", "13:15-14:55"] == "B (L25+L26)\nTutor"
        assert grid.loc["TUE", "09:00-09:50"] == "B (B1)\nZ"
        assert grid.loc["THU", "09:00-09:50"] == ""

    def test_columns_in_start_order(self, sample_result, slot_timings):
        grid = build_timetable_grid(sample_result.timetables[0], slot_timings)
        starts = [column.split("-")[0] for column in grid.columns]
        assert starts == sorted(starts)


class TestJSONExporter:
    """Tests for JSONExporter class."""

    def test_export(self, sample_result, tmp_path):
        output = tmp_path / "nested" / "result.json"
        JSONExporter().export(sample_result, output)

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["total_timetables"] == 2
        assert data["timetables"][0]["sections"][0]["id"] == "A-X-A1"


class TestCSVExporter:
    """Tests for CSVExporter class."""

    def test_export(self, sample_result, tmp_path):
        CSVExporter().export(sample_result, tmp_path / "out")

        with open(tmp_path / "out" / "timetables.csv", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 4
        assert rows[2]["timetable_id"] == "2"
        assert (tmp_path / "out" / "summary.csv").exists()


class TestExcelExporter:
    """Tests for ExcelExporter class."""

    def test_export(self, sample_result, slot_timings, tmp_path):
        output = tmp_path / "result.xlsx"
        ExcelExporter(slot_timings).export(sample_result, output)

        workbook = load_workbook(output)
        assert workbook.sheetnames == ["Timetables", "Summary", "Option 1", "Option 2"]
        assert workbook["Timetables"].max_row == 5
        assert workbook["Option 1"]["A1"].value == "Day"

    def test_export_empty_result(self, course_factory, slot_timings, tmp_path):
        result = TimetableGenerator(slot_timings).generate([course_factory("A")])
        output = tmp_path / "empty.xlsx"
        ExcelExporter().export(result, output)

        workbook = load_workbook(output)
        assert workbook.sheetnames == ["Timetables", "Summary"]


class TestGetExporter:
    """Tests for get_exporter function."""

    def test_known_formats(self):
        assert isinstance(get_exporter("json"), JSONExporter)
        assert isinstance(get_exporter("csv"), CSVExporter)
        assert isinstance(get_exporter("excel"), ExcelExporter)

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unsupported format"):
            get_exporter("pdf")
