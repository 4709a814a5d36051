"""Tests for export sinks and report rows."""

import json
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from openpyxl import load_workbook

from asset_tracker.aggregation import build_dashboard, build_financial_insights
from asset_tracker.exceptions import SinkError
from asset_tracker.sinks import ConsoleSink, ExcelSink, JsonFileSink, PdfSink
from asset_tracker.sinks.excel import sheet_title
from asset_tracker.sinks.pdf import report_title
from asset_tracker.sinks.rows import (
    asset_rows,
    dashboard_report,
    depreciation_rows,
    display_date,
    financial_report,
    maintenance_rows,
    mapping_rows,
    monthly_cost_rows,
    warranty_rows,
)


class TestRows:
    """Tests for flattening entities and views into rows."""

    def test_display_date(self) -> None:
        assert display_date(date(2024, 1, 5)) == "Jan 5, 2024"
        assert display_date("2023-12-31") == "Dec 31, 2023"
        assert display_date(None) == ""
        assert display_date("someday") == "someday"

    def test_asset_rows(self, make_asset) -> None:
        rows = asset_rows([make_asset("a1", notes="Spare")])

        assert list(rows[0]) == [
            "Name",
            "Serial Number",
            "Model",
            "Category",
            "Status",
            "Location",
            "Department",
            "Assigned To",
            "Purchase Date",
            "Purchase Price",
            "Notes",
        ]
        assert rows[0]["Status"] == "active"
        assert rows[0]["Department"] == ""
        assert rows[0]["Purchase Date"] == "Jan 10, 2023"
        assert rows[0]["Purchase Price"] == Decimal("1200.00")

    def test_warranty_rows(self, sample_snapshot, now) -> None:
        rows = warranty_rows(sample_snapshot.warranties, sample_snapshot.assets_by_id(), now)

        assert rows[0]["Asset"] == "Laptop asset-001"
        assert rows[0]["State"] == "expiring-soon"
        assert rows[2]["State"] == "expired"

    def test_warranty_for_unknown_asset(self, make_warranty, now) -> None:
        rows = warranty_rows([make_warranty(asset_id="gone", end_date="bad")], {}, now)

        assert rows[0]["Asset"] == "Unknown Asset"
        assert rows[0]["State"] == "unknown"

    def test_maintenance_rows(self, sample_snapshot, now) -> None:
        rows = maintenance_rows(sample_snapshot.maintenance_tasks, sample_snapshot.assets_by_id(), now)

        assert [row["State"] for row in rows] == ["overdue", "today", "scheduled", "completed"]
        assert rows[0]["Cost"] == ""
        assert rows[3]["Cost"] == Decimal("150.00")

    def test_mapping_and_monthly_rows(self, sample_snapshot, now) -> None:
        insights = build_financial_insights(sample_snapshot, now)

        assert mapping_rows({"Laptop": 2}, "Category", "Assets") == [{"Category": "Laptop", "Assets": 2}]
        assert monthly_cost_rows(insights.maintenance_costs)[-1] == {"Month": "Jan 2024", "Cost": Decimal("0")}
        assert depreciation_rows(insights.depreciation_trend)[-1]["Depreciation"] == Decimal("20.00")

    def test_reports(self, sample_snapshot, now) -> None:
        dashboard = dashboard_report(build_dashboard(sample_snapshot, now), sample_snapshot.assets_by_id(), now)
        financial = financial_report(build_financial_insights(sample_snapshot, now))

        overview = {row["Metric"]: row["Value"] for row in dashboard["overview"]}
        assert overview["Total Assets"] == 3
        assert overview["Maintenance Overdue"] == 1
        assert len(dashboard["asset_status"]) == 4
        assert financial["financial_totals"][0]["Value"] == Decimal("2400.00")
        assert len(financial["maintenance_costs"]) == 6


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_write_batch(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(pretty=False)

        sink.write_batch("asset_status", [{"Status": "active", "Assets": 2}])
        captured = capsys.readouterr()

        assert "asset_status (1 rows)" in captured.out
        assert '"Status": "active"' in captured.out

    def test_max_records(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(max_records=1)

        sink.write_batch("rows", [{"n": 1}, {"n": 2}, {"n": 3}])

        assert "... and 2 more rows" in capsys.readouterr().out

    def test_close_summary(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink()
        sink.write_batch("rows", [{"n": 1}])
        sink.write_batch("rows", [{"n": 2}])
        sink.close()

        assert "rows: 2 rows" in capsys.readouterr().out


class TestJsonFileSink:
    """Tests for JsonFileSink."""

    def test_write_batch(self, tmp_path: Path, make_asset) -> None:
        sink = JsonFileSink(tmp_path / "out", pretty=True)

        path = sink.write_batch("assets", [make_asset("a1")])

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[0]["asset_id"] == "a1"
        assert data[0]["purchase_price"] == "1200.00"
        assert data[0]["status"] == "active"

    def test_write_error(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path)
        (tmp_path / "blocked.json").mkdir()

        with pytest.raises(SinkError):
            sink.write_batch("blocked", [{"a": 1}])


class TestExcelSink:
    """Tests for ExcelSink."""

    def test_sheet_title(self) -> None:
        assert sheet_title("a/b:c") == "a_b_c"
        assert len(sheet_title("x" * 40)) == 31

    def test_workbook(self, tmp_path: Path, make_asset) -> None:
        sink = ExcelSink(tmp_path / "report")
        sink.write_batch("assets", asset_rows([make_asset("a1"), make_asset("a2")]))
        sink.write_batch("empty", [])
        sink.close()

        assert sink.path.suffix == ".xlsx"
        workbook = load_workbook(sink.path)
        assert workbook.sheetnames == ["assets", "empty"]

        sheet = workbook["assets"]
        assert sheet["A1"].value == "Name"
        assert sheet["A1"].font.bold is True
        assert sheet.max_row == 3
        assert sheet["J2"].value == 1200.0
        assert sheet.column_dimensions["A"].width == 15
        assert sheet.column_dimensions["B"].width == 15

    def test_long_header_widens_column(self, tmp_path: Path) -> None:
        header = "Upcoming Maintenance In Next Thirty Days"
        sink = ExcelSink(tmp_path / "report.xlsx")
        sink.write_batch("rows", [{header: 1}])
        sink.close()

        sheet = load_workbook(sink.path)["rows"]
        assert sheet.column_dimensions["A"].width == len(header)

    def test_control_characters_removed(self, tmp_path: Path, make_asset) -> None:
        sink = ExcelSink(tmp_path / "report.xlsx")
        sink.write_batch("assets", asset_rows([make_asset("a1", notes="bad\x01note")]))
        sink.close()

        sheet = load_workbook(sink.path)["assets"]
        assert sheet["K1"].value == "Notes"
        assert sheet["K2"].value == "badnote"

    def test_formula_like_text_stays_text(self, tmp_path: Path) -> None:
        sink = ExcelSink(tmp_path / "report.xlsx")
        sink.write_batch("rows", [{"Notes": "=HYPERLINK(\"http://x\")"}])
        sink.close()

        cell = load_workbook(sink.path)["rows"]["A2"]
        assert cell.data_type == "s"
        assert cell.value == "=HYPERLINK(\"http://x\")"

    def test_unsupported_value_raises_sink_error(self, tmp_path: Path) -> None:
        sink = ExcelSink(tmp_path / "report.xlsx")

        with pytest.raises(SinkError, match="rows"):
            sink.write_batch("rows", [{"Value": object()}])


class TestPdfSink:
    """Tests for PdfSink."""

    def test_report_title(self) -> None:
        assert report_title("maintenance_costs") == "Maintenance Costs Report"
        assert report_title("assets") == "Assets Report"

    def test_write_batch(self, tmp_path: Path, make_asset) -> None:
        sink = PdfSink(tmp_path, generated_on=date(2024, 1, 15))

        path = sink.write_batch("assets", asset_rows([make_asset("a1")]))
        sink.close()

        assert path.name == "assets.pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_empty_batch_still_written(self, tmp_path: Path) -> None:
        path = PdfSink(tmp_path).write_batch("empty", [])
        assert path.exists()
