"""Tests for list-view search, filtering and state classification."""

from datetime import date

import pytest

from asset_tracker.aggregation.lists import (
    filter_assets_by_status,
    filter_tasks,
    filter_warranties,
    search_assets,
    search_tasks,
    search_warranties,
    task_state,
    warranty_state,
)
from asset_tracker.exceptions import InvalidDateError
from asset_tracker.models import AssetStatus, MaintenanceStatus, TaskState, WarrantyState


class TestAssetList:
    """Tests for search_assets and filter_assets_by_status."""

    def test_search_is_case_insensitive(self, make_asset) -> None:
        laptop = make_asset("a1", name="Design Laptop")
        monitor = make_asset("a2", name="Wall Monitor", model="UltraSharp", category="Monitor")

        assert search_assets([laptop, monitor], "ULTRA") == [monitor]
        assert search_assets([laptop, monitor], "design") == [laptop]

    def test_search_matches_serial_number(self, make_asset) -> None:
        asset = make_asset("a1", serial_number="SN-ABC123")
        assert search_assets([asset], "abc1") == [asset]

    def test_empty_query_returns_all(self, make_asset) -> None:
        assets = [make_asset("a1"), make_asset("a2")]
        assert search_assets(assets, "") == assets

    def test_filter_by_status(self, make_asset) -> None:
        active = make_asset("a1")
        retired = make_asset("a2", status="retired")

        assert filter_assets_by_status([active, retired], AssetStatus.RETIRED) == [retired]
        assert filter_assets_by_status([active, retired], None) == [active, retired]


class TestWarrantyList:
    """Tests for warranty_state, filter_warranties and search_warranties."""

    @pytest.mark.parametrize(
        ("end_date", "expected"),
        [
            (date(2024, 1, 14), WarrantyState.EXPIRED),
            (date(2024, 1, 15), WarrantyState.EXPIRING_SOON),
            (date(2024, 2, 14), WarrantyState.EXPIRING_SOON),
            (date(2024, 2, 15), WarrantyState.ACTIVE),
        ],
    )
    def test_warranty_state(self, make_warranty, now, end_date, expected) -> None:
        assert warranty_state(make_warranty(end_date=end_date), now) == expected

    def test_warranty_state_bad_date_raises(self, make_warranty, now) -> None:
        with pytest.raises(InvalidDateError):
            warranty_state(make_warranty(end_date="n/a"), now)

    def test_filter_warranties(self, sample_snapshot, now) -> None:
        warranties = sample_snapshot.warranties

        active = filter_warranties(warranties, now, "active")
        expired = filter_warranties(warranties, now, WarrantyState.EXPIRED)
        expiring = filter_warranties(warranties, now, "expiring-soon")

        assert [w.warranty_id for w in active] == ["war-001", "war-002"]
        assert [w.warranty_id for w in expired] == ["war-003"]
        assert [w.warranty_id for w in expiring] == ["war-001"]
        assert len(filter_warranties(warranties, now, None)) == 3

    def test_search_by_asset_name_provider_and_type(self, sample_snapshot) -> None:
        assets_by_id = sample_snapshot.assets_by_id()
        warranties = sample_snapshot.warranties

        assert len(search_warranties(warranties, assets_by_id, "laptop asset-002")) == 1
        assert len(search_warranties(warranties, assets_by_id, "prosupport")) == 3
        assert len(search_warranties(warranties, assets_by_id, "STANDARD")) == 3
        assert search_warranties(warranties, assets_by_id, "applecare") == []


class TestTaskList:
    """Tests for task_state, filter_tasks and search_tasks."""

    def test_task_state_by_date(self, make_task, now) -> None:
        assert task_state(make_task(scheduled_date=date(2024, 1, 1)), now) == TaskState.OVERDUE
        assert task_state(make_task(scheduled_date=now), now) == TaskState.TODAY
        assert task_state(make_task(scheduled_date=date(2024, 3, 1)), now) == TaskState.SCHEDULED

    def test_task_state_by_status(self, make_task, now) -> None:
        past = date(2024, 1, 1)
        assert task_state(make_task(status=MaintenanceStatus.COMPLETED, scheduled_date=past), now) == TaskState.COMPLETED
        assert task_state(make_task(status="in-progress", scheduled_date=past), now) == TaskState.IN_PROGRESS
        assert task_state(make_task(status="cancelled", scheduled_date=past), now) == TaskState.CANCELLED

    def test_unknown_status_returned_unchanged(self, make_task, now) -> None:
        assert task_state(make_task(status="on-hold"), now) == "on-hold"

    def test_filter_tasks_by_window(self, sample_snapshot, now) -> None:
        tasks = sample_snapshot.maintenance_tasks

        assert [t.task_id for t in filter_tasks(tasks, now, "overdue")] == ["task-001"]
        assert [t.task_id for t in filter_tasks(tasks, now, "today")] == ["task-002"]
        assert [t.task_id for t in filter_tasks(tasks, now, "upcoming")] == ["task-003"]

    def test_filter_tasks_by_status(self, sample_snapshot, now) -> None:
        tasks = sample_snapshot.maintenance_tasks

        assert [t.task_id for t in filter_tasks(tasks, now, "completed")] == ["task-004"]
        assert len(filter_tasks(tasks, now, None)) == 4

    def test_search_tasks(self, make_task, make_asset) -> None:
        assets_by_id = {"asset-001": make_asset("asset-001", name="Reception Printer")}
        toner = make_task("t1", title="Replace toner")
        fan = make_task("t2", asset_id="missing", title="Clean fan", description="Dusty")

        assert search_tasks([toner, fan], assets_by_id, "reception") == [toner]
        assert search_tasks([toner, fan], assets_by_id, "dusty") == [fan]
        assert search_tasks([toner, fan], assets_by_id, "") == [toner, fan]
