"""Pytest configuration and fixtures."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable

import pytest

from asset_tracker.models import (
    Asset,
    AssetStatus,
    DepreciationMethod,
    DepreciationRecord,
    MaintenancePriority,
    MaintenanceStatus,
    MaintenanceTask,
    MaintenanceType,
    Warranty,
    WarrantyType,
)
from asset_tracker.store.base import Snapshot


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def now() -> date:
    """Reference date used across aggregation tests."""
    return date(2024, 1, 15)


@pytest.fixture
def make_asset() -> Callable[..., Asset]:
    """Factory for assets with sensible defaults."""

    def factory(asset_id: str = "asset-001", **overrides: Any) -> Asset:
        values: dict[str, Any] = {
            "asset_id": asset_id,
            "name": f"Laptop {asset_id}",
            "serial_number": f"SN-{asset_id}",
            "model": "ThinkPad T14",
            "category": "Laptop",
            "status": AssetStatus.ACTIVE,
            "purchase_date": date(2023, 1, 10),
            "purchase_price": Decimal("1200.00"),
            "location": "HQ Floor 1",
            "created_at": datetime(2023, 1, 10, 9, 0),
        }
        values.update(overrides)
        return Asset(**values)

    return factory


@pytest.fixture
def make_warranty() -> Callable[..., Warranty]:
    """Factory for warranties."""

    def factory(warranty_id: str = "war-001", **overrides: Any) -> Warranty:
        values: dict[str, Any] = {
            "warranty_id": warranty_id,
            "asset_id": "asset-001",
            "provider": "Dell ProSupport",
            "start_date": date(2023, 1, 10),
            "end_date": date(2025, 1, 10),
            "warranty_type": WarrantyType.STANDARD,
        }
        values.update(overrides)
        return Warranty(**values)

    return factory


@pytest.fixture
def make_task() -> Callable[..., MaintenanceTask]:
    """Factory for maintenance tasks."""

    def factory(task_id: str = "task-001", **overrides: Any) -> MaintenanceTask:
        values: dict[str, Any] = {
            "task_id": task_id,
            "asset_id": "asset-001",
            "title": "Replace battery",
            "description": "Battery holds less than 50% charge",
            "task_type": MaintenanceType.PREVENTIVE,
            "priority": MaintenancePriority.MEDIUM,
            "status": MaintenanceStatus.SCHEDULED,
            "scheduled_date": date(2024, 1, 20),
        }
        values.update(overrides)
        return MaintenanceTask(**values)

    return factory


@pytest.fixture
def make_record() -> Callable[..., DepreciationRecord]:
    """Factory for depreciation records."""

    def factory(record_id: str = "dep-001", **overrides: Any) -> DepreciationRecord:
        values: dict[str, Any] = {
            "record_id": record_id,
            "asset_id": "asset-001",
            "year": 2024,
            "month": 1,
            "value": Decimal("1000.00"),
            "depreciation_amount": Decimal("20.00"),
            "method": DepreciationMethod.STRAIGHT_LINE,
        }
        values.update(overrides)
        return DepreciationRecord(**values)

    return factory


@pytest.fixture
def sample_snapshot(make_asset, make_warranty, make_task, make_record) -> Snapshot:
    """Small portfolio: two laptops and a monitor with warranties, tasks and depreciation."""
    assets = (
        make_asset("asset-001"),
        make_asset("asset-002", status=AssetStatus.MAINTENANCE, purchase_price=Decimal("300.00"), category="Monitor"),
        make_asset("asset-003", purchase_price=Decimal("900.00")),
    )
    warranties = (
        make_warranty("war-001", end_date=date(2024, 1, 30)),
        make_warranty("war-002", asset_id="asset-002", end_date=date(2024, 2, 20)),
        make_warranty("war-003", asset_id="asset-003", end_date=date(2023, 12, 31)),
    )
    tasks = (
        make_task("task-001", scheduled_date=date(2024, 1, 10)),
        make_task("task-002", scheduled_date=date(2024, 1, 15)),
        make_task("task-003", scheduled_date=date(2024, 1, 25)),
        make_task(
            "task-004",
            status=MaintenanceStatus.COMPLETED,
            scheduled_date=date(2023, 12, 5),
            cost=Decimal("150.00"),
        ),
    )
    records = (
        make_record("dep-001", year=2023, month=12, value=Decimal("1020.00")),
        make_record("dep-002", year=2024, month=1, value=Decimal("1000.00")),
    )
    return Snapshot(
        assets=assets,
        warranties=warranties,
        maintenance_tasks=tasks,
        depreciation_records=records,
    )
