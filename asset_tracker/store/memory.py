"""In-memory record store with referential integrity."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from asset_tracker.exceptions import EntityNotFoundError, InvalidDateError, ReferentialIntegrityError
from asset_tracker.models import Asset, DepreciationRecord, MaintenanceTask, Warranty
from asset_tracker.time_windows import to_date


def _date_key(value: Any) -> tuple[int, date]:
    """Sort key for a date field; malformed dates sort last."""
    try:
        return (0, to_date(value))
    except InvalidDateError:
        return (1, date.max)


@dataclass
class InMemoryRecordStore:
    """Record store backed by dictionaries, with per-asset indexes.

    List methods return new lists in the order the hosted store uses:
    assets newest first, warranties by end date, maintenance tasks by
    scheduled date, depreciation records by year and month.
    """

    # Primary entities
    assets: dict[str, Asset] = field(default_factory=dict)
    warranties: dict[str, Warranty] = field(default_factory=dict)
    maintenance_tasks: dict[str, MaintenanceTask] = field(default_factory=dict)
    depreciation_records: dict[str, DepreciationRecord] = field(default_factory=dict)

    # Relationship indexes
    _asset_warranties: dict[str, list[str]] = field(default_factory=dict)
    _asset_tasks: dict[str, list[str]] = field(default_factory=dict)
    _asset_depreciation: dict[str, list[str]] = field(default_factory=dict)

    def add_asset(self, asset: Asset) -> None:
        """Add an asset to the store."""
        if asset.created_at is None:
            asset.created_at = datetime.now()
        self.assets[asset.asset_id] = asset
        self._asset_warranties.setdefault(asset.asset_id, [])
        self._asset_tasks.setdefault(asset.asset_id, [])
        self._asset_depreciation.setdefault(asset.asset_id, [])

    def add_warranty(self, warranty: Warranty) -> None:
        """Add a warranty to the store."""
        if warranty.asset_id not in self.assets:
            raise ReferentialIntegrityError(f"Asset {warranty.asset_id} not found")

        self.warranties[warranty.warranty_id] = warranty
        self._asset_warranties[warranty.asset_id].append(warranty.warranty_id)

    def add_maintenance_task(self, task: MaintenanceTask) -> None:
        """Add a maintenance task to the store."""
        if task.asset_id not in self.assets:
            raise ReferentialIntegrityError(f"Asset {task.asset_id} not found")

        self.maintenance_tasks[task.task_id] = task
        self._asset_tasks[task.asset_id].append(task.task_id)

    def add_depreciation_record(self, record: DepreciationRecord) -> None:
        """Add a depreciation record to the store."""
        if record.asset_id not in self.assets:
            raise ReferentialIntegrityError(f"Asset {record.asset_id} not found")

        self.depreciation_records[record.record_id] = record
        self._asset_depreciation[record.asset_id].append(record.record_id)

    def get_asset(self, asset_id: str) -> Asset:
        """Get a single asset."""
        try:
            return self.assets[asset_id]
        except KeyError:
            raise EntityNotFoundError(f"Asset {asset_id} not found") from None

    # RecordStore methods
    def list_assets(self) -> list[Asset]:
        """All assets, newest first."""
        return sorted(
            self.assets.values(),
            key=lambda a: a.created_at or datetime.min,
            reverse=True,
        )

    def list_warranties(self, asset_id: str | None = None) -> list[Warranty]:
        """Warranties ordered by end date, optionally for one asset."""
        if asset_id is None:
            warranties = list(self.warranties.values())
        else:
            warranties = [self.warranties[wid] for wid in self._asset_warranties.get(asset_id, [])]
        return sorted(warranties, key=lambda w: _date_key(w.end_date))

    def list_maintenance_tasks(self, asset_id: str | None = None) -> list[MaintenanceTask]:
        """Maintenance tasks ordered by scheduled date, optionally for one asset."""
        if asset_id is None:
            tasks = list(self.maintenance_tasks.values())
        else:
            tasks = [self.maintenance_tasks[tid] for tid in self._asset_tasks.get(asset_id, [])]
        return sorted(tasks, key=lambda t: _date_key(t.scheduled_date))

    def list_depreciation_records(self, asset_id: str | None = None) -> list[DepreciationRecord]:
        """Depreciation records ordered by year and month, optionally for one asset."""
        if asset_id is None:
            records = list(self.depreciation_records.values())
        else:
            records = [
                self.depreciation_records[rid] for rid in self._asset_depreciation.get(asset_id, [])
            ]
        return sorted(records, key=lambda r: (r.year, r.month))

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "assets": len(self.assets),
            "warranties": len(self.warranties),
            "maintenance_tasks": len(self.maintenance_tasks),
            "depreciation_records": len(self.depreciation_records),
        }
