"""Maintenance task model."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from asset_tracker.models.enums import (
    MaintenancePriority,
    MaintenanceStatus,
    MaintenanceType,
)

CLOSED_STATUSES = frozenset({MaintenanceStatus.COMPLETED.value, MaintenanceStatus.CANCELLED.value})


@dataclass
class MaintenanceTask:
    """Scheduled or completed service action on an asset."""

    task_id: str
    asset_id: str
    title: str
    description: str
    task_type: MaintenanceType | str
    priority: MaintenancePriority | str
    status: MaintenanceStatus | str
    scheduled_date: date | datetime | str | None
    completed_at: datetime | None = None
    cost: Decimal | None = None  # None counts as zero in cost sums
    assigned_to: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_open(self) -> bool:
        """True unless the task is completed or cancelled."""
        status = self.status.value if isinstance(self.status, MaintenanceStatus) else self.status
        return status not in CLOSED_STATUSES
