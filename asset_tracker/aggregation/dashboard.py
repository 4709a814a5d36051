"""Dashboard aggregations: status and category tallies, warranty and
maintenance windows.

Functions here are pure: they never mutate their inputs and take the
reference date ``now`` explicitly. Records whose relevant date is malformed
are left out of windowed results (see ``iter_dated``) but still count in
plain tallies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterable, Mapping

from asset_tracker.aggregation.base import iter_dated, status_value
from asset_tracker.exceptions import InvalidRecordError
from asset_tracker.models import Asset, AssetStatus, MaintenanceTask, Warranty
from asset_tracker.time_windows import DateLike, to_date

DEFAULT_HORIZON_DAYS = 30


@dataclass
class MaintenanceBuckets:
    """Open maintenance tasks split by scheduled day relative to today."""

    overdue: list[MaintenanceTask] = field(default_factory=list)
    today: list[MaintenanceTask] = field(default_factory=list)
    upcoming: list[MaintenanceTask] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {
            "overdue": len(self.overdue),
            "today": len(self.today),
            "upcoming": len(self.upcoming),
        }

    def __len__(self) -> int:
        return len(self.overdue) + len(self.today) + len(self.upcoming)


def count_by_status(assets: Iterable[Asset]) -> dict[str, int]:
    """Count assets per canonical status.

    All four statuses are present in the result, zero when unobserved.
    Statuses outside the canonical set are ignored here; see
    ``status_distribution`` for a view that keeps them.
    """
    counts = {status.value: 0 for status in AssetStatus}
    for asset in assets:
        key = status_value(asset.status)
        if key in counts:
            counts[key] += 1
    return counts


def status_distribution(assets: Iterable[Asset]) -> dict[str, int]:
    """Count assets per status value actually present, unknown ones included."""
    counts: dict[str, int] = {}
    for asset in assets:
        key = status_value(asset.status)
        counts[key] = counts.get(key, 0) + 1
    return counts


def count_by_category(assets: Iterable[Asset]) -> dict[str, int]:
    """Count assets per category label, in first-encountered order.

    Labels are used as-is (case-sensitive, no trimming).
    """
    counts: dict[str, int] = {}
    for asset in assets:
        counts[asset.category] = counts.get(asset.category, 0) + 1
    return counts


def top_categories(
    assets_or_counts: Iterable[Asset] | Mapping[str, int], n: int = 3
) -> list[tuple[str, int]]:
    """The ``n`` largest categories, ties kept in first-encountered order.

    Accepts either assets or the output of ``count_by_category``.
    """
    if isinstance(assets_or_counts, Mapping):
        counts = assets_or_counts
    else:
        counts = count_by_category(assets_or_counts)
    # sorted() is stable, so equal counts keep the mapping's insertion order
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)[:n]


def expiring_warranties(
    warranties: Iterable[Warranty],
    now: DateLike,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    errors: list[InvalidRecordError] | None = None,
) -> list[Warranty]:
    """Warranties ending strictly between ``now`` and ``now + horizon_days``.

    Parameters
    ----------
    warranties : Iterable[Warranty]
        Warranties to scan.
    now : date | datetime | str
        Reference date.
    horizon_days : int
        Size of the window in days (default 30).
    errors : list[InvalidRecordError] | None
        Collector for warranties excluded because of a bad end date.

    Returns
    -------
    list[Warranty]
        Matching warranties in input order.
    """
    today = to_date(now)
    horizon = today + timedelta(days=horizon_days)
    return [
        warranty
        for warranty, end in iter_dated(
            warranties, lambda w: w.end_date, "warranty", lambda w: w.warranty_id, errors
        )
        if today < end < horizon
    ]


def active_warranty_count(
    warranties: Iterable[Warranty],
    now: DateLike,
    errors: list[InvalidRecordError] | None = None,
) -> int:
    """Number of warranties ending after ``now``'s day."""
    today = to_date(now)
    return sum(
        1
        for _, end in iter_dated(
            warranties, lambda w: w.end_date, "warranty", lambda w: w.warranty_id, errors
        )
        if today < end
    )


def upcoming_maintenance(
    tasks: Iterable[MaintenanceTask],
    now: DateLike,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    errors: list[InvalidRecordError] | None = None,
) -> list[MaintenanceTask]:
    """Open tasks scheduled strictly between ``now`` and ``now + horizon_days``."""
    today = to_date(now)
    horizon = today + timedelta(days=horizon_days)
    open_tasks = (task for task in tasks if task.is_open)
    return [
        task
        for task, scheduled in iter_dated(
            open_tasks, lambda t: t.scheduled_date, "maintenance task", lambda t: t.task_id, errors
        )
        if today < scheduled < horizon
    ]


def maintenance_buckets(
    tasks: Iterable[MaintenanceTask],
    now: DateLike,
    errors: list[InvalidRecordError] | None = None,
) -> MaintenanceBuckets:
    """Partition open tasks into overdue, today and upcoming.

    Overdue is scheduled before today, today is scheduled today, upcoming is
    tomorrow or later. Every open task with a valid date lands in exactly one
    bucket; completed and cancelled tasks are left out.
    """
    today = to_date(now)
    buckets = MaintenanceBuckets()
    open_tasks = (task for task in tasks if task.is_open)
    for task, scheduled in iter_dated(
        open_tasks, lambda t: t.scheduled_date, "maintenance task", lambda t: t.task_id, errors
    ):
        if scheduled < today:
            buckets.overdue.append(task)
        elif scheduled == today:
            buckets.today.append(task)
        else:
            buckets.upcoming.append(task)
    return buckets
