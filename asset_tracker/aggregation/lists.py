"""Search, filter and state classification for the asset, warranty and
maintenance list views."""

from __future__ import annotations

from typing import Iterable, Mapping

from asset_tracker.aggregation.base import iter_dated, status_value
from asset_tracker.aggregation.dashboard import DEFAULT_HORIZON_DAYS, maintenance_buckets
from asset_tracker.exceptions import InvalidRecordError
from asset_tracker.models import (
    Asset,
    AssetStatus,
    MaintenanceStatus,
    MaintenanceTask,
    TaskState,
    Warranty,
    WarrantyState,
)
from asset_tracker.time_windows import DateLike, days_until, to_date

TASK_WINDOW_FILTERS = ("overdue", "today", "upcoming")


def _matches(query: str, *fields: str | None) -> bool:
    needle = query.lower()
    return any(value is not None and needle in value.lower() for value in fields)


def search_assets(assets: Iterable[Asset], query: str) -> list[Asset]:
    """Assets whose name, model, serial number or category contains ``query``.

    Matching is case-insensitive; an empty query returns every asset.
    """
    if not query:
        return list(assets)
    return [
        asset
        for asset in assets
        if _matches(query, asset.name, asset.model, asset.serial_number, asset.category)
    ]


def filter_assets_by_status(assets: Iterable[Asset], status: AssetStatus | str | None) -> list[Asset]:
    """Assets with the given status; ``None`` keeps them all."""
    if status is None:
        return list(assets)
    wanted = status_value(status)
    return [asset for asset in assets if status_value(asset.status) == wanted]


def warranty_state(
    warranty: Warranty,
    now: DateLike,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
) -> WarrantyState:
    """Classify a warranty as expired, expiring soon or active.

    Raises
    ------
    InvalidDateError
        If the warranty's end date cannot be parsed.
    """
    remaining = days_until(warranty.end_date, now)
    if remaining < 0:
        return WarrantyState.EXPIRED
    if remaining <= horizon_days:
        return WarrantyState.EXPIRING_SOON
    return WarrantyState.ACTIVE


def filter_warranties(
    warranties: Iterable[Warranty],
    now: DateLike,
    state: WarrantyState | str | None,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    errors: list[InvalidRecordError] | None = None,
) -> list[Warranty]:
    """Warranties matching an ``active``, ``expired`` or ``expiring-soon`` filter.

    ``active`` keeps every warranty that ends after today, including those
    about to expire. ``None`` keeps them all.
    """
    if state is None:
        return list(warranties)
    wanted = WarrantyState(status_value(state))
    today = to_date(now)
    result = []
    for warranty, end in iter_dated(
        warranties, lambda w: w.end_date, "warranty", lambda w: w.warranty_id, errors
    ):
        if wanted is WarrantyState.ACTIVE:
            keep = today < end
        elif wanted is WarrantyState.EXPIRED:
            keep = end < today
        else:
            keep = today < end and (end - today).days <= horizon_days
        if keep:
            result.append(warranty)
    return result


def search_warranties(
    warranties: Iterable[Warranty],
    assets_by_id: Mapping[str, Asset],
    query: str,
) -> list[Warranty]:
    """Warranties whose asset name, provider or type contains ``query``."""
    if not query:
        return list(warranties)
    result = []
    for warranty in warranties:
        asset = assets_by_id.get(warranty.asset_id)
        if _matches(
            query,
            asset.name if asset else None,
            warranty.provider,
            status_value(warranty.warranty_type),
        ):
            result.append(warranty)
    return result


def task_state(task: MaintenanceTask, now: DateLike) -> TaskState | str:
    """Display state of a task.

    Scheduled tasks are refined into overdue / today / scheduled by date.
    Unknown statuses are returned unchanged.
    """
    status = status_value(task.status)
    if status == MaintenanceStatus.COMPLETED.value:
        return TaskState.COMPLETED
    if status == MaintenanceStatus.IN_PROGRESS.value:
        return TaskState.IN_PROGRESS
    if status == MaintenanceStatus.CANCELLED.value:
        return TaskState.CANCELLED
    if status != MaintenanceStatus.SCHEDULED.value:
        return task.status

    scheduled = to_date(task.scheduled_date)
    today = to_date(now)
    if scheduled < today:
        return TaskState.OVERDUE
    if scheduled == today:
        return TaskState.TODAY
    return TaskState.SCHEDULED


def filter_tasks(
    tasks: Iterable[MaintenanceTask],
    now: DateLike,
    name: str | None,
    errors: list[InvalidRecordError] | None = None,
) -> list[MaintenanceTask]:
    """Tasks matching a window filter or a plain status.

    ``overdue``, ``today`` and ``upcoming`` select the matching bucket of
    open tasks; any other value is compared with the task status.
    """
    if name is None:
        return list(tasks)
    if name in TASK_WINDOW_FILTERS:
        return getattr(maintenance_buckets(tasks, now, errors), name)
    return [task for task in tasks if status_value(task.status) == name]


def search_tasks(
    tasks: Iterable[MaintenanceTask],
    assets_by_id: Mapping[str, Asset],
    query: str,
) -> list[MaintenanceTask]:
    """Tasks whose title, description or asset name contains ``query``."""
    if not query:
        return list(tasks)
    result = []
    for task in tasks:
        asset = assets_by_id.get(task.asset_id)
        if _matches(query, asset.name if asset else None, task.title, task.description):
            result.append(task)
    return result
