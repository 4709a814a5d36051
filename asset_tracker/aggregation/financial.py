"""Financial aggregations: totals, category values and monthly trends."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from asset_tracker.aggregation.base import ZERO, iter_dated, to_amount
from asset_tracker.exceptions import InvalidRecordError
from asset_tracker.models import Asset, DepreciationRecord, MaintenanceTask
from asset_tracker.time_windows import DateLike, MonthBucket, trailing_months

DEFAULT_TRAILING_MONTHS = 6


@dataclass(frozen=True)
class MonthlyCost:
    """Maintenance cost scheduled in one month."""

    bucket: MonthBucket
    cost: Decimal

    @property
    def month(self) -> str:
        return self.bucket.label


@dataclass(frozen=True)
class MonthlyDepreciation:
    """Book value and depreciation summed over one month."""

    bucket: MonthBucket
    value: Decimal
    depreciation: Decimal

    @property
    def month(self) -> str:
        return self.bucket.label


def total_asset_value(assets: Iterable[Asset]) -> Decimal:
    """Sum of purchase prices."""
    return sum((to_amount(asset.purchase_price) for asset in assets), ZERO)


def total_maintenance_cost(tasks: Iterable[MaintenanceTask]) -> Decimal:
    """Sum of task costs, whatever their status; missing cost counts as zero."""
    return sum((to_amount(task.cost) for task in tasks), ZERO)


def total_depreciation(records: Iterable[DepreciationRecord]) -> Decimal:
    """Sum of monthly depreciation amounts."""
    return sum((to_amount(record.depreciation_amount) for record in records), ZERO)


def value_by_category(assets: Iterable[Asset]) -> dict[str, Decimal]:
    """Purchase value per category, in first-encountered order."""
    totals: dict[str, Decimal] = {}
    for asset in assets:
        totals[asset.category] = totals.get(asset.category, ZERO) + to_amount(asset.purchase_price)
    return totals


def maintenance_cost_by_month(
    tasks: Iterable[MaintenanceTask],
    now: DateLike,
    months: int = DEFAULT_TRAILING_MONTHS,
    errors: list[InvalidRecordError] | None = None,
) -> list[MonthlyCost]:
    """Maintenance cost per trailing month, oldest first.

    Tasks are bucketed by scheduled date. There is one entry per month even
    when nothing was scheduled in it.

    Parameters
    ----------
    tasks : Iterable[MaintenanceTask]
        Tasks of any status.
    now : date | datetime | str
        Reference date; its month is the last bucket.
    months : int
        Number of trailing months (default 6).
    errors : list[InvalidRecordError] | None
        Collector for tasks excluded because of a bad scheduled date.

    Returns
    -------
    list[MonthlyCost]
        Exactly ``months`` entries.
    """
    sums = {bucket: ZERO for bucket in trailing_months(now, months)}
    for task, scheduled in iter_dated(
        tasks, lambda t: t.scheduled_date, "maintenance task", lambda t: t.task_id, errors
    ):
        bucket = MonthBucket(scheduled.year, scheduled.month)
        if bucket in sums:
            sums[bucket] += to_amount(task.cost)
    return [MonthlyCost(bucket, cost) for bucket, cost in sums.items()]


def depreciation_trend_by_month(
    records: Iterable[DepreciationRecord],
    now: DateLike,
    months: int = DEFAULT_TRAILING_MONTHS,
) -> list[MonthlyDepreciation]:
    """Book value and depreciation per trailing month, oldest first.

    Records are matched on their ``year`` and ``month`` fields. Months
    without records are zero-filled.
    """
    values = {bucket: ZERO for bucket in trailing_months(now, months)}
    amounts = dict(values)
    for record in records:
        bucket = MonthBucket(record.year, record.month)
        if bucket in values:
            values[bucket] += to_amount(record.value)
            amounts[bucket] += to_amount(record.depreciation_amount)
    return [MonthlyDepreciation(bucket, values[bucket], amounts[bucket]) for bucket in values]
