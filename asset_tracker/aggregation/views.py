"""View models for the dashboard and financial-insights pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from asset_tracker.aggregation.dashboard import (
    DEFAULT_HORIZON_DAYS,
    MaintenanceBuckets,
    active_warranty_count,
    count_by_category,
    count_by_status,
    expiring_warranties,
    maintenance_buckets,
    top_categories,
    upcoming_maintenance,
)
from asset_tracker.aggregation.financial import (
    DEFAULT_TRAILING_MONTHS,
    MonthlyCost,
    MonthlyDepreciation,
    depreciation_trend_by_month,
    maintenance_cost_by_month,
    total_asset_value,
    total_depreciation,
    total_maintenance_cost,
    value_by_category,
)
from asset_tracker.exceptions import InvalidRecordError
from asset_tracker.models import MaintenanceTask, Warranty
from asset_tracker.store.base import Snapshot
from asset_tracker.time_windows import DateLike


@dataclass
class DashboardSummary:
    """Everything the dashboard page shows."""

    total_assets: int
    active_warranties: int
    expiring_warranties: list[Warranty]
    upcoming_maintenance: list[MaintenanceTask]
    status_counts: dict[str, int]
    category_counts: dict[str, int]
    top_categories: list[tuple[str, int]]
    maintenance_buckets: MaintenanceBuckets
    excluded: list[InvalidRecordError] = field(default_factory=list)


@dataclass
class FinancialInsights:
    """Everything the financial-insights page shows."""

    total_asset_value: Decimal
    total_maintenance_cost: Decimal
    total_depreciation: Decimal
    value_by_category: dict[str, Decimal]
    maintenance_costs: list[MonthlyCost]
    depreciation_trend: list[MonthlyDepreciation]
    excluded: list[InvalidRecordError] = field(default_factory=list)


def _dedupe(errors: list[InvalidRecordError]) -> list[InvalidRecordError]:
    # The same bad record is reported once per windowed view that scans it.
    seen: set[tuple[str | None, str | None]] = set()
    result = []
    for error in errors:
        key = (error.kind, error.record_id)
        if key not in seen:
            seen.add(key)
            result.append(error)
    return result


def build_dashboard(
    snapshot: Snapshot,
    now: DateLike,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    top_n: int = 3,
) -> DashboardSummary:
    """Aggregate a snapshot into the dashboard view model."""
    errors: list[InvalidRecordError] = []
    categories = count_by_category(snapshot.assets)
    return DashboardSummary(
        total_assets=len(snapshot.assets),
        active_warranties=active_warranty_count(snapshot.warranties, now, errors),
        expiring_warranties=expiring_warranties(snapshot.warranties, now, horizon_days, errors),
        upcoming_maintenance=upcoming_maintenance(
            snapshot.maintenance_tasks, now, horizon_days, errors
        ),
        status_counts=count_by_status(snapshot.assets),
        category_counts=categories,
        top_categories=top_categories(categories, top_n),
        maintenance_buckets=maintenance_buckets(snapshot.maintenance_tasks, now, errors),
        excluded=_dedupe(errors),
    )


def build_financial_insights(
    snapshot: Snapshot,
    now: DateLike,
    months: int = DEFAULT_TRAILING_MONTHS,
) -> FinancialInsights:
    """Aggregate a snapshot into the financial-insights view model."""
    errors: list[InvalidRecordError] = []
    return FinancialInsights(
        total_asset_value=total_asset_value(snapshot.assets),
        total_maintenance_cost=total_maintenance_cost(snapshot.maintenance_tasks),
        total_depreciation=total_depreciation(snapshot.depreciation_records),
        value_by_category=value_by_category(snapshot.assets),
        maintenance_costs=maintenance_cost_by_month(snapshot.maintenance_tasks, now, months, errors),
        depreciation_trend=depreciation_trend_by_month(snapshot.depreciation_records, now, months),
        excluded=_dedupe(errors),
    )
