"""Pure aggregations over asset, warranty, maintenance and depreciation records."""

from asset_tracker.aggregation.dashboard import (
    MaintenanceBuckets,
    active_warranty_count,
    count_by_category,
    count_by_status,
    expiring_warranties,
    maintenance_buckets,
    status_distribution,
    top_categories,
    upcoming_maintenance,
)
from asset_tracker.aggregation.financial import (
    MonthlyCost,
    MonthlyDepreciation,
    depreciation_trend_by_month,
    maintenance_cost_by_month,
    total_asset_value,
    total_depreciation,
    total_maintenance_cost,
    value_by_category,
)
from asset_tracker.aggregation.views import (
    DashboardSummary,
    FinancialInsights,
    build_dashboard,
    build_financial_insights,
)

__all__ = [
    "DashboardSummary",
    "FinancialInsights",
    "MaintenanceBuckets",
    "MonthlyCost",
    "MonthlyDepreciation",
    "active_warranty_count",
    "build_dashboard",
    "build_financial_insights",
    "count_by_category",
    "count_by_status",
    "depreciation_trend_by_month",
    "expiring_warranties",
    "maintenance_buckets",
    "maintenance_cost_by_month",
    "status_distribution",
    "top_categories",
    "total_asset_value",
    "total_depreciation",
    "total_maintenance_cost",
    "upcoming_maintenance",
    "value_by_category",
]
