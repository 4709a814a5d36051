"""Flatten entities and view models into labeled rows for export.

Every function returns a list of dicts sharing the same keys, which is what
the spreadsheet and PDF sinks expect. Missing optional values become empty
strings.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Mapping

from asset_tracker.aggregation import (
    DashboardSummary,
    FinancialInsights,
    MonthlyCost,
    MonthlyDepreciation,
)
from asset_tracker.aggregation.base import status_value
from asset_tracker.aggregation.lists import task_state, warranty_state
from asset_tracker.exceptions import InvalidDateError
from asset_tracker.models import Asset, MaintenanceTask, Warranty
from asset_tracker.time_windows import MONTH_ABBR, DateLike, to_date


def display_date(value: Any) -> str:
    """``2024-01-05`` -> ``"Jan 5, 2024"``; unparseable values are shown as-is."""
    if value is None or value == "":
        return ""
    try:
        day = to_date(value)
    except InvalidDateError:
        return str(value)
    return f"{MONTH_ABBR[day.month - 1]} {day.day}, {day.year}"


def _text(value: Any) -> str:
    if value is None:
        return ""
    return status_value(value)


def _asset_name(assets_by_id: Mapping[str, Asset], asset_id: str) -> str:
    asset = assets_by_id.get(asset_id)
    return asset.name if asset else "Unknown Asset"


def asset_rows(assets: Iterable[Asset]) -> list[dict[str, Any]]:
    """One row per asset, with the columns of the asset report."""
    return [
        {
            "Name": asset.name or "",
            "Serial Number": asset.serial_number or "",
            "Model": asset.model or "",
            "Category": asset.category or "",
            "Status": _text(asset.status),
            "Location": asset.location or "",
            "Department": asset.department or "",
            "Assigned To": asset.assigned_to or "",
            "Purchase Date": display_date(asset.purchase_date),
            "Purchase Price": asset.purchase_price or Decimal("0"),
            "Notes": asset.notes or "",
        }
        for asset in assets
    ]


def warranty_rows(
    warranties: Iterable[Warranty],
    assets_by_id: Mapping[str, Asset],
    now: DateLike,
) -> list[dict[str, Any]]:
    """One row per warranty, with its expiry state relative to ``now``."""
    rows = []
    for warranty in warranties:
        try:
            state = warranty_state(warranty, now).value
        except InvalidDateError:
            state = "unknown"
        rows.append(
            {
                "Asset": _asset_name(assets_by_id, warranty.asset_id),
                "Provider": warranty.provider or "",
                "Type": _text(warranty.warranty_type),
                "Start Date": display_date(warranty.start_date),
                "End Date": display_date(warranty.end_date),
                "State": state,
            }
        )
    return rows


def maintenance_rows(
    tasks: Iterable[MaintenanceTask],
    assets_by_id: Mapping[str, Asset],
    now: DateLike,
) -> list[dict[str, Any]]:
    """One row per maintenance task, with its display state relative to ``now``."""
    rows = []
    for task in tasks:
        try:
            state = _text(task_state(task, now))
        except InvalidDateError:
            state = "unknown"
        rows.append(
            {
                "Title": task.title or "",
                "Asset": _asset_name(assets_by_id, task.asset_id),
                "Type": _text(task.task_type),
                "Priority": _text(task.priority),
                "State": state,
                "Scheduled Date": display_date(task.scheduled_date),
                "Assigned To": task.assigned_to or "",
                "Cost": "" if task.cost is None else task.cost,
            }
        )
    return rows


def mapping_rows(mapping: Mapping[str, Any], key_label: str, value_label: str) -> list[dict[str, Any]]:
    """Rows from a ``{label: value}`` mapping, in mapping order."""
    return [{key_label: key, value_label: value} for key, value in mapping.items()]


def monthly_cost_rows(costs: Iterable[MonthlyCost]) -> list[dict[str, Any]]:
    return [{"Month": entry.month, "Cost": entry.cost} for entry in costs]


def depreciation_rows(trend: Iterable[MonthlyDepreciation]) -> list[dict[str, Any]]:
    return [
        {"Month": entry.month, "Value": entry.value, "Depreciation": entry.depreciation}
        for entry in trend
    ]


def dashboard_report(
    summary: DashboardSummary,
    assets_by_id: Mapping[str, Asset],
    now: DateLike,
) -> dict[str, list[dict[str, Any]]]:
    """All dashboard tables, keyed by report name."""
    return {
        "overview": [
            {"Metric": "Total Assets", "Value": summary.total_assets},
            {"Metric": "Active Warranties", "Value": summary.active_warranties},
            {"Metric": "Expiring Warranties", "Value": len(summary.expiring_warranties)},
            {"Metric": "Upcoming Maintenance", "Value": len(summary.upcoming_maintenance)},
            *(
                {"Metric": f"Maintenance {name.title()}", "Value": count}
                for name, count in summary.maintenance_buckets.counts().items()
            ),
        ],
        "asset_status": mapping_rows(summary.status_counts, "Status", "Assets"),
        "asset_categories": mapping_rows(summary.category_counts, "Category", "Assets"),
        "expiring_warranties": warranty_rows(summary.expiring_warranties, assets_by_id, now),
        "upcoming_maintenance": maintenance_rows(summary.upcoming_maintenance, assets_by_id, now),
    }


def financial_report(insights: FinancialInsights) -> dict[str, list[dict[str, Any]]]:
    """All financial-insights tables, keyed by report name."""
    return {
        "financial_totals": [
            {"Metric": "Total Asset Value", "Value": insights.total_asset_value},
            {"Metric": "Total Maintenance Costs", "Value": insights.total_maintenance_cost},
            {"Metric": "Total Depreciation", "Value": insights.total_depreciation},
        ],
        "value_by_category": mapping_rows(insights.value_by_category, "Category", "Value"),
        "maintenance_costs": monthly_cost_rows(insights.maintenance_costs),
        "depreciation_trend": depreciation_rows(insights.depreciation_trend),
    }
