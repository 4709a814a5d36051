"""Build entities from record store rows.

Rows may use the snake_case column names of the relational schema or the
camelCase keys of the hosted store's JSON API. Enumerated values outside the
known set and dates that cannot be parsed are kept as raw strings; the
aggregation layer decides what to do with them. A malformed purchase price
or task cost is logged and read as missing, so the record still counts.
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping

from asset_tracker.exceptions import InvalidDateError, InvalidRecordError
from asset_tracker.models.asset import Asset
from asset_tracker.models.depreciation import DepreciationRecord
from asset_tracker.models.enums import (
    AssetStatus,
    DepreciationMethod,
    MaintenancePriority,
    MaintenanceStatus,
    MaintenanceType,
    WarrantyType,
)
from asset_tracker.models.maintenance import MaintenanceTask
from asset_tracker.models.warranty import Warranty
from asset_tracker.time_windows import to_date

logger = logging.getLogger(__name__)

# Older maintenance screens used a different status vocabulary.
LEGACY_MAINTENANCE_STATUS = {
    "pending": MaintenanceStatus.SCHEDULED,
    "in_progress": MaintenanceStatus.IN_PROGRESS,
}


def _get(row: Mapping[str, Any], snake: str, camel: str | None = None, default: Any = None) -> Any:
    if snake in row:
        return row[snake]
    if camel is not None and camel in row:
        return row[camel]
    return default


def _coerce_enum(enum_cls: type[Enum], value: Any) -> Any:
    if isinstance(value, enum_cls) or value is None:
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _date_or_raw(value: Any) -> date | str | None:
    if value is None or isinstance(value, (date, datetime)):
        return value
    try:
        return to_date(value)
    except InvalidDateError:
        return str(value)


def _timestamp(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def _amount(value: Any, kind: str, record_id: str, field_name: str) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise InvalidRecordError(
            f"{kind} {record_id}: invalid {field_name} {value!r}", kind=kind, record_id=record_id
        ) from e


def _optional_amount(value: Any, kind: str, record_id: str, field_name: str) -> Decimal | None:
    if value is None or value == "":
        return None
    return _amount(value, kind, record_id, field_name)


def _lenient_amount(value: Any, kind: str, record_id: str, field_name: str) -> Decimal | None:
    """Parse an optional amount; a malformed one is logged and read as ``None``."""
    try:
        return _optional_amount(value, kind, record_id, field_name)
    except InvalidRecordError as e:
        logger.warning("Ignoring amount: %s", e)
        return None


def asset_from_row(row: Mapping[str, Any]) -> Asset:
    """Create an ``Asset`` from a store row."""
    asset_id = str(_get(row, "asset_id", "id"))
    price = _lenient_amount(_get(row, "purchase_price", "purchasePrice"), "asset", asset_id, "purchase_price")
    return Asset(
        asset_id=asset_id,
        name=_get(row, "name", default=""),
        serial_number=_get(row, "serial_number", "serialNumber", ""),
        model=_get(row, "model", default=""),
        category=_get(row, "category", default=""),
        status=_coerce_enum(AssetStatus, _get(row, "status")),
        purchase_date=_date_or_raw(_get(row, "purchase_date", "purchaseDate")),
        purchase_price=price if price is not None else Decimal("0"),
        location=_get(row, "location", default=""),
        assigned_to=_get(row, "assigned_to", "assignedTo"),
        department=_get(row, "department"),
        notes=_get(row, "notes", default="") or "",
        created_at=_timestamp(_get(row, "created_at", "createdAt")),
        updated_at=_timestamp(_get(row, "updated_at", "updatedAt")),
    )


def warranty_from_row(row: Mapping[str, Any]) -> Warranty:
    """Create a ``Warranty`` from a store row."""
    return Warranty(
        warranty_id=str(_get(row, "warranty_id", "id")),
        asset_id=str(_get(row, "asset_id", "assetId")),
        provider=_get(row, "provider", default=""),
        start_date=_date_or_raw(_get(row, "start_date", "startDate")),
        end_date=_date_or_raw(_get(row, "end_date", "endDate")),
        warranty_type=_coerce_enum(WarrantyType, _get(row, "warranty_type", "type")),
        coverage_details=_get(row, "coverage_details", "coverageDetails", "") or "",
        document_url=_get(row, "document_url", "documentUrl"),
        contact_info=_get(row, "contact_info", "contactInfo", "") or "",
        created_at=_timestamp(_get(row, "created_at", "createdAt")),
        updated_at=_timestamp(_get(row, "updated_at", "updatedAt")),
    )


def maintenance_task_from_row(row: Mapping[str, Any]) -> MaintenanceTask:
    """Create a ``MaintenanceTask`` from a store row.

    The legacy ``pending`` / ``in_progress`` statuses are mapped onto the
    canonical vocabulary.
    """
    task_id = str(_get(row, "task_id", "id"))
    status = _get(row, "status")
    status = LEGACY_MAINTENANCE_STATUS.get(status, status) if isinstance(status, str) else status
    return MaintenanceTask(
        task_id=task_id,
        asset_id=str(_get(row, "asset_id", "assetId")),
        title=_get(row, "title", default=""),
        description=_get(row, "description", default="") or "",
        task_type=_coerce_enum(MaintenanceType, _get(row, "task_type", "type")),
        priority=_coerce_enum(MaintenancePriority, _get(row, "priority")),
        status=_coerce_enum(MaintenanceStatus, status),
        scheduled_date=_date_or_raw(_get(row, "scheduled_date", "scheduledDate")),
        completed_at=_timestamp(_get(row, "completed_at", "completedAt")),
        cost=_lenient_amount(_get(row, "cost"), "maintenance task", task_id, "cost"),
        assigned_to=_get(row, "assigned_to", "assignedTo"),
        notes=_get(row, "notes"),
        created_at=_timestamp(_get(row, "created_at", "createdAt")),
        updated_at=_timestamp(_get(row, "updated_at", "updatedAt")),
    )


def depreciation_record_from_row(row: Mapping[str, Any]) -> DepreciationRecord:
    """Create a ``DepreciationRecord`` from a store row."""
    record_id = str(_get(row, "record_id", "id"))
    try:
        year = int(_get(row, "year"))
        month = int(_get(row, "month"))
    except (TypeError, ValueError) as e:
        raise InvalidRecordError(
            f"depreciation record {record_id}: invalid year/month",
            kind="depreciation record",
            record_id=record_id,
        ) from e
    return DepreciationRecord(
        record_id=record_id,
        asset_id=str(_get(row, "asset_id", "assetId")),
        year=year,
        month=month,
        value=_amount(_get(row, "value", default=0), "depreciation record", record_id, "value"),
        depreciation_amount=_amount(
            _get(row, "depreciation_amount", "depreciationAmount", 0),
            "depreciation record",
            record_id,
            "depreciation_amount",
        ),
        method=_coerce_enum(DepreciationMethod, _get(row, "method")),
        created_at=_timestamp(_get(row, "created_at", "createdAt")),
    )
