"""Domain models for asset tracking."""

from asset_tracker.models.asset import Asset
from asset_tracker.models.depreciation import DepreciationRecord
from asset_tracker.models.enums import (
    AssetStatus,
    DepreciationMethod,
    MaintenancePriority,
    MaintenanceStatus,
    MaintenanceType,
    TaskState,
    WarrantyState,
    WarrantyType,
)
from asset_tracker.models.maintenance import MaintenanceTask
from asset_tracker.models.warranty import Warranty

__all__ = [
    "Asset",
    "AssetStatus",
    "DepreciationMethod",
    "DepreciationRecord",
    "MaintenancePriority",
    "MaintenanceStatus",
    "MaintenanceTask",
    "MaintenanceType",
    "TaskState",
    "Warranty",
    "WarrantyState",
    "WarrantyType",
]
