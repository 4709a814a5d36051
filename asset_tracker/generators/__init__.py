"""Synthetic data generators for asset-tracking records."""

from asset_tracker.generators.asset import AssetGenerator
from asset_tracker.generators.base import BaseGenerator
from asset_tracker.generators.depreciation import DepreciationGenerator
from asset_tracker.generators.maintenance import MaintenanceTaskGenerator
from asset_tracker.generators.warranty import WarrantyGenerator

__all__ = [
    "AssetGenerator",
    "BaseGenerator",
    "DepreciationGenerator",
    "MaintenanceTaskGenerator",
    "WarrantyGenerator",
]
