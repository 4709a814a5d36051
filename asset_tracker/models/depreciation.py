"""Depreciation record model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from asset_tracker.models.enums import DepreciationMethod


@dataclass
class DepreciationRecord:
    """Monthly book-value snapshot for an asset."""

    record_id: str
    asset_id: str
    year: int
    month: int  # 1-12
    value: Decimal  # Book value at the end of the month
    depreciation_amount: Decimal
    method: DepreciationMethod | str
    created_at: datetime | None = None
