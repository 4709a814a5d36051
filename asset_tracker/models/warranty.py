"""Warranty model."""

from dataclasses import dataclass
from datetime import date, datetime

from asset_tracker.models.enums import WarrantyType


@dataclass
class Warranty:
    """Coverage agreement tied to one asset with a validity window."""

    warranty_id: str
    asset_id: str
    provider: str
    start_date: date | str | None
    end_date: date | str | None  # Not checked against start_date
    warranty_type: WarrantyType | str
    coverage_details: str = ""
    document_url: str | None = None
    contact_info: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
