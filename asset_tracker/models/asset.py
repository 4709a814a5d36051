"""Asset model."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from asset_tracker.models.enums import AssetStatus


@dataclass
class Asset:
    """A tracked piece of hardware or equipment.

    ``status`` holds an ``AssetStatus`` for known values; anything else a
    store hands over is kept as the raw string so it stays visible in
    distribution views.
    """

    asset_id: str
    name: str
    serial_number: str
    model: str
    category: str
    status: AssetStatus | str
    purchase_date: date | str | None
    purchase_price: Decimal
    location: str
    assigned_to: str | None = None
    department: str | None = None
    notes: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
