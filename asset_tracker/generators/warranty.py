"""Warranty generator."""

from __future__ import annotations

import random
from datetime import date

from asset_tracker.generators.base import BaseGenerator
from asset_tracker.models import Asset, Warranty
from asset_tracker.models.enums import WarrantyType
from asset_tracker.time_windows import to_date


class WarrantyGenerator(BaseGenerator):
    """Generate warranties starting at an asset's purchase date."""

    # term in years -> warranty type
    TERMS = {1: WarrantyType.STANDARD, 3: WarrantyType.EXTENDED, 5: WarrantyType.PREMIUM}
    TERM_WEIGHTS = [0.5, 0.35, 0.15]

    PROVIDERS = ["Dell ProSupport", "AppleCare", "Lenovo Premier", "HP Care Pack", "Cisco SmartNet"]

    def generate(self, asset: Asset) -> Warranty:
        """Generate a warranty for an asset.

        Parameters
        ----------
        asset : Asset
            Covered asset; its purchase date is the warranty start.

        Returns
        -------
        Warranty
            Generated warranty.

        Raises
        ------
        InvalidDateError
            If the asset has no usable purchase date.
        """
        start = to_date(asset.purchase_date)
        years = random.choices(list(self.TERMS), weights=self.TERM_WEIGHTS, k=1)[0]
        end = _add_years(start, years)
        created_at = self._timestamp(start)

        return Warranty(
            warranty_id=self.fake.uuid4(),
            asset_id=asset.asset_id,
            provider=random.choice(self.PROVIDERS),
            start_date=start,
            end_date=end,
            warranty_type=self.TERMS[years],
            coverage_details=f"{years}-year parts and labor",
            document_url=self.fake.url() + "warranty.pdf" if random.random() < 0.3 else None,
            contact_info=self.fake.phone_number(),
            created_at=created_at,
            updated_at=created_at,
        )


def _add_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return day.replace(year=day.year + years, day=28)

