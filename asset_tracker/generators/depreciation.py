"""Depreciation schedule generator."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterator

from asset_tracker.generators.base import BaseGenerator, money
from asset_tracker.models import Asset, DepreciationRecord
from asset_tracker.models.enums import DepreciationMethod
from asset_tracker.time_windows import MonthBucket, to_date


class DepreciationGenerator(BaseGenerator):
    """Generate monthly depreciation records for an asset.

    One record is produced per month, starting with the month after the
    purchase and ending with the reference month or the end of the useful
    life, whichever comes first. Book values never drop below the salvage
    value.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    useful_life_months : int
        Depreciation period.
    salvage_rate : Decimal
        Residual value as a fraction of the purchase price.
    """

    def __init__(
        self,
        seed: int | None = None,
        useful_life_months: int = 60,
        salvage_rate: Decimal = Decimal("0.10"),
    ) -> None:
        super().__init__(seed)
        if useful_life_months < 1:
            raise ValueError(f"useful_life_months must be >= 1, got {useful_life_months}")
        self.useful_life_months = useful_life_months
        self.salvage_rate = salvage_rate

    def generate_schedule(
        self,
        asset: Asset,
        reference_date: date,
        method: DepreciationMethod = DepreciationMethod.STRAIGHT_LINE,
    ) -> list[DepreciationRecord]:
        """Depreciation records for ``asset`` up to ``reference_date``.

        Parameters
        ----------
        asset : Asset
            Asset with a purchase date and price.
        reference_date : date
            Last month to include.
        method : DepreciationMethod
            Straight-line spreads the depreciable amount evenly; reducing
            balance applies a fixed monthly rate to the current book value.

        Returns
        -------
        list[DepreciationRecord]
            Records ordered by year and month.
        """
        return list(self._iter_schedule(asset, reference_date, method))

    def _iter_schedule(
        self,
        asset: Asset,
        reference_date: date,
        method: DepreciationMethod,
    ) -> Iterator[DepreciationRecord]:
        price = Decimal(asset.purchase_price)
        salvage = money(price * self.salvage_rate)
        last = MonthBucket.from_date(reference_date)

        if method == DepreciationMethod.STRAIGHT_LINE:
            monthly = money((price - salvage) / self.useful_life_months)
        else:
            # Double-declining rate spread over months
            rate = Decimal(2) / Decimal(self.useful_life_months)

        value = price
        bucket = MonthBucket.from_date(to_date(asset.purchase_date)).shift(1)
        for _ in range(self.useful_life_months):
            if bucket > last or value <= salvage:
                break

            if method == DepreciationMethod.STRAIGHT_LINE:
                amount = monthly
            else:
                amount = money(value * rate)
            amount = min(amount, value - salvage)
            value -= amount

            yield DepreciationRecord(
                record_id=self.fake.uuid4(),
                asset_id=asset.asset_id,
                year=bucket.year,
                month=bucket.month,
                value=value,
                depreciation_amount=amount,
                method=method,
                created_at=self._timestamp(bucket.start),
            )
            bucket = bucket.shift(1)
