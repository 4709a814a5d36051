"""Asset portfolio scenario: assets with warranties, maintenance and depreciation."""

from __future__ import annotations

import logging
import random
from datetime import date

from asset_tracker.generators import (
    AssetGenerator,
    DepreciationGenerator,
    MaintenanceTaskGenerator,
    WarrantyGenerator,
)
from asset_tracker.models.enums import AssetStatus, DepreciationMethod
from asset_tracker.store.memory import InMemoryRecordStore

logger = logging.getLogger(__name__)


class AssetPortfolioScenario:
    """Generate an organization's asset portfolio as of a reference date.

    This scenario creates:
    - Assets across several hardware categories and statuses
    - A warranty for most assets, some already expired, some about to expire
    - Maintenance history and upcoming tasks around the reference date
    - A monthly depreciation schedule for every asset
    """

    def __init__(
        self,
        num_assets: int = 50,
        warranty_rate: float = 0.8,
        max_tasks_per_asset: int = 3,
        reducing_balance_rate: float = 0.3,
        seed: int | None = None,
        reference_date: date | None = None,
    ) -> None:
        """Initialize the portfolio scenario.

        Parameters
        ----------
        num_assets : int
            Number of assets to generate.
        warranty_rate : float
            Share of assets with a warranty (0.0 to 1.0).
        max_tasks_per_asset : int
            Upper bound of maintenance tasks per asset.
        reducing_balance_rate : float
            Share of assets depreciated with the reducing-balance method.
        seed : int | None
            Random seed for reproducibility.
        reference_date : date | None
            Day the portfolio is generated for. Defaults to today.
        """
        if num_assets < 0:
            raise ValueError(f"num_assets must be >= 0, got {num_assets}")
        if not 0.0 <= warranty_rate <= 1.0:
            raise ValueError(f"warranty_rate must be between 0 and 1, got {warranty_rate}")

        self.num_assets = num_assets
        self.warranty_rate = warranty_rate
        self.max_tasks_per_asset = max_tasks_per_asset
        self.reducing_balance_rate = reducing_balance_rate
        self.seed = seed
        self.reference_date = reference_date or date.today()

        if seed is not None:
            random.seed(seed)

        self.store = InMemoryRecordStore()
        self._asset_gen = AssetGenerator(seed=seed)
        self._warranty_gen = WarrantyGenerator(seed=seed)
        self._task_gen = MaintenanceTaskGenerator(seed=seed)
        self._depreciation_gen = DepreciationGenerator(seed=seed)

    def generate(self) -> InMemoryRecordStore:
        """Generate all data for the portfolio.

        Returns
        -------
        InMemoryRecordStore
            Store containing all generated records.
        """
        logger.info(
            "Starting asset portfolio scenario: %d assets as of %s",
            self.num_assets,
            self.reference_date.isoformat(),
        )

        for asset in self._asset_gen.generate_batch(self.num_assets, self.reference_date):
            self.store.add_asset(asset)

            if random.random() < self.warranty_rate:
                self.store.add_warranty(self._warranty_gen.generate(asset))

            # Disposed assets get no further maintenance
            if asset.status != AssetStatus.DISPOSED:
                count = random.randint(0, self.max_tasks_per_asset)
                for task in self._task_gen.generate_for_asset(asset, self.reference_date, count):
                    self.store.add_maintenance_task(task)

            method = (
                DepreciationMethod.REDUCING_BALANCE
                if random.random() < self.reducing_balance_rate
                else DepreciationMethod.STRAIGHT_LINE
            )
            for record in self._depreciation_gen.generate_schedule(asset, self.reference_date, method):
                self.store.add_depreciation_record(record)

        logger.info(
            "Generated %d assets, %d warranties, %d maintenance tasks, %d depreciation records",
            len(self.store.assets),
            len(self.store.warranties),
            len(self.store.maintenance_tasks),
            len(self.store.depreciation_records),
        )
        return self.store
