"""Asset generator."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Iterator

from asset_tracker.generators.base import BaseGenerator, money
from asset_tracker.models import Asset
from asset_tracker.models.enums import AssetStatus


class AssetGenerator(BaseGenerator):
    """Generate synthetic hardware and equipment assets."""

    STATUSES = list(AssetStatus)
    STATUS_WEIGHTS = [0.75, 0.10, 0.10, 0.05]

    # category -> (models, price range)
    CATALOG = {
        "Laptop": (["ThinkPad T14", "MacBook Pro 14", "Latitude 7440", "EliteBook 840"], (900, 3200)),
        "Desktop": (["OptiPlex 7010", "ThinkCentre M90", "iMac 24"], (700, 2200)),
        "Monitor": (["UltraSharp U2723", "ProArt PA278", "P27h G5"], (180, 900)),
        "Printer": (["LaserJet M507", "WorkForce Pro", "imageCLASS MF743"], (250, 1500)),
        "Server": (["PowerEdge R750", "ProLiant DL380", "ThinkSystem SR650"], (4000, 18000)),
        "Network Equipment": (["Catalyst 9300", "Meraki MX68", "UniFi Switch 48"], (300, 6000)),
        "Mobile Device": (["iPhone 15", "Galaxy S24", "Pixel 8", "iPad Air"], (400, 1300)),
        "Furniture": (["Aeron Chair", "Standing Desk Pro", "Filing Cabinet"], (150, 1600)),
    }
    CATEGORY_WEIGHTS = [0.30, 0.12, 0.18, 0.06, 0.04, 0.06, 0.16, 0.08]

    DEPARTMENTS = ["Engineering", "Finance", "Operations", "Sales", "Marketing", "IT", "HR"]
    LOCATIONS = ["HQ Floor 1", "HQ Floor 2", "HQ Floor 3", "Data Center", "Warehouse", "Remote"]

    def generate(self, reference_date: date) -> Asset:
        """Generate a single asset purchased before ``reference_date``.

        Parameters
        ----------
        reference_date : date
            Latest possible purchase date.

        Returns
        -------
        Asset
            Generated asset.
        """
        return self._generate_one(reference_date)

    def generate_batch(self, count: int, reference_date: date) -> Iterator[Asset]:
        """Generate multiple assets.

        Yields
        ------
        Asset
            Generated assets.
        """
        for _ in range(count):
            yield self._generate_one(reference_date)

    def _generate_one(self, reference_date: date) -> Asset:
        category = random.choices(list(self.CATALOG), weights=self.CATEGORY_WEIGHTS, k=1)[0]
        models, (low, high) = self.CATALOG[category]
        status = random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]

        # Purchased within the last five years
        purchase_date = reference_date - timedelta(days=random.randint(30, 5 * 365))

        # Retired and disposed assets are no longer assigned to anyone
        assigned = status in (AssetStatus.ACTIVE, AssetStatus.MAINTENANCE) and random.random() < 0.7
        created_at = self._timestamp(purchase_date)

        return Asset(
            asset_id=self.fake.uuid4(),
            name=f"{category} {self.fake.bothify('??-####').upper()}",
            serial_number=self.fake.bothify("SN-########").upper(),
            model=random.choice(models),
            category=category,
            status=status,
            purchase_date=purchase_date,
            purchase_price=money(random.uniform(low, high)),
            location=random.choice(self.LOCATIONS),
            assigned_to=self.fake.name() if assigned else None,
            department=random.choice(self.DEPARTMENTS) if random.random() < 0.85 else None,
            notes=self.fake.sentence(nb_words=6) if random.random() < 0.2 else "",
            created_at=created_at,
            updated_at=created_at,
        )
