"""Maintenance task generator."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Iterator

from asset_tracker.generators.base import BaseGenerator, money
from asset_tracker.models import Asset, MaintenanceTask
from asset_tracker.models.enums import (
    MaintenancePriority,
    MaintenanceStatus,
    MaintenanceType,
)


class MaintenanceTaskGenerator(BaseGenerator):
    """Generate maintenance tasks scheduled around a reference date.

    Tasks scheduled in the past are mostly completed, with a cost and a
    completion timestamp; the rest stay open and show up as overdue.
    Tasks scheduled today or later are open.
    """

    TYPES = list(MaintenanceType)
    TYPE_WEIGHTS = [0.40, 0.30, 0.22, 0.08]

    PRIORITIES = list(MaintenancePriority)
    PRIORITY_WEIGHTS = [0.30, 0.40, 0.22, 0.08]

    TITLES = {
        MaintenanceType.ROUTINE: ["Routine inspection", "Clean and dust", "Firmware update"],
        MaintenanceType.PREVENTIVE: ["Replace battery", "Replace fans", "Calibrate display"],
        MaintenanceType.CORRECTIVE: ["Repair keyboard", "Replace power supply", "Fix network port"],
        MaintenanceType.EMERGENCY: ["Recover from failure", "Replace failed disk", "Water damage repair"],
    }

    # Cost range per task type
    COST_RANGES = {
        MaintenanceType.ROUTINE: (20, 150),
        MaintenanceType.PREVENTIVE: (50, 400),
        MaintenanceType.CORRECTIVE: (100, 900),
        MaintenanceType.EMERGENCY: (250, 2500),
    }

    def generate(
        self,
        asset: Asset,
        reference_date: date,
        days_back: int = 180,
        days_ahead: int = 60,
    ) -> MaintenanceTask:
        """Generate one task for an asset.

        Parameters
        ----------
        asset : Asset
            Asset the task applies to.
        reference_date : date
            Day the schedule is centered on.
        days_back : int
            Earliest scheduled date, in days before ``reference_date``.
        days_ahead : int
            Latest scheduled date, in days after ``reference_date``.

        Returns
        -------
        MaintenanceTask
            Generated task.
        """
        task_type = random.choices(self.TYPES, weights=self.TYPE_WEIGHTS, k=1)[0]
        priority = random.choices(self.PRIORITIES, weights=self.PRIORITY_WEIGHTS, k=1)[0]
        scheduled = reference_date + timedelta(days=random.randint(-days_back, days_ahead))

        if scheduled < reference_date:
            status = random.choices(
                [MaintenanceStatus.COMPLETED, MaintenanceStatus.CANCELLED, MaintenanceStatus.SCHEDULED],
                weights=[0.80, 0.08, 0.12],
                k=1,
            )[0]
        else:
            status = random.choices(
                [MaintenanceStatus.SCHEDULED, MaintenanceStatus.IN_PROGRESS],
                weights=[0.85, 0.15],
                k=1,
            )[0]

        completed_at = None
        cost = None
        if status == MaintenanceStatus.COMPLETED:
            finished = min(self._days_after(scheduled, 0, 5), reference_date)
            completed_at = self._timestamp(finished)
            cost = money(random.uniform(*self.COST_RANGES[task_type]))

        created_at = self._timestamp(scheduled - timedelta(days=random.randint(1, 30)))
        return MaintenanceTask(
            task_id=self.fake.uuid4(),
            asset_id=asset.asset_id,
            title=random.choice(self.TITLES[task_type]),
            description=self.fake.sentence(nb_words=10),
            task_type=task_type,
            priority=priority,
            status=status,
            scheduled_date=scheduled,
            completed_at=completed_at,
            cost=cost,
            assigned_to=self.fake.name() if random.random() < 0.6 else None,
            notes=None,
            created_at=created_at,
            updated_at=completed_at or created_at,
        )

    def generate_for_asset(self, asset: Asset, reference_date: date, count: int) -> Iterator[MaintenanceTask]:
        """Generate ``count`` tasks for one asset.

        Yields
        ------
        MaintenanceTask
            Generated tasks.
        """
        for _ in range(count):
            yield self.generate(asset, reference_date)
