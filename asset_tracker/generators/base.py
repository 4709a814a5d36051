"""Base generator class for synthetic asset-tracking records."""

from __future__ import annotations

import random
from abc import ABC
from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal

from faker import Faker

CENTS = Decimal("0.01")


def money(value: float | Decimal) -> Decimal:
    """Round an amount to cents."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides the shared Faker instance and seed-based reproducibility.
    Generated dates are always derived from a reference date passed by
    the caller, never from the wall clock.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    @staticmethod
    def _timestamp(day: date) -> datetime:
        """A working-hours timestamp on ``day``."""
        return datetime.combine(day, time(hour=random.randint(8, 17), minute=random.randint(0, 59)))

    @staticmethod
    def _days_after(day: date, low: int, high: int) -> date:
        return day + timedelta(days=random.randint(low, high))
