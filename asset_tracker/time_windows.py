"""Calendar-day windows relative to an explicit reference date.

Every function takes ``now`` as a parameter; nothing here reads the clock.
Dates and ``now`` may be ``date``, ``datetime`` or ISO-8601 strings and are
compared as timezone-free local calendar days, so a timestamp later in the
day still counts as "today".
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator, Union

from asset_tracker.exceptions import InvalidDateError

__all__ = [
    "DateLike",
    "MonthBucket",
    "TrailingMonths",
    "days_until",
    "is_overdue",
    "is_today",
    "is_within_next_days",
    "month_bucket_key",
    "to_date",
    "trailing_months",
]

DateLike = Union[date, datetime, str]

# Fixed English abbreviations so labels do not depend on the process locale.
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def to_date(value: DateLike | None) -> date:
    """Normalize a date-like value to a calendar date.

    Parameters
    ----------
    value : date | datetime | str | None
        Value to normalize. Strings must be ISO-8601 (``2024-01-15`` or
        ``2024-01-15T10:30:00Z``).

    Returns
    -------
    date
        The calendar day of ``value``.

    Raises
    ------
    InvalidDateError
        If ``value`` is missing, of an unsupported type, or unparseable.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None:
        raise InvalidDateError("Missing date")
    if not isinstance(value, str):
        raise InvalidDateError(f"Unsupported date value: {value!r}")

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError as e:
        raise InvalidDateError(f"Invalid date: {value!r}") from e


def is_within_next_days(value: DateLike, now: DateLike, days: int) -> bool:
    """Return True if ``now < value < now + days`` (both ends excluded)."""
    day = to_date(value)
    today = to_date(now)
    return today < day < today + timedelta(days=days)


def is_overdue(value: DateLike, now: DateLike) -> bool:
    """Return True if ``value`` is before ``now``'s day."""
    return to_date(value) < to_date(now)


def is_today(value: DateLike, now: DateLike) -> bool:
    """Return True if ``value`` falls on the same calendar day as ``now``."""
    return to_date(value) == to_date(now)


def days_until(value: DateLike, now: DateLike) -> int:
    """Whole days from ``now`` to ``value`` (negative when in the past)."""
    return (to_date(value) - to_date(now)).days


@dataclass(frozen=True, order=True)
class MonthBucket:
    """A (year, month) grouping key for monthly reports."""

    year: int
    month: int

    @classmethod
    def from_date(cls, value: DateLike) -> MonthBucket:
        """Bucket containing ``value``."""
        day = to_date(value)
        return cls(day.year, day.month)

    @property
    def label(self) -> str:
        """Display label, e.g. ``"Jan 2024"``."""
        return f"{MONTH_ABBR[self.month - 1]} {self.year}"

    @property
    def key(self) -> str:
        """Sortable key, e.g. ``"2024-01"``."""
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def start(self) -> date:
        """First day of the month."""
        return date(self.year, self.month, 1)

    def contains(self, value: DateLike) -> bool:
        """Return True if ``value`` falls in this month."""
        day = to_date(value)
        return day.year == self.year and day.month == self.month

    def shift(self, months: int) -> MonthBucket:
        """Bucket ``months`` months later (earlier when negative)."""
        index = self.year * 12 + (self.month - 1) + months
        return MonthBucket(index // 12, index % 12 + 1)

    def __str__(self) -> str:
        return self.label


def month_bucket_key(value: DateLike) -> str:
    """Label of the month containing ``value``; same month and year, same key."""
    return MonthBucket.from_date(value).label


class TrailingMonths:
    """The ``months`` most recent month buckets ending at ``now``'s month.

    Iterates oldest first. Each iteration starts over, so the same instance
    can be consumed any number of times.
    """

    def __init__(self, now: DateLike, months: int) -> None:
        if months < 0:
            raise ValueError(f"months must be >= 0, got {months}")
        self.end = MonthBucket.from_date(now)
        self.months = months

    def __iter__(self) -> Iterator[MonthBucket]:
        for offset in range(self.months - 1, -1, -1):
            yield self.end.shift(-offset)

    def __len__(self) -> int:
        return self.months

    def __repr__(self) -> str:
        return f"TrailingMonths(end={self.end.label!r}, months={self.months})"


def trailing_months(now: DateLike, months: int) -> TrailingMonths:
    """Trailing month buckets ending at ``now``'s month, oldest first.

    Parameters
    ----------
    now : date | datetime | str
        Reference date.
    months : int
        Number of buckets (0 yields nothing).

    Returns
    -------
    TrailingMonths
        Restartable iterable of ``MonthBucket``.

    Examples
    --------
    >>> [b.label for b in trailing_months(date(2024, 2, 10), 3)]
    ['Dec 2023', 'Jan 2024', 'Feb 2024']
    """
    return TrailingMonths(now, months)
