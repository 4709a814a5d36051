"""Helpers shared by the aggregation modules."""

import logging
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, TypeVar

from asset_tracker.exceptions import InvalidDateError, InvalidRecordError
from asset_tracker.time_windows import to_date

logger = logging.getLogger(__name__)

T = TypeVar("T")

ZERO = Decimal("0")


def status_value(status: Any) -> str:
    """Plain string form of an enum member or raw status value."""
    if isinstance(status, Enum):
        return status.value
    if status is None:
        return "unknown"
    return str(status)


def to_amount(value: Any) -> Decimal:
    """Monetary value as ``Decimal``; ``None`` counts as zero."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def iter_dated(
    records: Iterable[T],
    date_of: Callable[[T], Any],
    kind: str,
    id_of: Callable[[T], str],
    errors: list[InvalidRecordError] | None = None,
) -> Iterator[tuple[T, date]]:
    """Yield ``(record, day)`` for every record whose date parses.

    Records with a missing or malformed date are skipped. Each one is logged
    and, when ``errors`` is given, appended to it as an ``InvalidDateError``.

    Parameters
    ----------
    records : Iterable
        Records to scan.
    date_of : Callable
        Returns the relevant date of a record.
    kind : str
        Record kind used in messages (e.g. ``"warranty"``).
    id_of : Callable
        Returns the identifier of a record.
    errors : list[InvalidRecordError] | None
        Optional collector for excluded records.
    """
    for record in records:
        try:
            day = to_date(date_of(record))
        except InvalidDateError as e:
            record_id = id_of(record)
            error = InvalidDateError(f"{kind} {record_id}: {e}", kind=kind, record_id=record_id)
            logger.warning("Excluding record from date windows: %s", error)
            if errors is not None:
                errors.append(error)
            continue
        yield record, day
