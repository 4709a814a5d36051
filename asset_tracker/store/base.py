"""Record store interface and concurrent snapshot loading."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Protocol, TypeVar

from asset_tracker.exceptions import FetchError, InvalidRecordError
from asset_tracker.models import Asset, DepreciationRecord, MaintenanceTask, Warranty

logger = logging.getLogger(__name__)

T = TypeVar("T")

COLLECTIONS = ("assets", "warranties", "maintenance_tasks", "depreciation_records")


class RecordStore(Protocol):
    """Read-only access to the tracked collections.

    Each method returns the full collection, or the part of it owned by
    ``asset_id`` when one is given, and raises ``FetchError`` when the
    store cannot answer.
    """

    def list_assets(self) -> list[Asset]: ...

    def list_warranties(self, asset_id: str | None = None) -> list[Warranty]: ...

    def list_maintenance_tasks(self, asset_id: str | None = None) -> list[MaintenanceTask]: ...

    def list_depreciation_records(self, asset_id: str | None = None) -> list[DepreciationRecord]: ...


@dataclass(frozen=True)
class Snapshot:
    """Immutable set of collections for one aggregation pass."""

    assets: tuple[Asset, ...] = ()
    warranties: tuple[Warranty, ...] = ()
    maintenance_tasks: tuple[MaintenanceTask, ...] = ()
    depreciation_records: tuple[DepreciationRecord, ...] = ()

    def assets_by_id(self) -> dict[str, Asset]:
        return {asset.asset_id: asset for asset in self.assets}

    def summary(self) -> dict[str, int]:
        """Return summary counts of all collections."""
        return {name: len(getattr(self, name)) for name in COLLECTIONS}


def load_snapshot(store: RecordStore, workers: int = 4) -> Snapshot:
    """Fetch every collection and return them as one snapshot.

    The fetches are independent and run concurrently. The snapshot is only
    built once all of them have resolved; if any fails, the first failure is
    raised and nothing partial is returned.

    Parameters
    ----------
    store : RecordStore
        Store to read from.
    workers : int
        Maximum number of concurrent fetches.

    Returns
    -------
    Snapshot
        All four collections.

    Raises
    ------
    FetchError
        If any collection could not be fetched.
    """
    fetchers = {
        "assets": store.list_assets,
        "warranties": store.list_warranties,
        "maintenance_tasks": store.list_maintenance_tasks,
        "depreciation_records": store.list_depreciation_records,
    }
    results: dict[str, tuple] = {}
    failures: list[FetchError] = []

    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        futures = {executor.submit(fetch): name for name, fetch in fetchers.items()}
        for future in as_completed(futures):
            name = futures[future]
            try:
                results[name] = tuple(future.result())
            except FetchError as e:
                logger.error("Fetch failed for %s: %s", name, e)
                failures.append(e)

    if failures:
        raise failures[0]

    snapshot = Snapshot(**results)
    logger.info("Loaded snapshot: %s", snapshot.summary())
    return snapshot


def convert_rows(
    collection: str,
    rows: Iterable[Mapping[str, Any]],
    convert: Callable[[Mapping[str, Any]], T],
) -> list[T]:
    """Convert store rows to entities, skipping rows that cannot be converted.

    Rows that are not mappings, and depreciation rows the converters reject
    with ``InvalidRecordError``, are logged and left out of the collection.
    """
    records = []
    for row in rows:
        if not isinstance(row, Mapping):
            logger.warning("Skipping %s row: expected an object, got %s", collection, type(row).__name__)
            continue
        try:
            records.append(convert(row))
        except InvalidRecordError as e:
            logger.warning("Skipping %s row: %s", collection, e)
    return records
