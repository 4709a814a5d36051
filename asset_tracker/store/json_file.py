"""Record store reading the JSON files written by ``JsonFileSink``."""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Mapping

from asset_tracker.exceptions import FetchError
from asset_tracker.models import Asset, DepreciationRecord, MaintenanceTask, Warranty
from asset_tracker.models.rows import (
    asset_from_row,
    depreciation_record_from_row,
    maintenance_task_from_row,
    warranty_from_row,
)
from asset_tracker.store.base import convert_rows

logger = logging.getLogger(__name__)


def _row_asset_id(row: Any) -> str | None:
    if not isinstance(row, Mapping):
        return None
    value = row.get("asset_id", row.get("assetId"))
    return None if value is None else str(value)


class JsonFileRecordStore:
    """Read collections from ``<input_dir>/<collection>.json``.

    A missing file is an empty collection; a missing directory or a file
    that is not a JSON array is a fetch error.
    """

    def __init__(self, input_dir: str | Path) -> None:
        self.input_dir = Path(input_dir)

    def _read(self, collection: str) -> list[Mapping[str, Any]]:
        if not self.input_dir.is_dir():
            raise FetchError(collection, f"directory {self.input_dir} not found")

        file_path = self.input_dir / f"{collection}.json"
        if not file_path.exists():
            logger.debug("No %s file in %s", collection, self.input_dir)
            return []

        try:
            with open(file_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            raise FetchError(collection, str(e)) from e

        if not isinstance(data, list):
            raise FetchError(collection, f"{file_path} does not contain a JSON array")
        return data

    def _fetch(
        self,
        collection: str,
        convert: Callable[[Mapping[str, Any]], Any],
        asset_id: str | None = None,
    ) -> list:
        rows = self._read(collection)
        if asset_id is not None:
            rows = [row for row in rows if _row_asset_id(row) == asset_id]
        return convert_rows(collection, rows, convert)

    def list_assets(self) -> list[Asset]:
        return self._fetch("assets", asset_from_row)

    def list_warranties(self, asset_id: str | None = None) -> list[Warranty]:
        return self._fetch("warranties", warranty_from_row, asset_id)

    def list_maintenance_tasks(self, asset_id: str | None = None) -> list[MaintenanceTask]:
        return self._fetch("maintenance_tasks", maintenance_task_from_row, asset_id)

    def list_depreciation_records(self, asset_id: str | None = None) -> list[DepreciationRecord]:
        return self._fetch("depreciation_records", depreciation_record_from_row, asset_id)
