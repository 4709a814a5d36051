"""PostgreSQL record store for the hosted relational database."""

import logging
from dataclasses import fields
from enum import Enum
from typing import Any, Callable, Iterable, Mapping

import psycopg
from psycopg.rows import dict_row

from asset_tracker.exceptions import FetchError, SinkError
from asset_tracker.models import Asset, DepreciationRecord, MaintenanceTask, Warranty
from asset_tracker.models.rows import (
    asset_from_row,
    depreciation_record_from_row,
    maintenance_task_from_row,
    warranty_from_row,
)
from asset_tracker.store.base import convert_rows
from asset_tracker.store.memory import InMemoryRecordStore

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS assets (
    asset_id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    serial_number TEXT,
    model TEXT,
    category TEXT,
    status TEXT,
    purchase_date DATE,
    purchase_price NUMERIC(14, 2) NOT NULL DEFAULT 0,
    location TEXT,
    assigned_to TEXT,
    department TEXT,
    notes TEXT,
    created_at TIMESTAMP,
    updated_at TIMESTAMP
);

CREATE TABLE IF NOT EXISTS warranties (
    warranty_id TEXT PRIMARY KEY,
    asset_id TEXT NOT NULL REFERENCES assets (asset_id),
    provider TEXT,
    start_date DATE,
    end_date DATE,
    warranty_type TEXT,
    coverage_details TEXT,
    document_url TEXT,
    contact_info TEXT,
    created_at TIMESTAMP,
    updated_at TIMESTAMP
);

CREATE TABLE IF NOT EXISTS maintenance_tasks (
    task_id TEXT PRIMARY KEY,
    asset_id TEXT NOT NULL REFERENCES assets (asset_id),
    title TEXT NOT NULL,
    description TEXT,
    task_type TEXT,
    priority TEXT,
    status TEXT,
    scheduled_date DATE,
    completed_at TIMESTAMP,
    cost NUMERIC(14, 2),
    assigned_to TEXT,
    notes TEXT,
    created_at TIMESTAMP,
    updated_at TIMESTAMP
);

CREATE TABLE IF NOT EXISTS depreciation_records (
    record_id TEXT PRIMARY KEY,
    asset_id TEXT NOT NULL REFERENCES assets (asset_id),
    year INTEGER NOT NULL,
    month INTEGER NOT NULL CHECK (month BETWEEN 1 AND 12),
    value NUMERIC(14, 2) NOT NULL,
    depreciation_amount NUMERIC(14, 2) NOT NULL,
    method TEXT,
    created_at TIMESTAMP
);
"""

# table -> (primary key, entity class); insertion order respects foreign keys
TABLES: dict[str, tuple[str, type]] = {
    "assets": ("asset_id", Asset),
    "warranties": ("warranty_id", Warranty),
    "maintenance_tasks": ("task_id", MaintenanceTask),
    "depreciation_records": ("record_id", DepreciationRecord),
}


def _param(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


class PostgresRecordStore:
    """Record store reading from PostgreSQL with psycopg.

    A connection is opened per fetch so that concurrent fetches from
    ``load_snapshot`` never share one.

    Parameters
    ----------
    connection_string : str
        libpq connection string or URL.
    connect_timeout : int
        Seconds to wait for a connection.
    """

    def __init__(self, connection_string: str, connect_timeout: int = 10) -> None:
        self.connection_string = connection_string
        self.connect_timeout = connect_timeout

    def _connect(self) -> psycopg.Connection:
        return psycopg.connect(
            self.connection_string,
            row_factory=dict_row,
            connect_timeout=self.connect_timeout,
        )

    def _fetch(
        self,
        collection: str,
        query: str,
        params: tuple,
        convert: Callable[[Mapping[str, Any]], Any],
    ) -> list:
        try:
            with self._connect() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, params)
                    rows = cur.fetchall()
        except psycopg.Error as e:
            raise FetchError(collection, str(e)) from e

        logger.debug("Fetched %d %s rows", len(rows), collection)
        return convert_rows(collection, rows, convert)

    @staticmethod
    def _scoped(table: str, order_by: str, asset_id: str | None) -> tuple[str, tuple]:
        if asset_id is None:
            return f"SELECT * FROM {table} ORDER BY {order_by}", ()  # noqa: S608
        return f"SELECT * FROM {table} WHERE asset_id = %s ORDER BY {order_by}", (asset_id,)  # noqa: S608

    def list_assets(self) -> list[Asset]:
        """All assets, newest first."""
        return self._fetch(
            "assets", "SELECT * FROM assets ORDER BY created_at DESC", (), asset_from_row
        )

    def list_warranties(self, asset_id: str | None = None) -> list[Warranty]:
        """Warranties ordered by end date."""
        query, params = self._scoped("warranties", "end_date ASC", asset_id)
        return self._fetch("warranties", query, params, warranty_from_row)

    def list_maintenance_tasks(self, asset_id: str | None = None) -> list[MaintenanceTask]:
        """Maintenance tasks ordered by scheduled date."""
        query, params = self._scoped("maintenance_tasks", "scheduled_date ASC", asset_id)
        return self._fetch("maintenance_tasks", query, params, maintenance_task_from_row)

    def list_depreciation_records(self, asset_id: str | None = None) -> list[DepreciationRecord]:
        """Depreciation records ordered by year and month."""
        query, params = self._scoped("depreciation_records", "year ASC, month ASC", asset_id)
        return self._fetch("depreciation_records", query, params, depreciation_record_from_row)

    def create_tables(self) -> None:
        """Create the four tables if they do not exist."""
        try:
            with self._connect() as conn:
                conn.execute(SCHEMA_SQL)
        except psycopg.Error as e:
            raise SinkError(f"Failed to create tables: {e}") from e

    def load(self, store: InMemoryRecordStore) -> dict[str, int]:
        """Insert every entity of an in-memory store, skipping existing keys.

        Returns
        -------
        dict[str, int]
            Rows submitted per table.
        """
        collections: dict[str, Iterable[Any]] = {
            "assets": store.assets.values(),
            "warranties": store.warranties.values(),
            "maintenance_tasks": store.maintenance_tasks.values(),
            "depreciation_records": store.depreciation_records.values(),
        }
        counts: dict[str, int] = {}
        try:
            with self._connect() as conn:
                with conn.cursor() as cur:
                    for table, (key, entity_cls) in TABLES.items():
                        columns = [f.name for f in fields(entity_cls)]
                        placeholders = ", ".join(["%s"] * len(columns))
                        query = (
                            f"INSERT INTO {table} ({', '.join(columns)}) "  # noqa: S608
                            f"VALUES ({placeholders}) ON CONFLICT ({key}) DO NOTHING"
                        )
                        rows = [
                            tuple(_param(getattr(entity, column)) for column in columns)
                            for entity in collections[table]
                        ]
                        if rows:
                            cur.executemany(query, rows)
                        counts[table] = len(rows)
                        logger.info("Loaded %d rows into %s", len(rows), table)
        except psycopg.Error as e:
            raise SinkError(f"Failed to load records: {e}") from e
        return counts
