"""Dashboard service: snapshot loading with last-good fallback."""

from __future__ import annotations

from asset_tracker.aggregation import (
    DashboardSummary,
    FinancialInsights,
    build_dashboard,
    build_financial_insights,
)
from asset_tracker.config import ReportConfig
from asset_tracker.exceptions import FetchError
from asset_tracker.logging import get_logger
from asset_tracker.store.base import RecordStore, Snapshot, load_snapshot
from asset_tracker.time_windows import DateLike

logger = get_logger(__name__)


class DashboardService:
    """Hold the latest snapshot of a record store and build views from it.

    A failed refresh does not discard data already loaded: the error is
    kept in ``last_error`` and views keep using the previous snapshot.
    Views are recomputed from the current snapshot on every call.

    Parameters
    ----------
    store : RecordStore
        Store to load collections from.
    config : ReportConfig | None
        Window sizes and loader concurrency.
    """

    def __init__(self, store: RecordStore, config: ReportConfig | None = None) -> None:
        self.store = store
        self.config = config or ReportConfig()
        self.snapshot = Snapshot()
        self.last_error: FetchError | None = None
        self.loaded = False

    def refresh(self) -> bool:
        """Reload every collection.

        Returns
        -------
        bool
            True if the snapshot was replaced, False if a fetch failed.
        """
        try:
            snapshot = load_snapshot(self.store, workers=self.config.loader_workers)
        except FetchError as e:
            logger.warning("Refresh failed, keeping previous data: %s", e)
            self.last_error = e
            return False

        self.snapshot = snapshot
        self.last_error = None
        self.loaded = True
        return True

    def dashboard(self, now: DateLike) -> DashboardSummary:
        """Dashboard view of the current snapshot."""
        return build_dashboard(
            self.snapshot,
            now,
            horizon_days=self.config.horizon_days,
            top_n=self.config.top_categories,
        )

    def financial_insights(self, now: DateLike) -> FinancialInsights:
        """Financial-insights view of the current snapshot."""
        return build_financial_insights(self.snapshot, now, months=self.config.trailing_months)
