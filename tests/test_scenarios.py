"""Tests for the asset portfolio scenario."""

from datetime import date

import pytest

from asset_tracker.aggregation import build_dashboard, build_financial_insights
from asset_tracker.models import AssetStatus
from asset_tracker.scenarios import AssetPortfolioScenario
from asset_tracker.store import InMemoryRecordStore, load_snapshot

REFERENCE_DATE = date(2024, 1, 15)


class TestAssetPortfolioScenario:
    """Tests for AssetPortfolioScenario."""

    def test_generate(self, seed: int) -> None:
        store = AssetPortfolioScenario(num_assets=30, seed=seed, reference_date=REFERENCE_DATE).generate()

        assert isinstance(store, InMemoryRecordStore)
        assert len(store.assets) == 30
        assert 0 < len(store.warranties) <= 30
        assert len(store.depreciation_records) > 0

    def test_records_reference_existing_assets(self, seed: int) -> None:
        store = AssetPortfolioScenario(num_assets=20, seed=seed, reference_date=REFERENCE_DATE).generate()

        for collection in (store.warranties, store.maintenance_tasks, store.depreciation_records):
            assert all(record.asset_id in store.assets for record in collection.values())

    def test_disposed_assets_have_no_tasks(self, seed: int) -> None:
        store = AssetPortfolioScenario(num_assets=60, seed=seed, reference_date=REFERENCE_DATE).generate()

        disposed = {a.asset_id for a in store.assets.values() if a.status == AssetStatus.DISPOSED}
        assert not any(task.asset_id in disposed for task in store.maintenance_tasks.values())

    def test_depreciation_stops_at_reference_month(self, seed: int) -> None:
        store = AssetPortfolioScenario(num_assets=20, seed=seed, reference_date=REFERENCE_DATE).generate()

        assert max((r.year, r.month) for r in store.depreciation_records.values()) <= (2024, 1)

    def test_no_warranties(self, seed: int) -> None:
        store = AssetPortfolioScenario(
            num_assets=5, warranty_rate=0.0, seed=seed, reference_date=REFERENCE_DATE
        ).generate()
        assert store.warranties == {}

    def test_feeds_dashboard(self, seed: int) -> None:
        store = AssetPortfolioScenario(num_assets=25, seed=seed, reference_date=REFERENCE_DATE).generate()
        snapshot = load_snapshot(store)

        summary = build_dashboard(snapshot, REFERENCE_DATE)
        insights = build_financial_insights(snapshot, REFERENCE_DATE)

        assert summary.total_assets == 25
        assert sum(summary.status_counts.values()) == 25
        assert summary.excluded == []
        assert len(insights.maintenance_costs) == 6

    @pytest.mark.parametrize(("kwargs", "message"), [({"num_assets": -1}, "num_assets"), ({"warranty_rate": 1.5}, "warranty_rate")])
    def test_invalid_parameters(self, kwargs: dict, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            AssetPortfolioScenario(**kwargs)
