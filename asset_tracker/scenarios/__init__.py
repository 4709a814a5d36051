"""Scenarios for generating realistic asset portfolios."""

from asset_tracker.scenarios.portfolio import AssetPortfolioScenario

__all__ = ["AssetPortfolioScenario"]
