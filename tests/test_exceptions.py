"""Tests for custom exception hierarchy."""

from asset_tracker.exceptions import (
    AssetTrackerError,
    ConfigurationError,
    EntityNotFoundError,
    FetchError,
    InvalidDateError,
    InvalidRecordError,
    ReferentialIntegrityError,
    SinkError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_asset_tracker_error_is_exception(self) -> None:
        assert isinstance(AssetTrackerError("test"), Exception)

    def test_fetch_error_carries_collection(self) -> None:
        err = FetchError("assets", "timeout")

        assert isinstance(err, AssetTrackerError)
        assert err.collection == "assets"
        assert str(err) == "Failed to fetch assets: timeout"

    def test_invalid_date_is_invalid_record(self) -> None:
        err = InvalidDateError("bad date", kind="warranty", record_id="w1")

        assert isinstance(err, InvalidRecordError)
        assert isinstance(err, AssetTrackerError)
        assert err.kind == "warranty"
        assert err.record_id == "w1"

    def test_invalid_record_defaults(self) -> None:
        err = InvalidRecordError("bad")
        assert err.kind is None
        assert err.record_id is None

    def test_referential_integrity_is_entity_not_found(self) -> None:
        err = ReferentialIntegrityError("Asset a1 not found")
        assert isinstance(err, EntityNotFoundError)
        assert str(err) == "Asset a1 not found"

    def test_configuration_and_sink_errors(self) -> None:
        assert isinstance(ConfigurationError("test"), AssetTrackerError)
        assert isinstance(SinkError("test"), AssetTrackerError)
