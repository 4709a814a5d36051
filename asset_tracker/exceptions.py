"""Custom exception hierarchy for asset-tracker."""


class AssetTrackerError(Exception):
    """Base exception for all asset-tracker errors."""


class FetchError(AssetTrackerError):
    """Raised when a record store cannot return a collection."""

    def __init__(self, collection: str, message: str) -> None:
        super().__init__(f"Failed to fetch {collection}: {message}")
        self.collection = collection


class InvalidRecordError(AssetTrackerError):
    """Raised when a single record cannot take part in an aggregation."""

    def __init__(self, message: str, kind: str | None = None, record_id: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.record_id = record_id


class InvalidDateError(InvalidRecordError):
    """Raised when a date value cannot be parsed."""


class EntityNotFoundError(AssetTrackerError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class ConfigurationError(AssetTrackerError):
    """Raised when configuration is invalid or missing."""


class SinkError(AssetTrackerError):
    """Raised when a sink operation fails."""
