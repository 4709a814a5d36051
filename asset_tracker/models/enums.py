"""Enumeration types for asset tracking entities."""

from enum import Enum


class AssetStatus(str, Enum):
    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    RETIRED = "retired"
    DISPOSED = "disposed"


class WarrantyType(str, Enum):
    STANDARD = "standard"
    EXTENDED = "extended"
    PREMIUM = "premium"


class MaintenanceType(str, Enum):
    ROUTINE = "routine"
    PREVENTIVE = "preventive"
    CORRECTIVE = "corrective"
    EMERGENCY = "emergency"


class MaintenancePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class MaintenanceStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class DepreciationMethod(str, Enum):
    STRAIGHT_LINE = "straight-line"
    REDUCING_BALANCE = "reducing-balance"


class WarrantyState(str, Enum):
    ACTIVE = "active"
    EXPIRING_SOON = "expiring-soon"
    EXPIRED = "expired"


class TaskState(str, Enum):
    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    CANCELLED = "cancelled"
    OVERDUE = "overdue"
    TODAY = "today"
    SCHEDULED = "scheduled"
