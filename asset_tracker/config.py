"""Configuration management for asset-tracker."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from asset_tracker.exceptions import ConfigurationError


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "assets"
    user: str = "postgres"
    password: str = "postgres"

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class ReportConfig:
    """Windows and sizes used when building dashboard views."""

    horizon_days: int = 30
    trailing_months: int = 6
    top_categories: int = 3
    loader_workers: int = 4

    def __post_init__(self) -> None:
        for name in ("horizon_days", "trailing_months", "top_categories"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.loader_workers < 1:
            raise ConfigurationError(f"loader_workers must be >= 1, got {self.loader_workers}")


@dataclass
class AssetTrackerConfig:
    """Main configuration for asset-tracker."""

    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AssetTrackerConfig":
        """Create config from environment variables."""
        postgres = PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=_int_env("POSTGRES_PORT", 5432),
            database=os.getenv("POSTGRES_DB", "assets"),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", "postgres"),
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        report = ReportConfig(
            horizon_days=_int_env("HORIZON_DAYS", 30),
            trailing_months=_int_env("TRAILING_MONTHS", 6),
            top_categories=_int_env("TOP_CATEGORIES", 3),
            loader_workers=_int_env("LOADER_WORKERS", 4),
        )

        return cls(
            postgres=postgres,
            output=output,
            report=report,
            seed=_int_env("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
