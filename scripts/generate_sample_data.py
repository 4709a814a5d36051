#!/usr/bin/env python3
"""Generate a sample asset portfolio.

Writes one JSON file per collection (assets, warranties, maintenance_tasks,
depreciation_records) that ``JsonFileRecordStore`` and ``export_report.py``
can read back. Optionally loads the same records into PostgreSQL.

Usage:
    python scripts/generate_sample_data.py --assets 100 --seed 42
    python scripts/generate_sample_data.py --reference-date 2024-01-15 --postgres
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from asset_tracker.config import AssetTrackerConfig
from asset_tracker.exceptions import AssetTrackerError
from asset_tracker.logging import setup_logging
from asset_tracker.scenarios import AssetPortfolioScenario
from asset_tracker.sinks import JsonFileSink
from asset_tracker.store import PostgresRecordStore

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a sample asset portfolio")
    parser.add_argument(
        "--assets",
        type=int,
        default=50,
        help="Number of assets to generate (default: 50)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: SEED or none)",
    )
    parser.add_argument(
        "--reference-date",
        type=date.fromisoformat,
        default=None,
        help="Date the portfolio is generated for, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for JSON files (default: OUTPUT_DIR or output/)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "--postgres",
        action="store_true",
        help="Also create the tables and load the records into PostgreSQL",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = AssetTrackerConfig.from_env()
    setup_logging(config.log_level)

    seed = args.seed if args.seed is not None else config.seed
    scenario = AssetPortfolioScenario(
        num_assets=args.assets,
        seed=seed,
        reference_date=args.reference_date,
    )
    store = scenario.generate()

    sink = JsonFileSink(
        args.output_dir or config.output.output_dir,
        pretty=args.pretty or config.output.pretty_json,
    )
    try:
        sink.write_batch("assets", store.list_assets())
        sink.write_batch("warranties", store.list_warranties())
        sink.write_batch("maintenance_tasks", store.list_maintenance_tasks())
        sink.write_batch("depreciation_records", store.list_depreciation_records())

        if args.postgres:
            pg = PostgresRecordStore(config.postgres.connection_string)
            pg.create_tables()
            counts = pg.load(store)
            logger.info("PostgreSQL load complete: %s", counts)
    except AssetTrackerError as e:
        logger.error("Generation failed: %s", e)
        return 1
    finally:
        sink.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
