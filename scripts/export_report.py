#!/usr/bin/env python3
"""Export dashboard and financial reports.

Loads a snapshot from a directory of JSON collections or from PostgreSQL,
builds the dashboard and financial-insights views for a reference date, and
writes every table through the selected sinks.

Usage:
    python scripts/export_report.py --input-dir output --format xlsx pdf
    python scripts/export_report.py --postgres --as-of 2024-01-15 --format console
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
from asset_tracker.service import DashboardService
from asset_tracker.sinks import ConsoleSink, ExcelSink, JsonFileSink, PdfSink
from asset_tracker.sinks.rows import asset_rows, dashboard_report, financial_report
from asset_tracker.store import JsonFileRecordStore, PostgresRecordStore

logger = logging.getLogger(__name__)

FORMATS = ("xlsx", "pdf", "json", "console")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export asset dashboard reports")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--input-dir",
        type=Path,
        default=None,
        help="Directory with <collection>.json files (default: OUTPUT_DIR or output/)",
    )
    source.add_argument(
        "--postgres",
        action="store_true",
        help="Read collections from PostgreSQL (POSTGRES_* settings)",
    )
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        default=None,
        help="Reference date, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--format",
        nargs="+",
        choices=FORMATS,
        default=["xlsx"],
        help="Output formats (default: xlsx)",
    )
    parser.add_argument(
        "--report-dir",
        type=Path,
        default=Path("reports"),
        help="Directory for exported files (default: reports/)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log output format (default: standard)",
    )
    return parser.parse_args(argv)


def build_sinks(formats: list[str], report_dir: Path, as_of: date, pretty: bool) -> list:
    sinks = []
    for fmt in formats:
        if fmt == "xlsx":
            sinks.append(ExcelSink(report_dir / f"asset_report_{as_of.isoformat()}.xlsx"))
        elif fmt == "pdf":
            sinks.append(PdfSink(report_dir, generated_on=as_of))
        elif fmt == "json":
            sinks.append(JsonFileSink(report_dir, pretty=pretty))
        else:
            sinks.append(ConsoleSink())
    return sinks


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = AssetTrackerConfig.from_env()
    setup_logging(config.log_level, args.log_format)

    as_of = args.as_of or date.today()
    if args.postgres:
        store = PostgresRecordStore(config.postgres.connection_string)
    else:
        store = JsonFileRecordStore(args.input_dir or config.output.output_dir)

    service = DashboardService(store, config.report)
    if not service.refresh():
        logger.error("Could not load records: %s", service.last_error)
        return 1

    snapshot = service.snapshot
    assets_by_id = snapshot.assets_by_id()
    reports = {"assets": asset_rows(snapshot.assets)}
    reports.update(dashboard_report(service.dashboard(as_of), assets_by_id, as_of))
    reports.update(financial_report(service.financial_insights(as_of)))

    try:
        sinks = build_sinks(args.format, args.report_dir, as_of, config.output.pretty_json)
        for sink in sinks:
            for name, rows in reports.items():
                sink.write_batch(name, rows)
            sink.close()
    except AssetTrackerError as e:
        logger.error("Export failed: %s", e)
        return 1

    logger.info("Exported %d reports as of %s", len(reports), as_of.isoformat())
    return 0


if __name__ == "__main__":
    sys.exit(main())
