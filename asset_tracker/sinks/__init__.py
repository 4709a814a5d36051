"""Output sinks for exporting records and reports."""

from asset_tracker.sinks.console import ConsoleSink
from asset_tracker.sinks.excel import ExcelSink
from asset_tracker.sinks.json_file import JsonFileSink
from asset_tracker.sinks.pdf import PdfSink

__all__ = ["ConsoleSink", "ExcelSink", "JsonFileSink", "PdfSink"]
