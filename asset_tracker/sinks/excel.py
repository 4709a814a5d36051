"""Spreadsheet sink writing report rows to an xlsx workbook."""

import logging
import re
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import IllegalCharacterError

from asset_tracker.exceptions import SinkError
from asset_tracker.sinks.serialization import cell_value, table_headers, to_row

logger = logging.getLogger(__name__)

MIN_COLUMN_WIDTH = 15
MAX_SHEET_TITLE = 31  # Excel limit
HEADER_FILL = PatternFill(start_color="428BCA", end_color="428BCA", fill_type="solid")


def excel_value(value: Any) -> Any:
    """Cell value with control characters removed from text."""
    value = cell_value(value)
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def sheet_title(name: str) -> str:
    """Worksheet title for a report name, within Excel's rules."""
    title = re.sub(r"[\[\]:*?/\\]", "_", name).strip("'") or "Sheet"
    return title[:MAX_SHEET_TITLE]


class ExcelSink:
    """Collect reports as worksheets of one workbook, saved on ``close()``.

    Parameters
    ----------
    path : str | Path
        Workbook file to write. The ``.xlsx`` suffix is added if missing.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        if self.path.suffix != ".xlsx":
            self.path = self.path.with_suffix(".xlsx")
        self.workbook = Workbook()
        self.workbook.remove(self.workbook.active)
        self._counts: dict[str, int] = {}

    def write_batch(self, name: str, records: list[Any]) -> None:
        """Add a worksheet with a header row and one row per record."""
        rows = [to_row(record) for record in records]
        ws = self.workbook.create_sheet(title=sheet_title(name))

        if not rows:
            logger.warning("No rows to export for %s", name)
            self._counts[name] = 0
            return

        headers = table_headers(rows)
        ws.append(headers)
        for cell in ws[1]:
            cell.font = Font(bold=True, color="FFFFFF")
            cell.fill = HEADER_FILL
            cell.alignment = Alignment(horizontal="center", vertical="center")

        try:
            for row in rows:
                ws.append([excel_value(row.get(header)) for header in headers])
                for cell in ws[ws.max_row]:
                    # text such as "=cmd" stays text, never a formula
                    if cell.data_type == "f":
                        cell.data_type = "s"
        except (IllegalCharacterError, ValueError) as e:
            raise SinkError(f"Failed to write {name} to Excel: {e}") from e

        for index, header in enumerate(headers, 1):
            ws.column_dimensions[get_column_letter(index)].width = max(len(header), MIN_COLUMN_WIDTH)
        ws.freeze_panes = "A2"

        self._counts[name] = len(rows)

    def close(self) -> None:
        """Save the workbook."""
        if not self.workbook.worksheets:
            self.workbook.create_sheet(title="Empty")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.workbook.save(self.path)
        except OSError as e:
            raise SinkError(f"Failed to export to Excel: {e}") from e
        logger.info("Workbook written to %s (%s)", self.path, self._counts)

