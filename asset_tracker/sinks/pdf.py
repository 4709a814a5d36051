"""PDF sink writing report rows as paginated tables."""

import logging
from datetime import date
from pathlib import Path
from typing import Any

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from asset_tracker.exceptions import SinkError
from asset_tracker.sinks.serialization import cell_value, table_headers, to_row

logger = logging.getLogger(__name__)

HEADER_COLOR = colors.Color(66 / 255, 139 / 255, 202 / 255)


def report_title(name: str) -> str:
    """``"maintenance_costs"`` -> ``"Maintenance Costs Report"``."""
    return f"{name.replace('_', ' ').replace('-', ' ').title()} Report"


def _format_cell(value: Any) -> str:
    value = cell_value(value)
    if isinstance(value, float):
        return f"{value:,.2f}"
    return str(value)


class PdfSink:
    """Write each batch to ``<output_dir>/<name>.pdf``.

    Parameters
    ----------
    output_dir : str | Path
        Directory for the documents.
    generated_on : date | None
        Date printed under the title (default: today).
    """

    def __init__(self, output_dir: str | Path, generated_on: date | None = None) -> None:
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.generated_on = generated_on or date.today()
        self.styles = getSampleStyleSheet()
        self._counts: dict[str, int] = {}

    def write_batch(self, name: str, records: list[Any]) -> Path:
        """Write one document with a title, date line and table."""
        rows = [to_row(record) for record in records]
        file_path = self.output_dir / f"{name}.pdf"

        story: list[Any] = [
            Paragraph(report_title(name), self.styles["Title"]),
            Paragraph(f"Generated on: {self.generated_on.isoformat()}", self.styles["Normal"]),
            Spacer(1, 0.5 * cm),
        ]

        if rows:
            headers = table_headers(rows)
            data = [headers] + [[_format_cell(row.get(h)) for h in headers] for row in rows]
            table = Table(data, repeatRows=1)
            table.setStyle(
                TableStyle(
                    [
                        ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
                        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                        ("FONTSIZE", (0, 0), (-1, -1), 8),
                        ("TOPPADDING", (0, 0), (-1, -1), 2),
                        ("BOTTOMPADDING", (0, 0), (-1, -1), 2),
                        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.whitesmoke]),
                    ]
                )
            )
            story.append(table)
        else:
            logger.warning("No rows to export for %s", name)
            story.append(Paragraph("No data.", self.styles["Normal"]))

        doc = SimpleDocTemplate(
            str(file_path),
            pagesize=landscape(A4),
            title=report_title(name),
            leftMargin=1.5 * cm,
            rightMargin=1.5 * cm,
            topMargin=1.5 * cm,
            bottomMargin=1.5 * cm,
        )
        try:
            doc.build(story)
        except OSError as e:
            raise SinkError(f"Failed to export to PDF: {e}") from e

        self._counts[name] = len(rows)
        return file_path

    def close(self) -> None:
        """Log summary."""
        logger.info("PDF reports written to: %s", self.output_dir)
        for name, count in self._counts.items():
            logger.info("  %s: %d rows", name, count)
