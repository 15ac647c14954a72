"""Render export rows as a titled, paginated PDF table."""
import io
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.export.csv_exporter import export_csv
from app.export.formatting import ExportFile, column_names, short_date

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
NO_DATA_TEXT = "No data to display"

HEADER_FILL = colors.Color(41 / 255, 128 / 255, 185 / 255)
FONT_SIZE = 9
CELL_PADDING = 3


def pdf_cell(value: Any) -> str:
    """Display text for one table cell."""
    if value is None or value == "":
        return "-"
    if isinstance(value, date):
        return short_date(value)
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return f"{value:.2f}"
    return str(value)


def csv_fallback_name(filename: str) -> str:
    if filename.lower().endswith(".pdf"):
        return filename[:-4] + ".csv"
    return filename + ".csv"


def build_story(rows: Sequence[Mapping[str, Any]], title: str, width: float) -> list:
    """Flowables for the document: title, generation date, then the table."""
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        name="ExportTitle", parent=styles["Heading1"], fontSize=16, leading=20, spaceAfter=6
    )
    caption_style = ParagraphStyle(name="ExportCaption", parent=styles["Normal"], fontSize=10)

    story = [
        Paragraph(escape(title), title_style),
        Paragraph(f"Generated: {short_date(date.today())}", caption_style),
        Spacer(1, 0.2 * inch),
    ]

    if not rows:
        story.append(Paragraph(NO_DATA_TEXT, styles["Normal"]))
        return story

    cell_style = ParagraphStyle(
        name="ExportCell", parent=styles["Normal"], fontSize=FONT_SIZE, leading=FONT_SIZE + 2
    )
    head_style = ParagraphStyle(
        name="ExportHead", parent=cell_style, fontName="Helvetica-Bold", textColor=colors.white
    )

    headers = column_names(rows)
    data = [[Paragraph(escape(header), head_style) for header in headers]]
    for row in rows:
        data.append([Paragraph(escape(pdf_cell(row.get(header))), cell_style) for header in headers])

    table = Table(data, colWidths=[width / len(headers)] * len(headers), repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_FILL),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), FONT_SIZE),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("TOPPADDING", (0, 0), (-1, -1), CELL_PADDING),
        ("BOTTOMPADDING", (0, 0), (-1, -1), CELL_PADDING),
        ("LEFTPADDING", (0, 0), (-1, -1), CELL_PADDING),
        ("RIGHTPADDING", (0, 0), (-1, -1), CELL_PADDING),
    ]))
    story.append(table)
    return story


def render_pdf(rows: Sequence[Mapping[str, Any]], title: str) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=letter,
        title=title,
        rightMargin=0.5 * inch,
        leftMargin=0.5 * inch,
        topMargin=0.5 * inch,
        bottomMargin=0.5 * inch,
    )
    doc.build(build_story(rows, title, doc.width))
    return buffer.getvalue()


def export_pdf(
    rows: Sequence[Mapping[str, Any]],
    filename: str = "export.pdf",
    title: str = "Report",
) -> Optional[ExportFile]:
    """
    Build a PDF report of ``rows``.

    If the document cannot be built the rows are exported as CSV instead,
    under the same name with a ``.csv`` extension.
    """
    try:
        content = render_pdf(rows, title)
    except Exception:
        logger.exception("Error generating PDF %s, falling back to CSV export", filename)
        return export_csv(rows, csv_fallback_name(filename))

    return ExportFile(filename=filename, media_type=PDF_MEDIA_TYPE, content=content)
