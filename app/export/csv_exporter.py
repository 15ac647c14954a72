"""Encode export rows as a CSV file."""
import csv
import io
import logging
from typing import Any, Mapping, Optional, Sequence

from app.export.formatting import ExportFile, column_names

logger = logging.getLogger(__name__)

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


def export_csv(
    rows: Sequence[Mapping[str, Any]], filename: str = "export.csv"
) -> Optional[ExportFile]:
    """
    Build a CSV file from ``rows``.

    The header is the union of the rows' keys; a row missing a column gets an
    empty field. Fields containing a comma, quote or line break are quoted
    with embedded quotes doubled. A row whose only field is empty is written
    as ``""`` so that it is not read back as a blank line; it still parses
    as an empty string. Returns ``None`` when there is nothing to export.
    """
    if not rows:
        logger.warning("No data to export for %s", filename)
        return None

    headers = column_names(rows)

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([row.get(header) for header in headers])

    return ExportFile(
        filename=filename,
        media_type=CSV_MEDIA_TYPE,
        content=buf.getvalue().encode("utf-8"),
    )
