"""Export: display-row formatting, CSV and PDF table files."""
from app.export.formatting import ExportColumn, ExportFile, format_export_data, humanize_key
from app.export.csv_exporter import export_csv
from app.export.pdf_generator import export_pdf

__all__ = [
    "ExportColumn",
    "ExportFile",
    "export_csv",
    "export_pdf",
    "format_export_data",
    "humanize_key",
]
