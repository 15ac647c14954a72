import re
import unittest
from datetime import date
from decimal import Decimal
from unittest import mock

from reportlab.platypus import Paragraph, Table

from app.export import export_csv, export_pdf
from app.export.pdf_generator import (
    NO_DATA_TEXT,
    PDF_MEDIA_TYPE,
    build_story,
    csv_fallback_name,
    pdf_cell,
)

ROWS = [
    {"Customer": "Jane Doe", "Plate": "ABC,123", "Amount paid": Decimal("45.5"), "Collected": ""},
    {"Customer": "John Roe", "Plate": "XYZ-987", "Amount paid": 120, "Collected": "10/19/26"},
]


def paragraph_texts(story):
    return [flowable.getPlainText() for flowable in story if isinstance(flowable, Paragraph)]


class PdfCellTests(unittest.TestCase):
    def test_numbers_get_two_decimals(self):
        self.assertEqual(pdf_cell(3), "3.00")
        self.assertEqual(pdf_cell(2.5), "2.50")
        self.assertEqual(pdf_cell(Decimal("45.5")), "45.50")

    def test_missing_values_become_dash(self):
        self.assertEqual(pdf_cell(None), "-")
        self.assertEqual(pdf_cell(""), "-")

    def test_dates_and_other_values(self):
        self.assertEqual(pdf_cell(date(2026, 10, 19)), date(2026, 10, 19).strftime("%x"))
        self.assertEqual(pdf_cell(True), "True")
        self.assertEqual(pdf_cell("pending"), "pending")


class CsvFallbackNameTests(unittest.TestCase):
    def test_extension_is_replaced(self):
        self.assertEqual(csv_fallback_name("services_2026-10-19.pdf"), "services_2026-10-19.csv")
        self.assertEqual(csv_fallback_name("REPORT.PDF"), "REPORT.csv")
        self.assertEqual(csv_fallback_name("report"), "report.csv")


class BuildStoryTests(unittest.TestCase):
    def test_empty_rows_render_message_without_table(self):
        story = build_story([], "Customers Report", 500)
        texts = paragraph_texts(story)

        self.assertEqual(texts[0], "Customers Report")
        self.assertTrue(texts[1].startswith("Generated: "))
        self.assertIn(NO_DATA_TEXT, texts)
        self.assertFalse(any(isinstance(flowable, Table) for flowable in story))

    def test_rows_render_single_table_with_repeating_header(self):
        story = build_story(ROWS, "Service Report", 500)
        tables = [flowable for flowable in story if isinstance(flowable, Table)]

        self.assertEqual(len(tables), 1)
        self.assertEqual(tables[0].repeatRows, 1)
        self.assertNotIn(NO_DATA_TEXT, paragraph_texts(story))


class ExportPdfTests(unittest.TestCase):
    def test_builds_pdf(self):
        export = export_pdf(ROWS, "services.pdf", "Service Report")

        self.assertEqual(export.filename, "services.pdf")
        self.assertEqual(export.media_type, PDF_MEDIA_TYPE)
        self.assertTrue(export.content.startswith(b"%PDF"))

    def test_empty_rows_still_produce_a_document(self):
        export = export_pdf([], "customers.pdf", "Customers Report")

        self.assertEqual(export.media_type, PDF_MEDIA_TYPE)
        self.assertTrue(export.content.startswith(b"%PDF"))

    def test_paginates_many_rows(self):
        rows = [{"Name": f"Customer {i}", "Phone": f"555-{i:04d}"} for i in range(300)]
        export = export_pdf(rows, "customers.pdf")
        pages = re.findall(rb"/Type\s*/Page\b", export.content)
        self.assertGreater(len(pages), 2)

    def test_layout_failure_falls_back_to_csv(self):
        with mock.patch(
            "app.export.pdf_generator.SimpleDocTemplate.build",
            side_effect=RuntimeError("layout failed"),
        ), mock.patch(
            "app.export.pdf_generator.export_csv", wraps=export_csv
        ) as csv_export, self.assertLogs("app.export.pdf_generator", level="ERROR"):
            export = export_pdf(ROWS, "services_2026-10-19.pdf", "Service Report")

        csv_export.assert_called_once_with(ROWS, "services_2026-10-19.csv")
        self.assertEqual(export.filename, "services_2026-10-19.csv")
        self.assertEqual(export.media_type, "text/csv; charset=utf-8")
        self.assertTrue(export.content.decode("utf-8").startswith("Customer,Plate,Amount paid,Collected\n"))


if __name__ == "__main__":
    unittest.main()
