import unittest
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

from app.export.formatting import ExportColumn, column_names, format_export_data, humanize_key, resolve


class HumanizeKeyTests(unittest.TestCase):
    def test_snake_case(self):
        self.assertEqual(humanize_key("plate_number"), "Plate number")

    def test_camel_case(self):
        self.assertEqual(humanize_key("createdAt"), "Created At")

    def test_mixed_case_does_not_double_space(self):
        self.assertEqual(humanize_key("customer_Name"), "Customer Name")

    def test_single_word(self):
        self.assertEqual(humanize_key("name"), "Name")


class FormatExportDataTests(unittest.TestCase):
    def setUp(self):
        self.records = [
            {"_id": 1, "name": "Jane Doe", "plate_number": "ABC-123", "amount_paid": Decimal("45.50")},
            {"_id": 2, "name": "John Roe", "plate_number": "XYZ-987", "amount_paid": None},
            {"_id": 3, "name": "Ann Poe", "plate_number": "JKL-555", "amount_paid": 12},
        ]

    def test_row_count_is_preserved(self):
        self.assertEqual(len(format_export_data(self.records)), len(self.records))
        self.assertEqual(format_export_data([]), [])

    def test_internal_keys_are_dropped(self):
        for row in format_export_data(self.records):
            self.assertFalse(any(key.startswith("_") for key in row))
            self.assertNotIn("Id", row)

    def test_keys_are_humanised_in_input_order(self):
        row = format_export_data(self.records)[0]
        self.assertEqual(list(row), ["Name", "Plate number", "Amount paid"])

    def test_values_pass_through_and_none_becomes_empty(self):
        rows = format_export_data(self.records)
        self.assertEqual(rows[0]["Amount paid"], Decimal("45.50"))
        self.assertEqual(rows[1]["Amount paid"], "")
        self.assertEqual(rows[2]["Amount paid"], 12)

    def test_dates_use_locale_short_format(self):
        when = datetime(2026, 10, 19, 14, 30)
        rows = format_export_data([{"submission_date": when, "due": date(2026, 11, 1)}])
        self.assertEqual(rows[0]["Submission date"], when.strftime("%x"))
        self.assertEqual(rows[0]["Due"], date(2026, 11, 1).strftime("%x"))


class ColumnModeTests(unittest.TestCase):
    def test_dotted_paths_resolve_objects_and_mappings(self):
        service = SimpleNamespace(
            customer=SimpleNamespace(name="Jane Doe"),
            vehicle={"plate_number": "ABC,123"},
            status="pending",
        )
        self.assertEqual(resolve(service, "customer.name"), "Jane Doe")
        self.assertEqual(resolve(service, "vehicle.plate_number"), "ABC,123")
        self.assertIsNone(resolve(service, "missing.name"))

    def test_columns_fix_order_labels_and_formatting(self):
        columns = [
            ExportColumn("vehicle.plate_number", "Plate"),
            ExportColumn("customer.name"),
            ExportColumn("status", formatter=str.upper),
        ]
        record = {
            "customer": {"name": "Jane Doe"},
            "vehicle": {"plate_number": "ABC-123"},
            "status": "pending",
            "_secret": "x",
        }
        rows = format_export_data([record], columns)
        self.assertEqual(rows, [{"Plate": "ABC-123", "Name": "Jane Doe", "Status": "PENDING"}])

    def test_missing_values_become_empty(self):
        rows = format_export_data([{}], [ExportColumn("collection_date", "Collected")])
        self.assertEqual(rows, [{"Collected": ""}])


class ColumnNamesTests(unittest.TestCase):
    def test_union_in_first_seen_order(self):
        rows = [{"a": 1, "b": 2}, {"b": 3, "c": 4}, {"a": 5}]
        self.assertEqual(column_names(rows), ["a", "b", "c"])


if __name__ == "__main__":
    unittest.main()
