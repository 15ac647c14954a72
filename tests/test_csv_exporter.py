import csv
import io
import unittest
from decimal import Decimal

from app.export import export_csv, format_export_data
from app.export.csv_exporter import CSV_MEDIA_TYPE


def lines(export):
    return export.content.decode("utf-8").splitlines()


class ExportCsvTests(unittest.TestCase):
    def test_empty_input_produces_no_file(self):
        with self.assertLogs("app.export.csv_exporter", level="WARNING") as logs:
            self.assertIsNone(export_csv([], "customers.csv"))
        self.assertIn("No data to export", logs.output[0])

    def test_header_and_media_type(self):
        export = export_csv([{"Name": "Jane", "Phone": "555"}], "customers.csv")
        self.assertEqual(export.filename, "customers.csv")
        self.assertEqual(export.media_type, CSV_MEDIA_TYPE)
        self.assertEqual(lines(export)[0], "Name,Phone")

    def test_comma_and_quote_are_escaped(self):
        export = export_csv([{"Note": 'a,"b"'}])
        self.assertEqual(lines(export)[1], '"a,""b"""')

    def test_plate_with_comma_scenario(self):
        rows = format_export_data([{"name": "Jane Doe", "plate_number": "ABC,123"}])
        export = export_csv(rows, "vehicles.csv")
        self.assertEqual(lines(export), ["Name,Plate number", 'Jane Doe,"ABC,123"'])

    def test_missing_key_yields_empty_field(self):
        export = export_csv([{"A": "1", "B": "2"}, {"A": "3"}])
        self.assertEqual(lines(export), ["A,B", "1,2", "3,"])

    def test_union_of_keys_keeps_later_columns(self):
        export = export_csv([{"A": "1"}, {"A": "2", "B": "x"}])
        self.assertEqual(lines(export), ["A,B", "1,", "2,x"])

    def test_zero_and_none(self):
        export = export_csv([{"Amount": 0, "Paid": None}])
        self.assertEqual(lines(export)[1], "0,")

    def test_single_empty_field_is_quoted(self):
        export = export_csv([{"A": None}, {"A": "x"}])
        self.assertEqual(lines(export), ["A", '""', "x"])

        parsed = list(csv.reader(io.StringIO(export.content.decode("utf-8"))))
        self.assertEqual(parsed, [["A"], [""], ["x"]])

    def test_round_trip_with_csv_reader(self):
        rows = [
            {"Name": "Jane Doe", "Plate": "ABC,123", "Notes": 'said "hi"', "Amount": Decimal("45.50")},
            {"Name": "Ünal Öz", "Plate": "Z-1", "Notes": "line one\nline two", "Amount": 10},
        ]
        export = export_csv(rows)
        parsed = list(csv.DictReader(io.StringIO(export.content.decode("utf-8"))))

        self.assertEqual(len(parsed), 2)
        self.assertEqual(set(parsed[0]), set(rows[0]))
        for original, result in zip(rows, parsed):
            self.assertEqual(result, {key: str(value) for key, value in original.items()})


if __name__ == "__main__":
    unittest.main()
