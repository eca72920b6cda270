import unittest

from gsheetingest.models import RawSheetRecord


class TestRawSheetRecord(unittest.TestCase):
    def test_header_and_data_rows(self) -> None:
        record = RawSheetRecord(
            tab_name="Products",
            source_url="https://docs.google.com/spreadsheets/d/S1/",
            spreadsheet_id="S1",
            rows=[["Title"], ["Name", "Price"], ["Apple", "1"]],
            header_row_index=1,
        )
        self.assertTrue(record.has_header)
        self.assertEqual(record.headings, ["Name", "Price"])
        self.assertEqual(record.data_rows, [["Apple", "1"]])

    def test_no_header_found(self) -> None:
        record = RawSheetRecord(
            tab_name="Notes",
            source_url="u",
            spreadsheet_id="S1",
            rows=[["a"], ["b"]],
        )
        self.assertFalse(record.has_header)
        self.assertIsNone(record.headings)
        self.assertEqual(record.data_rows, [["a"], ["b"]])


if __name__ == "__main__":
    unittest.main()
