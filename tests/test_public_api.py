import unittest

import gsheetingest


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(gsheetingest, "GoogleDriveProcessService"))
        self.assertTrue(hasattr(gsheetingest, "GoogleAPIClient"))
        self.assertTrue(hasattr(gsheetingest, "AuthInfo"))
        self.assertTrue(hasattr(gsheetingest, "GApiAccessSettings"))

        self.assertTrue(hasattr(gsheetingest, "GSuiteHandlingSpecifications"))
        self.assertTrue(hasattr(gsheetingest, "RawSheetRecord"))
        self.assertTrue(hasattr(gsheetingest, "ResourceReference"))
        self.assertTrue(hasattr(gsheetingest, "classify"))

        self.assertTrue(hasattr(gsheetingest, "GSheetIngestError"))
        self.assertTrue(hasattr(gsheetingest, "InputError"))

    def test___all___is_defined(self) -> None:
        self.assertTrue(hasattr(gsheetingest, "__all__"))
        for name in gsheetingest.__all__:
            self.assertTrue(hasattr(gsheetingest, name), name)
        self.assertIn("GoogleDriveProcessService", gsheetingest.__all__)
        self.assertIn("GSheetIngestError", gsheetingest.__all__)


if __name__ == "__main__":
    unittest.main()
