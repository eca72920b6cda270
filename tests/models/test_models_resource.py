import dataclasses
import unittest

from gsheetingest.models import ResourceKind, ResourceReference


class TestResourceReference(unittest.TestCase):
    def test_kind_flags_are_exclusive(self) -> None:
        ref = ResourceReference(ResourceKind.FOLDER, "F1", "https://drive.google.com/drive/folders/F1")
        self.assertTrue(ref.is_folder)
        self.assertFalse(ref.is_spreadsheet)

    def test_is_immutable(self) -> None:
        ref = ResourceReference(ResourceKind.SPREADSHEET, "S1", "url")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            ref.resource_id = "S2"  # type: ignore[misc]

    def test_rejects_empty_id(self) -> None:
        with self.assertRaises(ValueError):
            ResourceReference(ResourceKind.SPREADSHEET, "", "url")

    def test_rejects_unknown_kind(self) -> None:
        with self.assertRaises(TypeError):
            ResourceReference("DOCUMENT", "S1", "url")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
