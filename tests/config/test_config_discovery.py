import tempfile
import unittest
from pathlib import Path

from gsheetingest.config import find_config_file, load_config
from gsheetingest.errors import ConfigError

CONFIG_NAME = "gsheetingest-test-settings.yml"


class TestFindConfigFile(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.deep = self.root / "a" / "b" / "c"
        self.deep.mkdir(parents=True)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_finds_file_in_start_dir(self) -> None:
        (self.deep / CONFIG_NAME).write_text("{}", encoding="utf-8")
        self.assertEqual(find_config_file(CONFIG_NAME, self.deep), self.deep / CONFIG_NAME)

    def test_finds_file_in_ancestor(self) -> None:
        (self.root / "a" / CONFIG_NAME).write_text("{}", encoding="utf-8")
        self.assertEqual(
            find_config_file(CONFIG_NAME, self.deep),
            self.root / "a" / CONFIG_NAME,
        )

    def test_closest_file_wins(self) -> None:
        (self.root / "a" / CONFIG_NAME).write_text("{}", encoding="utf-8")
        (self.root / "a" / "b" / CONFIG_NAME).write_text("{}", encoding="utf-8")
        self.assertEqual(
            find_config_file(CONFIG_NAME, self.deep),
            self.root / "a" / "b" / CONFIG_NAME,
        )

    def test_max_depth_limits_search(self) -> None:
        (self.root / "a" / CONFIG_NAME).write_text("{}", encoding="utf-8")
        with self.assertRaises(ConfigError):
            find_config_file(CONFIG_NAME, self.deep, max_depth=1)
        self.assertEqual(
            find_config_file(CONFIG_NAME, self.deep, max_depth=2),
            self.root / "a" / CONFIG_NAME,
        )

    def test_not_found_is_config_error(self) -> None:
        with self.assertRaises(ConfigError) as ctx:
            find_config_file("no-such-gsheetingest-config.yml", self.deep)
        self.assertEqual(str(ctx.exception), "Configuration file not found.")

    def test_directory_with_config_name_is_not_a_match(self) -> None:
        (self.deep / CONFIG_NAME).mkdir()
        (self.root / CONFIG_NAME).write_text("{}", encoding="utf-8")
        self.assertEqual(find_config_file(CONFIG_NAME, self.deep), self.root / CONFIG_NAME)


class TestLoadConfig(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "settings.yml"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_loads_mapping(self) -> None:
        self.path.write_text(
            "gApiAccess:\n  gApiOAuthSecretFile: secret.json\n",
            encoding="utf-8",
        )
        self.assertEqual(
            load_config(self.path),
            {"gApiAccess": {"gApiOAuthSecretFile": "secret.json"}},
        )

    def test_empty_file_is_empty_mapping(self) -> None:
        self.path.write_text("", encoding="utf-8")
        self.assertEqual(load_config(self.path), {})

    def test_invalid_yaml_is_config_error(self) -> None:
        self.path.write_text("gApiAccess: [unclosed\n", encoding="utf-8")
        with self.assertRaises(ConfigError):
            load_config(self.path)

    def test_non_mapping_is_config_error(self) -> None:
        self.path.write_text("- a\n- b\n", encoding="utf-8")
        with self.assertRaises(ConfigError):
            load_config(self.path)

    def test_missing_file_is_config_error(self) -> None:
        with self.assertRaises(ConfigError):
            load_config(self.path)


if __name__ == "__main__":
    unittest.main()
