from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rats import config


class ConfigTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "nested" / "config.json"
        patcher = mock.patch("rats.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def write_raw(self, text: str) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(text, encoding="utf-8")


class ConfigBehaviorTests(ConfigTestCase):
    def test_missing_config_yields_defaults(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_theme_name())
        self.assertEqual(config.load_left_pane_percent(), config.DEFAULT_LEFT_PANE_PERCENT)

    def test_theme_name_round_trips_and_keeps_other_keys(self) -> None:
        self.write_raw(json.dumps({"left_pane_percent": 35}))

        config.save_theme_name("  ocean ")

        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertEqual(config.load_left_pane_percent(), 35.0)

    def test_blank_theme_name_is_not_saved(self) -> None:
        config.save_theme_name("   ")

        self.assertFalse(self.config_path.exists())

    def test_malformed_json_is_ignored(self) -> None:
        self.write_raw("{not json")

        with self.assertLogs("rats.config", level="WARNING"):
            self.assertEqual(config.load_config(), {})

    def test_non_object_top_level_is_ignored(self) -> None:
        self.write_raw("[1, 2, 3]")

        with self.assertLogs("rats.config", level="WARNING"):
            self.assertEqual(config.load_config(), {})

    def test_left_pane_percent_rejects_out_of_range_and_non_numbers(self) -> None:
        for value in (0, 100, -5, 250, True, "40", None):
            with self.subTest(value=value):
                self.write_raw(json.dumps({"left_pane_percent": value}))
                self.assertEqual(config.load_left_pane_percent(), config.DEFAULT_LEFT_PANE_PERCENT)

    def test_write_failure_is_logged_not_raised(self) -> None:
        with mock.patch.object(Path, "write_text", side_effect=PermissionError(13, "Permission denied")):
            with self.assertLogs("rats.config", level="WARNING") as logs:
                config.save_config({"theme": "ocean"})

        self.assertIn("cannot write config", logs.output[0])


if __name__ == "__main__":
    unittest.main()
