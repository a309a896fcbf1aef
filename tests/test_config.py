from __future__ import annotations

import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from checkers.config import CheckersSettings, LoggingSettings, load_settings  # noqa: E402


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = CheckersSettings()
        self.assertFalse(settings.rules.allow_friendly_hop)
        self.assertEqual(settings.display.cell_size, 48)
        self.assertEqual(settings.display.fps, 60)
        self.assertEqual(settings.display.animation_speed, 0.5)
        self.assertEqual(settings.logging.level, "INFO")

    def test_log_level_is_normalised_and_validated(self) -> None:
        self.assertEqual(LoggingSettings(level="debug").level, "DEBUG")
        with self.assertRaises(ValueError):
            LoggingSettings(level="chatty")

    def test_theme_range_is_enforced(self) -> None:
        with self.assertRaises(ValueError):
            CheckersSettings.model_validate({"display": {"theme": 3}})

    def test_from_env(self) -> None:
        env = {
            "CHECKERS_FRIENDLY_HOP": "true",
            "CHECKERS_CELL_SIZE": "64",
            "CHECKERS_PORT": "9001",
            "CHECKERS_LOG_LEVEL": "warning",
        }
        with mock.patch.dict(os.environ, env):
            settings = load_settings()
        self.assertTrue(settings.rules.allow_friendly_hop)
        self.assertEqual(settings.display.cell_size, 64)
        self.assertEqual(settings.server.port, 9001)
        self.assertEqual(settings.logging.level, "WARNING")

    def test_load_from_json_file(self) -> None:
        payload = {"rules": {"allow_friendly_hop": True}, "display": {"theme": 2}}
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "settings.json"
            path.write_text(json.dumps(payload), encoding="utf-8")
            settings = load_settings(path)
        self.assertTrue(settings.rules.allow_friendly_hop)
        self.assertEqual(settings.display.theme, 2)
        self.assertEqual(settings.server.port, 8000)


if __name__ == "__main__":
    unittest.main()
