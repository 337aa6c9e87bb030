"""
core/tests/test_config_service.py

Layer precedence and typing of the ConfigService.
"""

from __future__ import annotations

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from core.config.config_service import DEFAULTS_INI, ConfigError, ConfigService


class TestConfigService(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.user_ini = self.tmp / "config.ini"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _service(self, environ: dict | None = None) -> ConfigService:
        return ConfigService(defaults_ini=DEFAULTS_INI, user_ini=self.user_ini, environ=environ or {})

    def test_defaults(self) -> None:
        svc = self._service()
        self.assertEqual(svc.lifecycle.preview_length, 30)
        self.assertEqual(svc.lifecycle.preview_suffix, "...")
        self.assertEqual(svc.logging.level, "INFO")
        self.assertFalse(svc.logging.echo)
        self.assertEqual(svc.meta_source("Lifecycle", "preview_length")["layer"], "defaults.ini")

    def test_embedded_defaults_without_ini(self) -> None:
        svc = ConfigService(defaults_ini=None, user_ini=self.user_ini, environ={})
        self.assertEqual(svc.general.app_name, "DocLifecycle")
        self.assertEqual(svc.meta_source("General", "app_name")["layer"], "code")

    def test_env_overrides_defaults(self) -> None:
        svc = self._service({"DOCLIFECYCLE_LIFECYCLE__PREVIEW_LENGTH": "12", "DOCLIFECYCLE_LOGGING__ECHO": "yes"})
        self.assertEqual(svc.lifecycle.preview_length, 12)
        self.assertTrue(svc.logging.echo)
        self.assertEqual(svc.meta_source("Lifecycle", "preview_length")["layer"], "env")

    def test_user_file_wins(self) -> None:
        self.user_ini.write_text("[Logging]\nlevel = debug\n", encoding="utf-8")
        svc = self._service({"DOCLIFECYCLE_LOGGING__LEVEL": "ERROR"})
        self.assertEqual(svc.logging.level, "DEBUG")
        self.assertEqual(svc.get("Logging", "level"), "debug")
        self.assertEqual(svc.meta_source("Logging", "level")["layer"], "user")

    def test_get_with_cast(self) -> None:
        svc = self._service()
        self.assertEqual(svc.get("Lifecycle", "preview_length", cast=int), 30)
        self.assertIsNone(svc.get("Lifecycle", "missing"))

    def test_invalid_values_raise(self) -> None:
        with self.assertRaises(ConfigError):
            self._service({"DOCLIFECYCLE_LIFECYCLE__PREVIEW_LENGTH": "many"})
        with self.assertRaises(ConfigError):
            self._service({"DOCLIFECYCLE_LIFECYCLE__PREVIEW_LENGTH": "-1"})
        with self.assertRaises(ConfigError):
            self._service({"DOCLIFECYCLE_LOGGING__LEVEL": "chatty"})
        with self.assertRaises(ConfigError):
            self._service({"DOCLIFECYCLE_GENERAL__TIMEZONE": "Mars/Olympus"})


if __name__ == "__main__":
    unittest.main()
