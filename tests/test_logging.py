"""Tests for logging setup, the access log middleware and security headers."""

import logging
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from acquisitions.core.logging import LOG_DATEFMT, LOG_FORMAT, UTCFormatter, configure_logging
from acquisitions.main import create_app
from helpers import make_database, make_settings


def _restore_root_logger(handlers: list[logging.Handler], level: int) -> None:
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class _RootLoggerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self.addCleanup(_restore_root_logger, root.handlers[:], root.level)


class TestConfigureLogging(_RootLoggerTestCase):
    """configure_logging: error.log gets ERROR only, combined.log gets everything."""

    def test_prod_with_log_dir_writes_files_without_console(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging(make_settings(APP_ENV="prod", LOG_DIR=tmp))
            root = logging.getLogger()
            self.assertEqual(len(root.handlers), 2)
            self.assertTrue(all(isinstance(h, logging.FileHandler) for h in root.handlers))

            log = logging.getLogger("acquisitions.tests.logging")
            log.info("user signed in")
            log.error("database unreachable")
            for handler in root.handlers:
                handler.flush()

            combined = (Path(tmp) / "combined.log").read_text(encoding="utf-8")
            errors = (Path(tmp) / "error.log").read_text(encoding="utf-8")
            self.assertIn("user signed in", combined)
            self.assertIn("database unreachable", combined)
            self.assertIn("database unreachable", errors)
            self.assertNotIn("user signed in", errors)
            # Close file handlers before the directory is removed.
            _restore_root_logger([], logging.WARNING)

    def test_dev_with_log_dir_also_logs_to_console(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging(make_settings(APP_ENV="dev", LOG_DIR=tmp))
            root = logging.getLogger()
            consoles = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]
            self.assertEqual(len(consoles), 1)
            _restore_root_logger([], logging.WARNING)

    def test_prod_without_log_dir_keeps_console(self) -> None:
        configure_logging(make_settings(APP_ENV="prod", LOG_LEVEL="warning"))
        root = logging.getLogger()
        self.assertEqual(len(root.handlers), 1)
        self.assertNotIsInstance(root.handlers[0], logging.FileHandler)
        self.assertEqual(root.level, logging.WARNING)


class TestUTCFormatter(unittest.TestCase):
    """Timestamps are UTC regardless of the host time zone."""

    def test_epoch_formats_as_utc(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "m", None, None)
        record.created = 0
        formatter = UTCFormatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
        self.assertEqual(formatter.formatTime(record, LOG_DATEFMT), "1970-01-01T00:00:00Z")


class TestAccessLogAndHeaders(_RootLoggerTestCase):
    """One access log line per request; HSTS only in production."""

    def _client(self, **settings_overrides: object) -> TestClient:
        database = make_database()
        self.addCleanup(database.dispose)
        return TestClient(create_app(make_settings(**settings_overrides), database))

    def test_access_log_line(self) -> None:
        client = self._client()
        with self.assertLogs("acquisitions.access", level="INFO") as logs:
            resp = client.get("/api", headers={"user-agent": "unit-test"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(logs.output), 1)
        self.assertIn('"GET /api" 200', logs.output[0])
        self.assertIn('"unit-test"', logs.output[0])

    def test_hsts_in_prod(self) -> None:
        resp = self._client(APP_ENV="prod").get("/")
        self.assertEqual(
            resp.headers["strict-transport-security"], "max-age=15552000; includeSubDomains"
        )
        self.assertEqual(resp.headers["x-content-type-options"], "nosniff")

    def test_no_hsts_outside_prod(self) -> None:
        resp = self._client(APP_ENV="dev").get("/")
        self.assertNotIn("strict-transport-security", resp.headers)


if __name__ == "__main__":
    unittest.main()
