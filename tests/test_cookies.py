"""Unit tests for acquisitions.core.cookies: session cookie attributes and helpers."""

import unittest
from unittest.mock import MagicMock

from fastapi import Response

from acquisitions.core.config import DEFAULT_COOKIE_MAX_AGE_SECONDS
from acquisitions.core.cookies import (
    clear_cookie,
    cookie_options,
    get_cookie,
    set_cookie,
)
from helpers import make_settings


class TestCookieOptions(unittest.TestCase):
    """cookie_options: HttpOnly and SameSite=Strict always, Secure only in prod."""

    def test_dev_is_not_secure(self) -> None:
        opts = cookie_options("dev")
        self.assertTrue(opts["httponly"])
        self.assertFalse(opts["secure"])
        self.assertEqual(opts["samesite"], "strict")
        self.assertEqual(opts["max_age"], 15 * 60)

    def test_prod_is_secure(self) -> None:
        self.assertTrue(cookie_options("prod")["secure"])

    def test_default_max_age_matches_settings(self) -> None:
        self.assertEqual(cookie_options("dev")["max_age"], make_settings().COOKIE_MAX_AGE_SECONDS)


class TestSetCookie(unittest.TestCase):
    """set_cookie writes a Set-Cookie header with the merged options."""

    def test_header_attributes(self) -> None:
        response = Response()
        set_cookie(response, "token", "abc", "prod")
        header = response.headers["set-cookie"].lower()
        self.assertTrue(header.startswith("token=abc"))
        self.assertIn("httponly", header)
        self.assertIn("secure", header)
        self.assertIn("samesite=strict", header)
        self.assertIn(f"max-age={DEFAULT_COOKIE_MAX_AGE_SECONDS}", header)

    def test_overrides_win(self) -> None:
        response = Response()
        set_cookie(response, "token", "abc", "dev", max_age=60)
        header = response.headers["set-cookie"].lower()
        self.assertIn("max-age=60", header)
        self.assertNotIn("secure", header)


class TestClearCookie(unittest.TestCase):
    """clear_cookie expires the cookie immediately with the same attributes."""

    def test_expires_immediately(self) -> None:
        response = Response()
        clear_cookie(response, "token", "prod")
        header = response.headers["set-cookie"].lower()
        self.assertTrue(header.startswith("token="))
        self.assertIn("max-age=0", header)
        self.assertIn("httponly", header)
        self.assertIn("samesite=strict", header)


class TestGetCookie(unittest.TestCase):
    def test_reads_present_and_absent(self) -> None:
        request = MagicMock()
        request.cookies = {"token": "abc"}
        self.assertEqual(get_cookie(request, "token"), "abc")
        self.assertIsNone(get_cookie(request, "other"))


if __name__ == "__main__":
    unittest.main()
