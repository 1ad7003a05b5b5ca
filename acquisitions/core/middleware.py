"""HTTP middleware: access logging and baseline security headers."""

import logging
import time

from fastapi import FastAPI, Request

access_logger = logging.getLogger("acquisitions.access")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "X-DNS-Prefetch-Control": "off",
}
HSTS_HEADER = "max-age=15552000; includeSubDomains"


def register_middleware(app: FastAPI, app_env: str) -> None:
    """Install the access log and security header middleware on the app."""

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if app_env == "prod":
            response.headers.setdefault("Strict-Transport-Security", HSTS_HEADER)
        return response

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        client = request.client.host if request.client else "-"
        access_logger.info(
            '%s "%s %s" %s %.1fms "%s"',
            client,
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request.headers.get("user-agent", "-"),
        )
        return response
