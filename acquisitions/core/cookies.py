"""Session cookie options and helpers for setting, clearing and reading cookies."""

from typing import Any

from fastapi import Request, Response

from acquisitions.core.config import DEFAULT_COOKIE_MAX_AGE_SECONDS


def cookie_options(app_env: str, max_age: int = DEFAULT_COOKIE_MAX_AGE_SECONDS) -> dict[str, Any]:
    """Base cookie attributes: HttpOnly, SameSite=Strict, Secure only in production."""
    return {
        "httponly": True,
        "secure": app_env == "prod",
        "samesite": "strict",
        "max_age": max_age,
        "path": "/",
    }


def set_cookie(
    response: Response, name: str, value: str, app_env: str, **overrides: Any
) -> None:
    """Attach a cookie to the response, with overrides merged over the base options."""
    options = {**cookie_options(app_env), **overrides}
    response.set_cookie(key=name, value=value, **options)


def clear_cookie(response: Response, name: str, app_env: str, **overrides: Any) -> None:
    """Tell the client to drop the cookie now, using the same attributes it was set with."""
    options = {**cookie_options(app_env), **overrides}
    # delete_cookie always expires immediately; it takes no max_age.
    options.pop("max_age", None)
    response.delete_cookie(key=name, **options)


def get_cookie(request: Request, name: str) -> str | None:
    return request.cookies.get(name)
