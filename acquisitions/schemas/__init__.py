"""Pydantic request/response schemas."""

from acquisitions.schemas.auth import (
    AuthResponse,
    CurrentUser,
    CurrentUserResponse,
    MessageResponse,
    SignInRequest,
    SignUpRequest,
    UserOut,
)
from acquisitions.schemas.health import ApiInfoResponse, HealthResponse

__all__ = [
    "ApiInfoResponse",
    "AuthResponse",
    "CurrentUser",
    "CurrentUserResponse",
    "HealthResponse",
    "MessageResponse",
    "SignInRequest",
    "SignUpRequest",
    "UserOut",
]
