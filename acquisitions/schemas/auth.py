"""Request/response schemas for auth endpoints."""

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator

from acquisitions.core.security import PASSWORD_MAX_BYTES

NAME_MIN_LEN = 1
NAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128

Role = Literal["user", "admin"]

TrimmedName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN),
]


def _check_password_bytes(v: str) -> str:
    # Multi-byte characters can push a 72-character password past bcrypt's byte limit.
    if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded")
    return v


class SignUpRequest(BaseModel):
    """Body for POST /sign-up."""

    name: TrimmedName = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )
    role: Role = Field(default="user", description="Role: 'user' or 'admin'")

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        return _check_password_bytes(v)


class SignInRequest(BaseModel):
    """Body for POST /sign-in. Only length limits here; a wrong password is a 401."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(
        ..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password"
    )

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        return _check_password_bytes(v)


class UserOut(BaseModel):
    """User projection safe to return to clients (no password hash)."""

    id: int
    name: str
    email: str
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Response for successful sign-up and sign-in."""

    message: str
    user: UserOut


class MessageResponse(BaseModel):
    message: str


class CurrentUser(BaseModel):
    """Authenticated identity taken from the session token claims."""

    id: int
    email: str
    role: str


class CurrentUserResponse(BaseModel):
    user: CurrentUser
