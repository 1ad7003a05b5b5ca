"""Password hashing and JWT creation/verification for authentication."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from pydantic import BaseModel, ValidationError

from acquisitions.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# bcrypt only looks at the first 72 bytes; longer passwords are rejected, not truncated.
PASSWORD_MAX_BYTES = 72

# Used when JWT_SECRET is not configured. Unsafe outside local development.
INSECURE_DEFAULT_JWT_SECRET = "your-secret-key-please-change-in-production"


class InvalidTokenError(Exception):
    """Raised for any token that cannot be trusted (bad signature, malformed, expired)."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        self.message = message
        super().__init__(message)


class TokenClaims(BaseModel):
    """Identity claims carried in the session token."""

    id: int
    email: str
    role: str


def hash_password(plain_password: str) -> str:
    """
    Hash a plain-text password for storage. Do not store plain passwords.
    Raises ValueError for passwords over bcrypt's 72-byte limit instead of truncating them.
    """
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded")
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Over-long passwords never match."""
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > PASSWORD_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def is_insecure_jwt_secret(settings: Settings) -> bool:
    return settings.JWT_SECRET is None


def resolve_jwt_secret(settings: Settings) -> str:
    """Return the configured signing secret, falling back to the insecure placeholder."""
    if settings.JWT_SECRET is None:
        logger.warning(
            "JWT_SECRET is not set; signing tokens with the insecure default secret. "
            "Do not run like this in production."
        )
        return INSECURE_DEFAULT_JWT_SECRET
    return settings.JWT_SECRET.get_secret_value()


def create_access_token(claims: TokenClaims, settings: Settings | None = None) -> str:
    """Create a JWT with id, email, role, iat and exp (JWT_EXPIRE_MINUTES from now)."""
    settings = settings or get_settings()
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        **claims.model_dump(),
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(
        payload,
        resolve_jwt_secret(settings),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: Settings | None = None) -> TokenClaims:
    """
    Decode and validate a JWT; return its identity claims.
    Raises InvalidTokenError on any failure, without saying which check failed.
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(
            token,
            resolve_jwt_secret(settings),
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "iat"]},
        )
        return TokenClaims.model_validate(payload)
    except (jwt.PyJWTError, ValidationError) as e:
        raise InvalidTokenError() from e
