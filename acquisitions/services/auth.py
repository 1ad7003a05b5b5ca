"""Auth use cases: create a user and authenticate credentials against the users table."""

import logging

from sqlalchemy.orm import Session

from acquisitions.core.security import hash_password, verify_password
from acquisitions.repositories.users import (
    DuplicateEmailError,
    find_user_by_email,
    insert_user,
)
from acquisitions.schemas.auth import UserOut

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Base class for auth failures the API layer maps to HTTP statuses."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UserAlreadyExistsError(AuthError):
    """Raised when signing up with an email that is already registered."""

    def __init__(self, message: str = "User with this email already exists") -> None:
        super().__init__(message)


class UserNotFoundError(AuthError):
    """Raised when no user has the given email."""

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when the password does not match the stored hash."""

    def __init__(self, message: str = "Invalid password") -> None:
        super().__init__(message)


def create_user(
    db: Session,
    name: str,
    email: str,
    password: str,
    role: str | None = "user",
) -> UserOut:
    """
    Register a new user and return its projection (no password hash).

    Raises UserAlreadyExistsError if the email is taken, including when a
    concurrent sign-up wins the race at the unique constraint.
    """
    if find_user_by_email(db, email) is not None:
        raise UserAlreadyExistsError()

    try:
        user = insert_user(
            db,
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=role or "user",
        )
    except DuplicateEmailError as e:
        raise UserAlreadyExistsError() from e

    logger.info(
        "User created: email=%s role=%s",
        user.email,
        user.role,
        extra={"email": user.email, "role": user.role},
    )
    return UserOut.model_validate(user)


def authenticate_user(db: Session, email: str, password: str) -> UserOut:
    """Check credentials; return the user projection or raise UserNotFoundError / InvalidCredentialsError."""
    user = find_user_by_email(db, email)
    if user is None:
        raise UserNotFoundError()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()

    logger.info(
        "User authenticated: email=%s role=%s",
        user.email,
        user.role,
        extra={"email": user.email, "role": user.role},
    )
    return UserOut.model_validate(user)
