"""Sign-up, sign-in and sign-out endpoints plus the cookie-based get_current_user dependency."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from acquisitions.core.config import Settings, get_settings
from acquisitions.core.cookies import clear_cookie, get_cookie, set_cookie
from acquisitions.core.database import get_db
from acquisitions.core.security import (
    InvalidTokenError,
    TokenClaims,
    create_access_token,
    decode_access_token,
)
from acquisitions.schemas.auth import (
    AuthResponse,
    CurrentUser,
    CurrentUserResponse,
    MessageResponse,
    SignInRequest,
    SignUpRequest,
    UserOut,
)
from acquisitions.services.auth import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
    authenticate_user,
    create_user,
)

logger = logging.getLogger(__name__)
router = APIRouter()

GENERIC_SIGNIN_ERROR = "Invalid email or password"


def _issue_session_cookie(response: Response, user: UserOut, settings: Settings) -> None:
    token = create_access_token(
        TokenClaims(id=user.id, email=user.email, role=user.role), settings
    )
    set_cookie(
        response,
        settings.AUTH_COOKIE_NAME,
        token,
        settings.APP_ENV,
        max_age=settings.COOKIE_MAX_AGE_SECONDS,
    )


@router.post("/sign-up", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def sign_up(
    body: SignUpRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """Register a user, set the session cookie and return the user (without password)."""
    try:
        user = create_user(db, body.name, body.email, body.password, body.role)
    except UserAlreadyExistsError as e:
        logger.info("Sign-up rejected: email already registered", extra={"email": body.email})
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e

    _issue_session_cookie(response, user, settings)
    return AuthResponse(message="User registered successfully", user=user)


@router.post("/sign-in", response_model=AuthResponse)
def sign_in(
    body: SignInRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """
    Authenticate with email and password and set the session cookie.

    Unknown email and wrong password are both 401. Their messages differ unless
    AUTH_GENERIC_SIGNIN_ERRORS is enabled.
    """
    try:
        user = authenticate_user(db, body.email, body.password)
    except (UserNotFoundError, InvalidCredentialsError) as e:
        logger.info("Sign-in rejected: %s", e.message, extra={"email": body.email})
        detail = GENERIC_SIGNIN_ERROR if settings.AUTH_GENERIC_SIGNIN_ERRORS else e.message
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail) from e

    _issue_session_cookie(response, user, settings)
    return AuthResponse(message="User signed in successfully", user=user)


@router.post("/sign-out", response_model=MessageResponse)
def sign_out(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Clear the session cookie. Succeeds whether or not a session existed."""
    clear_cookie(response, settings.AUTH_COOKIE_NAME, settings.APP_ENV)
    return MessageResponse(message="User signed out successfully")


def get_current_user(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> CurrentUser:
    """Dependency: require a valid session cookie and return its claims. Raises 401 if missing or invalid."""
    token = get_cookie(request, settings.AUTH_COOKIE_NAME)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        claims = decode_access_token(token, settings)
    except InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e
    return CurrentUser(id=claims.id, email=claims.email, role=claims.role)


@router.get("/me", response_model=CurrentUserResponse)
def me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUserResponse:
    """Return the identity carried by the session cookie."""
    return CurrentUserResponse(user=current_user)
