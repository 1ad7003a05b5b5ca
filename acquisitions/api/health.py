"""Health check endpoint with uptime and database connectivity."""

import time
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from acquisitions.core.config import Settings, get_settings
from acquisitions.core.database import check_db_connected, get_db
from acquisitions.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def get_health(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """
    Return service health status, uptime and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="OK",
        timestamp=datetime.now(UTC).isoformat(),
        uptime=round(time.monotonic() - request.app.state.started_at, 3),
        environment=settings.APP_ENV,
        database=db_status,
    )
