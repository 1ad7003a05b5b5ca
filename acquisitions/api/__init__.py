"""API routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from acquisitions.api import auth
from acquisitions.schemas.health import ApiInfoResponse

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])


@router.get("", response_model=ApiInfoResponse, tags=["health"])
def get_api_info() -> ApiInfoResponse:
    """API root; confirms the service is reachable under the API prefix."""
    return ApiInfoResponse(message="Acquisitions API is running")
