"""
Health check controller following Single Responsibility Principle.
"""

from fastapi import APIRouter, Request

from edi_api.config.settings import settings
from edi_api.models.responses import HealthCheckResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthCheckResponse,
    summary="Health check",
    description="Service health with content store status",
)
def health_check(request: Request):
    """Simple health check endpoint."""
    content_resolver = request.app.state.content_resolver
    return HealthCheckResponse(
        version=settings.api_version,
        services={
            "api": "healthy",
            "content_store": f"{len(content_resolver)} entries",
        },
    )
