"""
EDI controller handling HTTP requests/responses only.
Following Single Responsibility Principle.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger

from edi_api.application import EdiApplicationService
from edi_api.models.requests import EdiRequest
from edi_api.models.responses import EdiResponse

router = APIRouter(
    prefix="/api/v1/edi",
    tags=["edi"],
)

HEALTH_MESSAGE = "EDI Processor Service is running"


def get_edi_service(request: Request) -> EdiApplicationService:
    """Resolve the application service built at startup."""
    return request.app.state.edi_service


@router.post(
    "/process",
    response_model=EdiResponse,
    status_code=status.HTTP_200_OK,
    summary="Process EDI request",
    description="Classify the request and return the mock document artifacts it calls for. ERRORTIMEOUT requests receive no body.",
    responses={
        200: {"description": "Artifacts composed", "model": EdiResponse},
        204: {"description": "Response suppressed (ERRORTIMEOUT)"},
        400: {
            "description": "Malformed request or field validation error",
            "model": EdiResponse,
        },
        500: {
            "description": "Internal error while composing the response",
            "model": EdiResponse,
        },
    },
)
def process_edi_request(
    edi_request: EdiRequest,
    service: EdiApplicationService = Depends(get_edi_service),
):
    """Process an EDI request and return the composed artifacts."""
    outcome = service.process(edi_request)
    status_code = service.status_code_for(outcome.state)

    if not outcome.has_body:
        return Response(status_code=status_code)

    logger.info(
        f"Processed EDI request for UUID: {edi_request.uuid} ({outcome.state.value})"
    )
    return JSONResponse(
        status_code=status_code,
        content=service.to_response(outcome).to_payload(),
    )


@router.get(
    "/health",
    response_class=PlainTextResponse,
    summary="EDI processor liveness",
)
def edi_health():
    """Fixed liveness string."""
    return HEALTH_MESSAGE
