"""
Error response builders for the EDI boundary.
"""

from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse

from edi_api.models.responses import EdiResponse
from edi_core.exceptions import ProcessingFailure
from edi_core.models.artifact import ResponseArtifact
from edi_core.services.composition.artifacts import (
    error_artifact,
    malformed_request_artifact,
)


def artifact_response(artifact: ResponseArtifact, status_code: int) -> JSONResponse:
    """Wrap a single artifact in the standard ``{"response": [...]}`` body."""
    return JSONResponse(
        status_code=status_code,
        content=EdiResponse(response=[artifact]).to_payload(),
    )


def handle_malformed_request(message: Optional[str]) -> JSONResponse:
    """Malformed envelope - caller fault, no classification available."""
    return artifact_response(
        malformed_request_artifact(message), status.HTTP_400_BAD_REQUEST
    )


def handle_processing_failure(
    failure: ProcessingFailure, legacy_status_codes: bool = False
) -> JSONResponse:
    """Composition fault - named after the original transaction fields."""
    artifact = error_artifact(
        failure.transaction_type,
        failure.response_type,
        failure.format,
        failure.uuid,
    )
    status_code = (
        status.HTTP_200_OK
        if legacy_status_codes
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return artifact_response(artifact, status_code)


def handle_unexpected_error() -> JSONResponse:
    """Any other fault, downgraded to a processing failure without classification."""
    return artifact_response(
        error_artifact(None, None, None, None), status.HTTP_500_INTERNAL_SERVER_ERROR
    )
