"""
Factories for the artifact shapes returned to callers.
"""

from typing import Optional

from edi_core.models.artifact import ResponseArtifact
from edi_core.services.composition.naming import (
    MIME_TYPE_TEXT,
    build_error_filename,
    build_validation_error_filename,
)

SUCCESS_MESSAGE = "File processed successfully"
ERROR_MESSAGE = "unable to process request"
INVALID_VALUE_MESSAGE = "Invalid value provided"


def success_artifact(filename: str, content: str, mime_type: str) -> ResponseArtifact:
    return ResponseArtifact(
        success=True,
        filename=filename,
        content=content,
        mime_type=mime_type,
        message=SUCCESS_MESSAGE,
    )


def error_artifact(
    transaction_type: Optional[str],
    response_type: Optional[str],
    format: Optional[str],
    uuid: Optional[str],
    content: str = ERROR_MESSAGE,
    message: str = ERROR_MESSAGE,
) -> ResponseArtifact:
    """Failure artifact named ``<TT>_<RT-or-UNKNOWN>_ERROR_<uuid>.<ext>``."""
    return ResponseArtifact(
        success=False,
        filename=build_error_filename(transaction_type, response_type, uuid, format),
        content=content,
        mime_type=MIME_TYPE_TEXT,
        message=message,
    )


def validation_error_artifact(
    transaction_type: Optional[str],
    response_type: Optional[str],
    format: Optional[str],
    uuid: str,
    error_message: str,
) -> ResponseArtifact:
    """Rejection artifact carrying the exact validation message."""
    return ResponseArtifact(
        success=False,
        filename=build_validation_error_filename(
            transaction_type, response_type, uuid, format
        ),
        content=error_message,
        mime_type=MIME_TYPE_TEXT,
        message=f"{INVALID_VALUE_MESSAGE}: {error_message}",
    )


def malformed_request_artifact(message: Optional[str] = None) -> ResponseArtifact:
    """Artifact for requests that could not be classified at all."""
    return error_artifact(None, None, None, None, message=message or ERROR_MESSAGE)
