"""
Application service for EDI request processing.
Responsible for binding wire requests to the core processor and choosing HTTP statuses.
"""

from fastapi import status
from loguru import logger

from edi_api.models.requests import EdiRequest
from edi_api.models.responses import EdiResponse
from edi_core.processor import ProcessingOutcome, ProcessingState, RequestProcessor


class EdiApplicationService:
    """
    Application service orchestrating the EDI process use case.

    Responsibilities:
    - Convert the wire envelope into a core transaction request
    - Run it through the request processor
    - Map terminal states to HTTP status codes
    """

    def __init__(self, processor: RequestProcessor, legacy_status_codes: bool = False):
        self._processor = processor
        self._legacy_status_codes = legacy_status_codes

    @property
    def legacy_status_codes(self) -> bool:
        return self._legacy_status_codes

    def process(self, edi_request: EdiRequest) -> ProcessingOutcome:
        """Process an EDI request; malformed requests and failures raise."""
        logger.info(f"Received EDI request with UUID: {edi_request.uuid}")
        return self._processor.process(edi_request.to_transaction_request())

    def status_code_for(self, state: ProcessingState) -> int:
        if state is ProcessingState.SUPPRESSED:
            return status.HTTP_204_NO_CONTENT
        if state is ProcessingState.REJECTED and not self._legacy_status_codes:
            return status.HTTP_400_BAD_REQUEST
        return status.HTTP_200_OK

    @staticmethod
    def to_response(outcome: ProcessingOutcome) -> EdiResponse:
        return EdiResponse(response=list(outcome.artifacts or ()))
