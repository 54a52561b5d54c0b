"""
Request processor - validate, suppress-check and compose EDI mock responses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from loguru import logger

from edi_core.config import config
from edi_core.exceptions import MalformedRequestError, ProcessingFailure
from edi_core.models.artifact import ResponseArtifact
from edi_core.models.classification import TransactionType
from edi_core.models.transaction import TransactionDetails, TransactionRequest
from edi_core.observability import record_artifacts, record_transaction
from edi_core.services.composition.artifacts import validation_error_artifact
from edi_core.services.composition.response_composer import ResponseComposer
from edi_core.services.content.content_resolver import ContentResolver
from edi_core.services.validation.field_validator import FieldValidator


class ProcessingState(str, Enum):
    """
    Lifecycle of a single request.

    RECEIVED, VALIDATING and COMPOSING are transient and only appear in debug
    logs; the other four are terminal and are what ``process`` returns.
    """

    RECEIVED = "received"
    VALIDATING = "validating"
    COMPOSING = "composing"
    REJECTED = "rejected"
    SUPPRESSED = "suppressed"
    COMPOSED = "composed"
    FAILED = "failed"


@dataclass(frozen=True)
class ProcessingOutcome:
    """Terminal state of a request and the artifacts to return, if any."""

    state: ProcessingState
    artifacts: Optional[Tuple[ResponseArtifact, ...]] = None

    @property
    def has_body(self) -> bool:
        return self.artifacts is not None


class RequestProcessor:
    """Orchestrates one request from receipt to a terminal state."""

    def __init__(self, validator: FieldValidator, composer: ResponseComposer):
        self._validator = validator
        self._composer = composer

    @staticmethod
    def check_structure(request: Optional[TransactionRequest]) -> None:
        """Raise MalformedRequestError when a structural field is missing."""
        if request is None:
            raise MalformedRequestError("Request cannot be null")
        if request.uuid is None or not request.uuid.strip():
            raise MalformedRequestError("UUID is required", field="UUID")
        if request.details is None:
            raise MalformedRequestError(
                "Request details cannot be null", field="Request"
            )
        transaction_type = request.details.transaction_type
        if transaction_type is None or not transaction_type.strip():
            raise MalformedRequestError(
                "Transaction Type is required", field="TRANSACTION TYPE"
            )

    @staticmethod
    def should_suppress(details: TransactionDetails) -> bool:
        """ERRORTIMEOUT requests get no response body at all."""
        transaction = TransactionType.parse(details.transaction_type)
        return transaction is TransactionType.ERRORTIMEOUT

    @staticmethod
    def _transition(uuid: Optional[str], state: ProcessingState) -> None:
        logger.debug(f"Request {uuid} -> {state.value}")

    def _finish(
        self, uuid: str, details: TransactionDetails, state: ProcessingState
    ) -> None:
        self._transition(uuid, state)
        record_transaction(details.transaction_type, state.value)

    def process(self, request: TransactionRequest) -> ProcessingOutcome:
        """
        Run a request through the state machine.

        Every transition is logged at debug level; the returned outcome always
        holds a terminal state.

        Raises:
            MalformedRequestError: structural precondition violated
            ProcessingFailure: unexpected fault while composing a valid request
        """
        self._transition(getattr(request, "uuid", None), ProcessingState.RECEIVED)
        self.check_structure(request)

        uuid = request.uuid
        details = request.details.normalized()
        logger.info(
            f"Processing request - UUID: {uuid}, TransactionType: {details.transaction_type}, "
            f"OrderType: {details.order_type}, Format: {details.format}, "
            f"ResponseType: {details.response_type}"
        )

        if self.should_suppress(details):
            logger.info(f"ERRORTIMEOUT - suppressing response for UUID: {uuid}")
            self._finish(uuid, details, ProcessingState.SUPPRESSED)
            return ProcessingOutcome(ProcessingState.SUPPRESSED)

        self._transition(uuid, ProcessingState.VALIDATING)
        outcome = self._validator.validate(
            details.transaction_type,
            details.order_type,
            details.format,
            details.response_type,
        )
        if not outcome.is_valid:
            logger.warning(f"Validation failed for UUID {uuid}: {outcome.message}")
            self._finish(uuid, details, ProcessingState.REJECTED)
            artifact = validation_error_artifact(
                details.transaction_type,
                details.response_type,
                details.format,
                uuid,
                outcome.message,
            )
            return ProcessingOutcome(ProcessingState.REJECTED, (artifact,))

        self._transition(uuid, ProcessingState.COMPOSING)
        try:
            artifacts = self._composer.compose(details, uuid)
        except Exception as e:
            logger.exception(f"Error processing request {uuid}: {e}")
            self._finish(uuid, details, ProcessingState.FAILED)
            raise ProcessingFailure(
                str(e),
                transaction_type=details.transaction_type,
                response_type=details.response_type,
                format=details.format,
                uuid=uuid,
                original_exception=e,
            ) from e

        self._finish(uuid, details, ProcessingState.COMPOSED)
        record_artifacts(details.transaction_type, artifacts)
        logger.info(f"Composed {len(artifacts)} artifact(s) for UUID: {uuid}")
        return ProcessingOutcome(ProcessingState.COMPOSED, artifacts)


def create_request_processor(
    content_resolver: Optional[ContentResolver] = None,
) -> RequestProcessor:
    """Build the processor stack; the content store is loaded from config if absent."""
    content_config = config.content
    if content_resolver is None:
        content_resolver = ContentResolver.from_file(
            content_config.content_file, content_config.default_content
        )
    composer = ResponseComposer(
        content_resolver, error_content=content_config.error_content
    )
    return RequestProcessor(FieldValidator(), composer)
