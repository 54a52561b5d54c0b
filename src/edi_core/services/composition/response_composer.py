"""
Response composer - maps a validated classification to response artifacts.
"""

from typing import Callable, Dict, Optional, Tuple

from loguru import logger

from edi_core.models.artifact import ResponseArtifact
from edi_core.models.classification import ResponseType, TransactionType
from edi_core.models.transaction import TransactionDetails
from edi_core.services.composition.artifacts import error_artifact, success_artifact
from edi_core.services.composition.naming import (
    build_filename,
    content_keys,
    determine_file_extension,
    determine_mime_type,
    segment,
)
from edi_core.services.content.content_resolver import ContentResolver

ERROR_CONTENT_KEY = "ERROR"

Artifacts = Tuple[ResponseArtifact, ...]
Handler = Callable[[TransactionDetails, str], Artifacts]


class ResponseComposer:
    """
    Executes the classification decision tree.

    | transaction   | response type                          | artifacts              |
    |---------------|----------------------------------------|------------------------|
    | GETSCHEMA     | ASN, ITEM, ORDER, SHIPCONFIRM, RECEIPT | schema                 |
    | ORDER         | ACK                                    | ACK                    |
    | ORDER         | SHIPCONFIRM                            | ACK, SHIPCONFIRM       |
    | ASN           | ACK                                    | ACK                    |
    | ASN           | RECEIPT                                | ACK, RECEIPT           |
    | ITEM          | any allowed                            | ACK                    |
    | ERRORRESPONSE | any                                    | error (success=false)  |

    Acknowledgments always precede the secondary artifact.
    """

    def __init__(
        self,
        content_resolver: ContentResolver,
        error_content: Optional[str] = None,
    ):
        self._content = content_resolver
        self._error_content = error_content
        self._handlers: Dict[TransactionType, Handler] = {
            TransactionType.GETSCHEMA: self._compose_schema,
            TransactionType.ORDER: self._compose_order,
            TransactionType.ASN: self._compose_asn,
            TransactionType.ITEM: self._compose_item,
            TransactionType.ERRORRESPONSE: self._compose_error,
            TransactionType.ERRORTIMEOUT: self._compose_error,
        }

    def compose(self, details: TransactionDetails, uuid: str) -> Artifacts:
        """Build the ordered artifacts for a validated transaction."""
        transaction = TransactionType.parse(details.transaction_type)
        handler = self._handlers.get(transaction, self._compose_error)
        artifacts = handler(details, uuid)
        logger.debug(
            f"Composed {len(artifacts)} artifact(s): "
            f"{[artifact.filename for artifact in artifacts]}"
        )
        return artifacts

    def _compose_schema(self, details: TransactionDetails, uuid: str) -> Artifacts:
        schema = TransactionType.GETSCHEMA.value
        response = segment(details.response_type)
        order = segment(details.order_type)
        keys = content_keys(details.format, schema, response, order)
        if order:
            keys += content_keys(details.format, schema, response)
        filename = build_filename(
            uuid, determine_file_extension(details.format), schema, response, order
        )
        return (self._success(details, filename, keys),)

    def _compose_order(self, details: TransactionDetails, uuid: str) -> Artifacts:
        order = segment(details.order_type)
        if ResponseType.parse(details.response_type) is ResponseType.SHIPCONFIRM:
            return (
                self._order_artifact(
                    details, uuid, ResponseType.ACK, order, "SHIPCONFIRM", "ACK"
                ),
                self._order_artifact(
                    details, uuid, ResponseType.SHIPCONFIRM, order, "SHIPCONFIRM"
                ),
            )
        return (
            self._order_artifact(details, uuid, ResponseType.ACK, order, "ACK"),
        )

    def _order_artifact(
        self,
        details: TransactionDetails,
        uuid: str,
        response: ResponseType,
        order: str,
        *key_segments: str,
    ) -> ResponseArtifact:
        filename = build_filename(
            uuid,
            determine_file_extension(details.format),
            TransactionType.ORDER.value,
            order,
            response.value,
        )
        keys = content_keys(
            details.format, TransactionType.ORDER.value, order, *key_segments
        )
        return self._success(details, filename, keys)

    def _compose_asn(self, details: TransactionDetails, uuid: str) -> Artifacts:
        asn = TransactionType.ASN
        if ResponseType.parse(details.response_type) is ResponseType.RECEIPT:
            return (
                self._simple_artifact(
                    details, uuid, asn, ResponseType.ACK, "RECEIPT", "ACK"
                ),
                self._simple_artifact(
                    details, uuid, asn, ResponseType.RECEIPT, "RECEIPT"
                ),
            )
        return (self._simple_artifact(details, uuid, asn, ResponseType.ACK, "ACK"),)

    def _compose_item(self, details: TransactionDetails, uuid: str) -> Artifacts:
        return (
            self._simple_artifact(
                details, uuid, TransactionType.ITEM, ResponseType.ACK, "ACK"
            ),
        )

    def _simple_artifact(
        self,
        details: TransactionDetails,
        uuid: str,
        transaction: TransactionType,
        response: ResponseType,
        *key_segments: str,
    ) -> ResponseArtifact:
        filename = build_filename(
            uuid,
            determine_file_extension(details.format),
            transaction.value,
            response.value,
        )
        keys = content_keys(details.format, transaction.value, *key_segments)
        return self._success(details, filename, keys)

    def _compose_error(self, details: TransactionDetails, uuid: str) -> Artifacts:
        content = self._content.get(
            ERROR_CONTENT_KEY, self._error_content or self._content.default_content
        )
        return (
            error_artifact(
                details.transaction_type,
                details.response_type,
                details.format,
                uuid,
                content=content,
            ),
        )

    def _success(
        self, details: TransactionDetails, filename: str, keys: Tuple[str, ...]
    ) -> ResponseArtifact:
        content = self._content.resolve(*keys)
        return success_artifact(filename, content, determine_mime_type(details.format))
