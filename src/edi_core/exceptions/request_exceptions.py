"""
Exceptions raised while processing an EDI request.
"""

from typing import Optional

from edi_core.exceptions.base_exceptions import (
    BusinessException,
    ExceptionCode,
    SystemException,
)


class MalformedRequestError(BusinessException):
    """Raised when a request misses a structural field (uuid, details, transaction type)."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(
            message=message,
            code=ExceptionCode.MALFORMED_REQUEST,
            details={"field": field} if field else {},
        )


class ProcessingFailure(SystemException):
    """
    Raised when composing the response for a validated request fails.

    Keeps the request's classification fields so the boundary can still
    name the error artifact after the original transaction.
    """

    def __init__(
        self,
        message: str,
        transaction_type: Optional[str] = None,
        response_type: Optional[str] = None,
        format: Optional[str] = None,
        uuid: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.transaction_type = transaction_type
        self.response_type = response_type
        self.format = format
        self.uuid = uuid
        super().__init__(
            message=message,
            code=ExceptionCode.INTERNAL_ERROR,
            details={
                "transaction_type": transaction_type,
                "response_type": response_type,
                "format": format,
                "uuid": uuid,
            },
            original_exception=original_exception,
        )
