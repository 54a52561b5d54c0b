"""
Exception module for the EDI mock response service.
Contains custom exceptions for different error types.
"""

from edi_core.exceptions.base_exceptions import (
    BaseEdiException,
    BusinessException,
    ExceptionCode,
    SystemException,
)
from edi_core.exceptions.request_exceptions import (
    MalformedRequestError,
    ProcessingFailure,
)

__all__ = [
    "BaseEdiException",
    "BusinessException",
    "SystemException",
    "ExceptionCode",
    "MalformedRequestError",
    "ProcessingFailure",
]
