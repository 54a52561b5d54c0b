"""
Base exception classes for the EDI mock response service.
"""

from enum import Enum
from typing import Optional


class ExceptionCode(Enum):
    """Enumeration of all possible exception codes."""

    # Business rule errors (BIZ_XXXX)
    MALFORMED_REQUEST = "BIZ_2001"

    # System errors (SYS_XXXX)
    INTERNAL_ERROR = "SYS_4004"


class BaseEdiException(Exception):
    """Base exception for the EDI mock response service."""

    def __init__(
        self,
        message: str,
        code: ExceptionCode,
        details: Optional[dict] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code.value
        self.details = details or {}
        self.original_exception = original_exception

    def __str__(self):
        return f"[{self.code}] {self.message}"


class BusinessException(BaseEdiException):
    """Base exception for caller-side faults (bad requests)."""

    pass


class SystemException(BaseEdiException):
    """Base exception for system-level errors."""

    pass
