"""
Core domain models.
"""

from edi_core.models.artifact import ResponseArtifact
from edi_core.models.classification import (
    ALLOWED_RESPONSE_TYPES,
    Format,
    OrderType,
    ResponseType,
    TransactionType,
)
from edi_core.models.transaction import TransactionDetails, TransactionRequest

__all__ = [
    "ALLOWED_RESPONSE_TYPES",
    "Format",
    "OrderType",
    "ResponseArtifact",
    "ResponseType",
    "TransactionDetails",
    "TransactionRequest",
    "TransactionType",
]
