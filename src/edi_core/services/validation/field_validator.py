"""
Field validation for the four classification fields of a transaction.
"""

from dataclasses import dataclass
from typing import Optional

from edi_core.models.classification import (
    ALLOWED_RESPONSE_TYPES,
    Format,
    OrderType,
    ResponseType,
    TransactionType,
    format_valid_values,
)


@dataclass(frozen=True)
class ValidationOutcome:
    """Either valid, or invalid with a single descriptive message."""

    is_valid: bool
    message: Optional[str] = None

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, message: str) -> "ValidationOutcome":
        return cls(is_valid=False, message=message)


def _blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


class FieldValidator:
    """
    Validates transaction type, format, response type and order type.

    Checks run in a fixed order and stop at the first failure, so a request
    with several bad fields always reports the same one:

    1. transaction type is a known value
    2. format, when given, is a known value
    3. error simulations (ERRORRESPONSE, ERRORTIMEOUT) stop here
    4. response type is present
    5. response type is allowed for the transaction type
    6. ORDER needs a known order type
    """

    def validate(
        self,
        transaction_type: Optional[str],
        order_type: Optional[str],
        format: Optional[str],
        response_type: Optional[str],
    ) -> ValidationOutcome:
        transaction = TransactionType.parse(transaction_type)
        if _blank(transaction_type) or transaction is None:
            return ValidationOutcome.invalid(
                f"Invalid TRANSACTION TYPE: '{transaction_type}'. "
                f"Valid values are: {TransactionType.listing()}"
            )

        if not _blank(format) and Format.parse(format) is None:
            return ValidationOutcome.invalid(
                f"Invalid FORMAT: '{format}'. Valid values are: {Format.listing()}"
            )

        if transaction.is_error_simulation:
            return ValidationOutcome.valid()

        if _blank(response_type):
            return ValidationOutcome.invalid("RESPONSE TYPE is required.")

        allowed = ALLOWED_RESPONSE_TYPES[transaction]
        if ResponseType.parse(response_type) not in allowed:
            return ValidationOutcome.invalid(
                f"Invalid RESPONSE TYPE: '{response_type}' for TRANSACTION TYPE "
                f"'{transaction.value}'. Valid values are: {format_valid_values(allowed)}"
            )

        if transaction is TransactionType.ORDER:
            if _blank(order_type):
                return ValidationOutcome.invalid(
                    "ORDER TYPE is required when TRANSACTION TYPE is 'ORDER'. "
                    f"Valid values are: {OrderType.listing()}"
                )
            if OrderType.parse(order_type) is None:
                return ValidationOutcome.invalid(
                    f"Invalid ORDER TYPE: '{order_type}'. "
                    f"Valid values are: {OrderType.listing()}"
                )

        return ValidationOutcome.valid()
