"""
Transaction request models consumed by the request processor.
"""

from typing import Optional

from pydantic import BaseModel, Field


def _clean(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


class TransactionDetails(BaseModel):
    """The four classification fields of a transaction, as received."""

    transaction_type: Optional[str] = Field(None, description="Top-level business intent")
    order_type: Optional[str] = Field(None, description="LTL or PARCEL for ORDER")
    format: Optional[str] = Field(None, description="EDI, JSON or absent for text")
    response_type: Optional[str] = Field(None, description="Artifact selector")

    class Config:
        frozen = True

    def normalized(self) -> "TransactionDetails":
        """Return a copy with every field trimmed (None stays None)."""
        return TransactionDetails(
            transaction_type=_clean(self.transaction_type),
            order_type=_clean(self.order_type),
            format=_clean(self.format),
            response_type=_clean(self.response_type),
        )


class TransactionRequest(BaseModel):
    """A caller request: opaque uuid plus transaction details."""

    uuid: Optional[str] = Field(None, description="Caller-supplied opaque identifier")
    details: Optional[TransactionDetails] = Field(
        None, description="Classification fields"
    )

    class Config:
        frozen = True
