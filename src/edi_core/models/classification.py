"""
Classification domains for EDI transactions.

Every domain matches case-insensitively; the enum value is the canonical
upper-case spelling used in filenames and content keys.
"""

from enum import Enum
from typing import Dict, Iterable, Optional, Tuple


class _CaseInsensitiveEnum(str, Enum):
    @classmethod
    def parse(cls, value: Optional[str]):
        """Return the member matching ``value`` (trimmed, any case), or None."""
        if value is None:
            return None
        candidate = value.strip().upper()
        for member in cls:
            if member.value == candidate:
                return member
        return None

    @classmethod
    def listing(cls) -> str:
        return format_valid_values(cls)


class TransactionType(_CaseInsensitiveEnum):
    GETSCHEMA = "GETSCHEMA"
    ORDER = "ORDER"
    ASN = "ASN"
    ITEM = "ITEM"
    ERRORRESPONSE = "ERRORRESPONSE"
    ERRORTIMEOUT = "ERRORTIMEOUT"

    @property
    def is_error_simulation(self) -> bool:
        return self in (TransactionType.ERRORRESPONSE, TransactionType.ERRORTIMEOUT)


class OrderType(_CaseInsensitiveEnum):
    LTL = "LTL"
    PARCEL = "PARCEL"


class Format(_CaseInsensitiveEnum):
    EDI = "EDI"
    JSON = "JSON"


class ResponseType(_CaseInsensitiveEnum):
    ACK = "ACK"
    ASN = "ASN"
    ITEM = "ITEM"
    ORDER = "ORDER"
    SHIPCONFIRM = "SHIPCONFIRM"
    RECEIPT = "RECEIPT"


# Response types each business transaction accepts; error simulations accept anything.
ALLOWED_RESPONSE_TYPES: Dict[TransactionType, Tuple[ResponseType, ...]] = {
    TransactionType.GETSCHEMA: (
        ResponseType.ASN,
        ResponseType.ITEM,
        ResponseType.ORDER,
        ResponseType.SHIPCONFIRM,
        ResponseType.RECEIPT,
    ),
    TransactionType.ORDER: (ResponseType.ACK, ResponseType.SHIPCONFIRM),
    TransactionType.ASN: (ResponseType.ACK, ResponseType.RECEIPT),
    TransactionType.ITEM: (ResponseType.ACK,),
}


def format_valid_values(members: Iterable[Enum]) -> str:
    """Render members as ``[A, B, C]``."""
    return "[" + ", ".join(member.value for member in members) + "]"
