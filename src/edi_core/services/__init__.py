"""
Core services package for the EDI mock response service.
Contains content lookup, field validation and response composition.
"""

from edi_core.services.composition import ResponseComposer
from edi_core.services.content import ContentResolver
from edi_core.services.validation import FieldValidator, ValidationOutcome

__all__ = [
    "ContentResolver",
    "FieldValidator",
    "ResponseComposer",
    "ValidationOutcome",
]
