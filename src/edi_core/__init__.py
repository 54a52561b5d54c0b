"""
Core package for the EDI mock response service.
Contains transaction classification, validation and response composition.
"""

import edi_core.logging  # noqa: F401  Ensures logging is configured
from edi_core.config import config
from edi_core.processor import (
    ProcessingOutcome,
    ProcessingState,
    RequestProcessor,
    create_request_processor,
)

__all__ = [
    "config",
    "ProcessingOutcome",
    "ProcessingState",
    "RequestProcessor",
    "create_request_processor",
]
