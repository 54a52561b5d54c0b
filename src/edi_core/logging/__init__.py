"""
Logging helpers for the EDI core package.
"""

from edi_core.logging.setup import configure_logging, request_context

configure_logging()

__all__ = [
    "configure_logging",
    "request_context",
]
