"""
Request models module - organized by responsibility.
"""

from edi_api.models.requests.edi_request import EdiRequest, RequestDetails

__all__ = [
    "EdiRequest",
    "RequestDetails",
]
