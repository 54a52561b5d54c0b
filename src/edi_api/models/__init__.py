"""
API models module - organized by Single Responsibility Principle.
"""

# Request models - wire envelope binding
from edi_api.models.requests import EdiRequest, RequestDetails

# Response models - output serialization
from edi_api.models.responses import EdiResponse, HealthCheckResponse

__all__ = [
    # Requests
    "EdiRequest",
    "RequestDetails",
    # Responses
    "EdiResponse",
    "HealthCheckResponse",
]
