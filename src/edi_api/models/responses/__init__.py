"""
Response models module - organized by responsibility.
"""

from edi_api.models.responses.edi_response import EdiResponse
from edi_api.models.responses.system_responses import HealthCheckResponse

__all__ = [
    "EdiResponse",
    "HealthCheckResponse",
]
