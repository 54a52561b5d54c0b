"""
Application layer - use case orchestration.
"""

from edi_api.application.edi_application_service import EdiApplicationService

__all__ = ["EdiApplicationService"]
