"""
HTTP controllers.
"""

from edi_api.controllers.edi_controller import router as edi_router
from edi_api.controllers.health_controller import router as health_router

__all__ = ["edi_router", "health_router"]
