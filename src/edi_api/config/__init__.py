"""
API configuration package.
Contains settings and configuration management.
"""

from edi_api.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
