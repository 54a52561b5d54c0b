"""
Core configuration package.
"""

from edi_core.config.config import AppConfig, ContentConfig, config

__all__ = ["AppConfig", "ContentConfig", "config"]
