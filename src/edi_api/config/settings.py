"""
Configuration settings management.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

load_dotenv()


@dataclass
class Settings:
    """Application settings configuration."""

    # API configuration
    api_title: str
    api_version: str
    api_description: str

    # Environment
    environment: str
    debug: bool

    # Security
    allowed_hosts: str
    cors_allowed_origins: str

    # Answer validation rejections and processing failures with 200
    legacy_status_codes: bool

    @classmethod
    def load_from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            api_title="EDI Processor API",
            api_version="1.0.0",
            api_description="Mock EDI document responses for ORDER, ASN, ITEM and schema requests",
            environment=os.getenv("ENVIRONMENT", "development"),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            allowed_hosts=os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1"),
            cors_allowed_origins=os.getenv(
                "CORS_ALLOWED_ORIGINS", "http://localhost:4200"
            ),
            legacy_status_codes=os.getenv("LEGACY_STATUS_CODES", "false").lower()
            == "true",
        )

    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    def get_allowed_hosts(self) -> list[str]:
        """Get allowed hosts as a list."""
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]

    def get_cors_origins(self) -> list[str]:
        """Get CORS origins as a list."""
        return [
            origin.strip()
            for origin in self.cors_allowed_origins.split(",")
            if origin.strip()
        ]


# Global settings instance
settings = Settings.load_from_env()
logger.info(f"Settings loaded for environment: {settings.environment}")
