import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv(override=True)

PACKAGED_CONTENT_FILE = (
    Path(__file__).resolve().parent.parent / "resources" / "response_content.json"
)


class ContentConfig(BaseModel):
    # JSON document of dotted content keys to artifact bodies
    content_file: str = os.getenv("CONTENT_FILE", str(PACKAGED_CONTENT_FILE))
    default_content: str = os.getenv("DEFAULT_CONTENT", "Default response content")
    error_content: str = os.getenv("ERROR_CONTENT", "Unable to process request")


class AppConfig(BaseModel):
    content: ContentConfig = ContentConfig()
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


config = AppConfig()
