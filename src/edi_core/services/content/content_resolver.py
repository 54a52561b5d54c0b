"""
Content resolver - read-only lookup of artifact bodies by dotted key.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from loguru import logger

DEFAULT_KEY = "DEFAULT"
DEFAULT_CONTENT = "Default response content"


class ContentResolver:
    """
    Maps composed content keys (e.g. ``ORDER.LTL.ACK``) to content strings.

    The table is frozen at construction; lookups never fail and fall back to
    the ``DEFAULT`` entry of the table, then to the configured default.
    """

    def __init__(
        self,
        entries: Optional[Mapping[str, str]] = None,
        default_content: str = DEFAULT_CONTENT,
    ):
        table = {str(key).upper(): str(value) for key, value in (entries or {}).items()}
        self._entries = MappingProxyType(table)
        self._default = table.get(DEFAULT_KEY, default_content)

    @classmethod
    def from_file(
        cls, path: Union[str, Path], default_content: str = DEFAULT_CONTENT
    ) -> "ContentResolver":
        """Load a JSON content document; unreadable files yield an empty table."""
        path = Path(path)
        if not path.exists():
            logger.warning(f"Content file '{path}' not found. Using default values.")
            return cls({}, default_content)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Error loading content file {path}: {e}")
            return cls({}, default_content)

        if not isinstance(data, dict):
            logger.error(f"Content file {path} must contain a JSON object")
            return cls({}, default_content)

        logger.info(f"Loaded {len(data)} content entries from {path}")
        return cls(data, default_content)

    @property
    def default_content(self) -> str:
        return self._default

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key.upper() in self._entries

    def resolve(self, key: str, *fallback_keys: str) -> str:
        """Return content for the first known key, else the default content."""
        for candidate in (key, *fallback_keys):
            content = self._entries.get(candidate.upper())
            if content is not None:
                return content
        logger.debug(f"No content for key '{key}', using default content")
        return self._default

    def get(self, key: str, default: str) -> str:
        """Return content for ``key`` with an explicit fallback."""
        return self._entries.get(key.upper(), default)
