"""
Shared fixtures.
"""

import pytest

from edi_core.logging import configure_logging


@pytest.fixture
def log_messages():
    """Capture formatted log lines at DEBUG level, synchronously."""
    messages = []
    configure_logging("DEBUG", sink=messages.append, enqueue=False)
    yield messages
    configure_logging()
