"""
Test suite for logging configuration.
"""

from loguru import logger

from edi_core.config import config
from edi_core.logging import configure_logging, request_context


class TestConfigureLogging:
    """Test the sink honours the configured level."""

    def test_level_defaults_to_configured_log_level(self, monkeypatch):
        """Test LOG_LEVEL, as loaded into config, filters the sink."""
        monkeypatch.setattr(config, "log_level", "error")
        messages = []

        try:
            configure_logging(sink=messages.append, enqueue=False)
            logger.info("routine detail")
            logger.error("broken template")
        finally:
            configure_logging("INFO")

        assert len(messages) == 1
        assert "broken template" in messages[0]

    def test_explicit_level_wins(self, log_messages):
        """Test an explicit level overrides the configured one."""
        logger.debug("composer detail")

        assert any("composer detail" in message for message in log_messages)

    def test_reconfiguring_replaces_previous_sink(self):
        """Test only the latest sink receives records."""
        first, second = [], []

        try:
            configure_logging("INFO", sink=first.append, enqueue=False)
            configure_logging("INFO", sink=second.append, enqueue=False)
            logger.info("after reconfigure")
        finally:
            configure_logging("INFO")

        assert first == []
        assert len(second) == 1


class TestRequestContext:
    """Test request ids are attached to log records."""

    def test_records_inside_block_carry_request_id(self, log_messages):
        """Test the id is set inside the block and reset after it."""
        with request_context("req-7"):
            logger.info("inside")
        logger.info("outside")

        assert "request_id=req-7" in log_messages[0]
        assert "request_id=-" in log_messages[1]

    def test_missing_request_id_uses_placeholder(self, log_messages):
        """Test a None id falls back to the placeholder."""
        with request_context(None):
            logger.info("anonymous")

        assert "request_id=-" in log_messages[0]
