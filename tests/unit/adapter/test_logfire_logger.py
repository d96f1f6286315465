"""Unit tests for the Logfire logger adapter."""

from unittest.mock import patch

from taarafo.adapter.logfire_logger import LogfireLogger
from taarafo.domain.error import PostDependencyError, PostError


class TestLogfireLogger:
    """Tests for LogfireLogger."""

    def test_messages_map_to_levels(self):
        logger = LogfireLogger()

        with patch("taarafo.adapter.logfire_logger.logfire") as logfire:
            logger.log_trace("t")
            logger.log_debug("d")
            logger.log_information("i")
            logger.log_warning("w")

        logfire.trace.assert_called_once_with("t")
        logfire.debug.assert_called_once_with("d")
        logfire.info.assert_called_once_with("i")
        logfire.warn.assert_called_once_with("w")

    def test_critical_attaches_exception_and_kind(self):
        cause = ConnectionError("refused")
        error = PostDependencyError(PostError.failed_storage(cause))

        with patch("taarafo.adapter.logfire_logger.logfire") as logfire:
            LogfireLogger().log_critical(error)

        logfire.error.assert_not_called()
        _, kwargs = logfire.fatal.call_args
        assert kwargs["_exc_info"] is error
        assert kwargs["error_type"] == "PostDependencyError"
        assert kwargs["error_kind"] == error.kind.value
        assert kwargs["root_cause_type"] == "ConnectionError"

    def test_error_for_plain_exception(self):
        error = ValueError("bad")

        with patch("taarafo.adapter.logfire_logger.logfire") as logfire:
            LogfireLogger().log_error(error)

        _, kwargs = logfire.error.call_args
        assert kwargs["_exc_info"] is error
        assert "error_kind" not in kwargs
        assert "root_cause_type" not in kwargs
