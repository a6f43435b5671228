"""Tests for structured logging."""

import json
import logging

from meilisearch_keys.logging import LOG_FILE_NAME, CommandLogger, ConsoleFormatter


class TestCommandLogger:
    """Test the structured logger."""

    def test_fields_written_to_log_file(self, tmp_path):
        """Test that records and their fields land in the JSON-lines file."""
        logger = CommandLogger("meilisearch-keys-test-file", str(tmp_path))
        try:
            logger.warning("Key action failed", action="create", has_api_key=True)
        finally:
            logger.shutdown()

        lines = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()
        entry = json.loads(lines[-1])
        assert entry["message"] == "Key action failed"
        assert entry["level"] == "WARNING"
        assert entry["action"] == "create"
        assert entry["has_api_key"] is True

    def test_no_file_without_log_dir(self, tmp_path):
        """Test that nothing is written when no directory is configured."""
        logger = CommandLogger("meilisearch-keys-test-nofile")
        try:
            logger.info("hello")
            assert not any(
                isinstance(handler, logging.FileHandler) for handler in logger.logger.handlers
            )
        finally:
            logger.shutdown()

    def test_shutdown_keeps_shared_stderr_handler(self, tmp_path):
        """Test that shutdown closes only the file handler it opened."""
        module_logger = CommandLogger("meilisearch-keys-test-shutdown")
        run_logger = CommandLogger("meilisearch-keys-test-shutdown", str(tmp_path))
        assert any(isinstance(h, logging.FileHandler) for h in run_logger.logger.handlers)

        run_logger.shutdown()

        handlers = module_logger.logger.handlers
        assert not any(isinstance(h, logging.FileHandler) for h in handlers)
        assert [getattr(h, "is_stderr", False) for h in handlers] == [True]

    def test_repeated_runs_do_not_stack_stderr_handlers(self, tmp_path):
        """Test that a second run in one process reuses the stderr handler."""
        for _ in range(2):
            logger = CommandLogger("meilisearch-keys-test-repeat", str(tmp_path))
            logger.shutdown()
        assert len(logger.logger.handlers) == 1


def test_console_format():
    """Test the stderr line format."""
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "Authentication failed", None, None)
    record.fields = {"endpoint": "/keys", "has_auth_header": False}
    assert (
        ConsoleFormatter().format(record)
        == "ERROR Authentication failed endpoint=/keys has_auth_header=False"
    )
