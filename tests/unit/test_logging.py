"""Unit tests for logging setup."""

import logging
import sys
from unittest.mock import patch

from model_arena.const import LOG_FORMAT, LOG_DATE_FORMAT
from model_arena.shared.logging import LoggingManager


class TestLogging:
    """Test logging setup functions."""

    @patch('model_arena.shared.logging.logging')
    def test_setup_logging_default_level(self, mock_logging):
        """Test setup_logging with the configured INFO level and a stdout handler."""
        LoggingManager.setup_logging()

        handler = mock_logging.StreamHandler.return_value
        mock_logging.StreamHandler.assert_called_once_with(sys.stdout)
        mock_logging.Formatter.assert_called_once_with(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        handler.setFormatter.assert_called_once_with(mock_logging.Formatter.return_value)
        handler.setLevel.assert_called_once_with(mock_logging.INFO)
        mock_logging.getLogger().setLevel.assert_any_call(mock_logging.INFO)
        mock_logging.getLogger().addHandler.assert_called_once_with(handler)

    @patch('model_arena.shared.logging.logging')
    def test_setup_logging_custom_level(self, mock_logging):
        """Test setup_logging with custom DEBUG level."""
        LoggingManager.setup_logging("debug")

        mock_logging.StreamHandler.return_value.setLevel.assert_called_once_with(mock_logging.DEBUG)
        mock_logging.getLogger().setLevel.assert_any_call(mock_logging.DEBUG)
        mock_logging.getLogger().addHandler.assert_called_once_with(mock_logging.StreamHandler.return_value)

    @patch('model_arena.shared.logging.logging')
    def test_setup_logging_quiets_libraries(self, mock_logging):
        """Library loggers are lowered to their configured level."""
        LoggingManager.setup_logging("DEBUG")

        mock_logging.getLogger.assert_any_call("httpx")
        mock_logging.getLogger.assert_any_call("uvicorn.access")

    def test_setup_logging_replaces_handler(self):
        """Repeated setup keeps a single console handler on the root logger."""
        root_logger = logging.getLogger()
        previous_level = root_logger.level
        try:
            LoggingManager.setup_logging("INFO")
            first = LoggingManager._handler
            LoggingManager.setup_logging("WARNING")

            assert first not in root_logger.handlers
            assert LoggingManager._handler in root_logger.handlers
            assert root_logger.level == logging.WARNING
        finally:
            root_logger.removeHandler(LoggingManager._handler)
            LoggingManager._handler = None
            root_logger.setLevel(previous_level)

    def test_get_logger(self):
        """Test get_logger returns a logger instance."""
        logger = LoggingManager.get_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_module"

    def test_get_logger_different_names(self):
        """Test get_logger with different names."""
        logger1 = LoggingManager.get_logger("module1")
        logger2 = LoggingManager.get_logger("module2")

        assert logger1.name == "module1"
        assert logger2.name == "module2"
        assert logger1 is not logger2
