import logging
import sys
from typing import Optional

from model_arena.const import LOG_FORMAT, LOG_DATE_FORMAT
from .config import Config


class LoggingManager:
    """Manager for logging setup and logger retrieval."""

    _handler: Optional[logging.Handler] = None

    @classmethod
    def setup_logging(cls, level: Optional[str] = None) -> None:
        """Setup structured logging for the application.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                Falls back to the configured log level.
        """
        config = Config()
        level = level or config.log_level
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(numeric_level)

        # Replace the handler from a previous setup call
        root_logger = logging.getLogger()
        if cls._handler is not None:
            root_logger.removeHandler(cls._handler)
        root_logger.setLevel(numeric_level)
        root_logger.addHandler(console_handler)
        cls._handler = console_handler

        # Set levels for noisy libraries
        for logger_name, lib_level in config.library_log_levels.items():
            logging.getLogger(logger_name).setLevel(getattr(logging, lib_level.upper(), logging.WARNING))

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name, typically __name__

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)
