"""
Application logger.

Console output is split by severity: informational records go to stdout,
warnings and errors go to stderr.
"""

import logging
import sys
import threading


# ============================================================================
# Formatters and Filters
# ============================================================================


class ConsoleFormatter(logging.Formatter):
    """Console formatter: bare message for info, level prefix for problems."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.WARNING:
            return f"{record.levelname}: {message}"
        return message


class _BelowWarningFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


# ============================================================================
# Singleton Logger
# ============================================================================


class BackupLogger:
    """
    Thread-safe singleton logger for the backup tool.

    Records below WARNING go to stdout, WARNING and above to stderr.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        """Ensure only one instance exists (thread-safe singleton)."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if getattr(self, "_initialized", False):
            return

        self._initialized = True
        self._logger = logging.getLogger("outlook_backup")
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self._stdout_handler = None
        self._stderr_handler = None

        self._cleanup_handlers()

    def configure(self, log_level: str = "INFO", enable_console: bool = True) -> None:
        """
        Configure the logger with specified settings.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            enable_console: Enable stdout/stderr output
        """
        self._cleanup_handlers()

        self._stdout_handler = None
        self._stderr_handler = None

        level = getattr(logging, log_level.upper(), logging.INFO)
        self._logger.setLevel(level)

        if not enable_console:
            return

        console_formatter = ConsoleFormatter(fmt="%(message)s")

        self._stdout_handler = logging.StreamHandler(sys.stdout)
        self._stdout_handler.setLevel(level)
        self._stdout_handler.addFilter(_BelowWarningFilter())
        self._stdout_handler.setFormatter(console_formatter)
        self._logger.addHandler(self._stdout_handler)

        self._stderr_handler = logging.StreamHandler(sys.stderr)
        self._stderr_handler.setLevel(logging.WARNING)
        self._stderr_handler.setFormatter(console_formatter)
        self._logger.addHandler(self._stderr_handler)

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance."""
        return self._logger

    def _cleanup_handlers(self) -> None:
        """Close and remove all handlers from the logger."""
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)


# ============================================================================
# Global Logger Instance
# ============================================================================


def get_logger() -> BackupLogger:
    """
    Get the global BackupLogger instance.

    Returns:
        Singleton BackupLogger instance
    """
    return BackupLogger()
