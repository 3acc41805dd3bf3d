"""Logging utilities for observability."""

import copy
import logging
import sys
from typing import Optional

# Global logger instance
_logger: Optional[logging.Logger] = None


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for different log levels."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with colors."""
        # Color a copy; the record is shared with the file handler
        colored = copy.copy(record)
        color = self.COLORS.get(colored.levelname, self.RESET)
        colored.levelname = f"{color}{colored.levelname}{self.RESET}"
        return super().format(colored)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Set up logging configuration."""
    global _logger

    logger = logging.getLogger("cta_rewriter")
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_format = ColoredFormatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)  # Log everything to file
        file_format = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


class RequestLogger:
    """Logger for tracking one suggestion request through its stages."""

    def __init__(self, request_id: str, provider: str):
        """Initialize request logger.

        Args:
            request_id: Short identifier used to correlate log lines.
            provider: Name of the provider serving the request.
        """
        self.request_id = request_id
        self.provider = provider
        self.logger = get_logger()
        self.events: list[dict] = []

    def log_stage(self, stage: str, message: str = "", level: int = logging.INFO) -> None:
        """Record a stage transition."""
        self.events.append({"stage": stage, "message": message})
        suffix = f": {message}" if message else ""
        self.logger.log(level, f"[{self.request_id}] {self.provider} {stage}{suffix}")

    def log_rejected(self, reason: str) -> None:
        """Log a request rejected before reaching a provider."""
        self.log_stage("rejected", message=reason, level=logging.WARNING)

    def log_failed(self, error: str) -> None:
        """Log a request that failed downstream."""
        self.log_stage("failed", message=error, level=logging.ERROR)

    def get_stages(self) -> list[str]:
        """Get the ordered list of recorded stages."""
        return [event["stage"] for event in self.events]
