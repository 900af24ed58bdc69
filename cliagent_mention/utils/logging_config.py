import logging
import sys
import os
from datetime import datetime

# Below DEBUG; used to echo every emitted mention when logLevel is "trace".
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

# Above CRITICAL so nothing gets through.
OFF = logging.CRITICAL + 10

LOG_LEVELS: dict[str, int] = {
    "off":   OFF,
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info":  logging.INFO,
    "warn":  logging.WARNING,
    "error": logging.ERROR,
}

_PACKAGE_LOGGERS = ["cliagent_mention", "uvicorn", "uvicorn.error", "uvicorn.access", "main"]


class ColoredFormatter(logging.Formatter):
    """Custom formatter to add colors to console output."""

    blue = "\x1b[38;5;39m"
    cyan = "\x1b[36m"
    green = "\x1b[32m"
    yellow = "\x1b[33m"
    red = "\x1b[31m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    format_str = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"

    FORMATS = {
        TRACE: blue + format_str + reset,
        logging.DEBUG: cyan + format_str + reset,
        logging.INFO: green + format_str + reset,
        logging.WARNING: yellow + format_str + reset,
        logging.ERROR: red + format_str + reset,
        logging.CRITICAL: bold_red + format_str + reset
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno)
        # Handle cases where level might be outside standard range
        if not log_fmt:
            log_fmt = self.format_str
        formatter = logging.Formatter(log_fmt, datefmt="%Y-%m-%d %H:%M:%S")
        return formatter.format(record)


def resolve_log_level(name: str) -> int:
    """Map a logLevel setting to a logging level; unknown names mean debug."""
    return LOG_LEVELS.get((name or "").strip().lower(), logging.DEBUG)


def apply_log_level(name: str) -> int:
    """Apply a logLevel setting to the root and package loggers."""
    level = resolve_log_level(name)
    logging.getLogger().setLevel(level)
    for logger_name in _PACKAGE_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)
    return level


def setup_logging(level=logging.INFO, log_dir="logs", log_to_file=True):
    """Setup centralized logging configuration."""
    if isinstance(level, str):
        level = resolve_log_level(level)

    root_logger = logging.getLogger()

    # Clear existing handlers to prevent duplicate logs
    if root_logger.handlers:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

    root_logger.setLevel(level)

    # 1. Console handler (using stderr for uvicorn compatibility)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter())
    root_logger.addHandler(console_handler)

    # 2. File handler for persistence
    if log_to_file:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = logging.FileHandler(
            os.path.join(log_dir, f"cliagent_mention_{datetime.now().strftime('%Y%m%d')}.log")
        )
        file_fmt = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_fmt)
        root_logger.addHandler(file_handler)

    # Force propagation for all relevant internal loggers
    for logger_name in _PACKAGE_LOGGERS:
        l = logging.getLogger(logger_name)
        l.setLevel(level)
        l.propagate = True

    root_logger.info("Logging initialized (level=%s).", logging.getLevelName(level))
