"""
Logging Setup

One line per record: UTC timestamp, level, logger name, message. Console
output is coloured by level when stdout is a terminal; the optional log
file gets the same layout without colour.
"""
import logging
import sys
from typing import Iterable, Optional
from datetime import datetime, timezone


LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
RESET = "\033[0m"

# Chatty third-party loggers kept at WARNING unless the app runs at DEBUG.
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


class StructuredFormatter(logging.Formatter):
    """`[2024-01-01T00:00:00+00:00] INFO     [vitalnexus.main] message`"""

    def __init__(self, use_color: bool = False):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        line = f"[{stamp}] {record.levelname:8} [{record.name}] {record.getMessage()}"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        if self.use_color and record.levelname in LEVEL_COLORS:
            return f"{LEVEL_COLORS[record.levelname]}{line}{RESET}"
        return line


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Route all vitalnexus and library logging through the root logger.

    Replaces any handlers already installed, so calling it twice (app
    import, then uvicorn reload) does not duplicate lines.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter(use_color=sys.stdout.isatty()))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    for name in quiet:
        logging.getLogger(name).setLevel(
            logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
        )


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass `__name__`."""
    return logging.getLogger(name)
