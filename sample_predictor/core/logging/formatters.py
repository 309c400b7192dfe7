"""Log formatters for sample_predictor.

Console output is short and readable; file output carries timestamps and
the run identifier so several runs can be told apart.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .context import inject_context

SUCCESS = 25


@dataclass(frozen=True)
class Symbols:
    """Status symbols prefixed to console messages.

    ASCII-only so output stays readable on any terminal.
    """

    success: str = "[OK]"
    warning: str = "[!]"
    error: str = "[X]"

    def for_level(self, levelno: int) -> str:
        """Return the symbol for a log level (empty for plain info/debug)."""
        if levelno >= logging.ERROR:
            return self.error
        if levelno >= logging.WARNING:
            return self.warning
        if levelno == SUCCESS:
            return self.success
        return ""

DEFAULT_SYMBOLS = Symbols()

_COLORS = {
    logging.DEBUG: "\033[2m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[31;1m",
    SUCCESS: "\033[32m",
}
_RESET = "\033[0m"


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter."""

    def __init__(self, use_colors: bool = False, symbols: Symbols = DEFAULT_SYMBOLS) -> None:
        super().__init__()
        self.symbols = symbols
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        symbol = self.symbols.for_level(record.levelno)
        text = f"{symbol} {message}" if symbol else message
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        if self.use_colors and record.levelno in _COLORS:
            text = f"{_COLORS[record.levelno]}{text}{_RESET}"
        return text


class FileFormatter(logging.Formatter):
    """Detailed formatter for log files."""

    def __init__(self) -> None:
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        inject_context(record)
        timestamp = self.formatTime(record, self.datefmt)
        run_id = getattr(record, "run_id", "-")
        text = f"{timestamp} | {record.levelname:<8} | {run_id} | {record.name} | {record.getMessage()}"
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text
