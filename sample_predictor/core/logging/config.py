"""Logging configuration for sample_predictor.

All loggers live below the ``sample_predictor`` namespace. Console output
goes to stderr: stdout is reserved for reports and per-file diagnostics.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .context import generate_run_id, get_run_id
from .formatters import SUCCESS, ConsoleFormatter, FileFormatter
from .handlers import NullHandler, RotatingRunFileHandler

ROOT_LOGGER_NAME = "sample_predictor"
DEFAULT_LOG_DIR = Path("logs")

logging.addLevelName(SUCCESS, "SUCCESS")


class SamplePredictorLogger(logging.Logger):
    """Logger with a few convenience methods."""

    def success(self, msg: str, *args, **kwargs) -> None:
        """Log a successful step."""
        if self.isEnabledFor(SUCCESS):
            self._log(SUCCESS, msg, args, **kwargs)


@dataclass
class LoggingConfig:
    """Effective logging configuration.

    Attributes:
        verbose: Verbosity (-1 silent, 0 warnings, 1 info, 2+ debug).
        use_colors: Use ANSI colors on the console.
        log_file: Whether a per-run log file is written.
        log_dir: Directory of the per-run log files.
        run_id: Identifier of the run log file.
    """

    verbose: int = 0
    use_colors: bool = False
    log_file: bool = False
    log_dir: Path | None = None
    run_id: str | None = None

    @property
    def level(self) -> int:
        if self.verbose >= 2:
            return logging.DEBUG
        if self.verbose == 1:
            return logging.INFO
        return logging.WARNING


_config: LoggingConfig | None = None
_handlers: list[logging.Handler] = []


def _supports_color(stream) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def configure_logging(
    verbose: int = 0,
    use_colors: bool | None = None,
    log_file: bool = False,
    log_dir: str | Path | None = None,
    run_id: str | None = None,
) -> LoggingConfig:
    """Configure the sample_predictor logger hierarchy.

    Calling this again replaces the previous configuration.

    Args:
        verbose: Verbosity level. Negative values silence all output.
        use_colors: Force colors on/off. ``None`` detects a terminal.
        log_file: Also write records to ``<log_dir>/<run_id>.log``.
        log_dir: Directory for log files (default ``./logs``).
        run_id: Run identifier (default: current LogContext run or a new one).

    Returns:
        The effective LoggingConfig.
    """
    global _config

    reset_logging()

    if use_colors is None:
        use_colors = _supports_color(sys.stderr)

    config = LoggingConfig(
        verbose=verbose,
        use_colors=use_colors,
        log_file=log_file,
        log_dir=Path(log_dir) if log_dir is not None else None,
        run_id=run_id,
    )

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG if log_file else config.level)
    root.propagate = False

    if verbose < 0:
        console: logging.Handler = NullHandler()
    else:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ConsoleFormatter(use_colors=use_colors))
        console.setLevel(config.level)
    root.addHandler(console)
    _handlers.append(console)

    if log_file:
        config.run_id = config.run_id or get_run_id() or generate_run_id()
        config.log_dir = config.log_dir or DEFAULT_LOG_DIR
        file_handler = RotatingRunFileHandler(config.log_dir, config.run_id)
        file_handler.setFormatter(FileFormatter())
        file_handler.setLevel(logging.DEBUG)
        root.addHandler(file_handler)
        _handlers.append(file_handler)

    _config = config
    return config


def get_logger(name: str) -> SamplePredictorLogger:
    """Get a logger below the sample_predictor namespace.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    previous = logging.getLoggerClass()
    logging.setLoggerClass(SamplePredictorLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)
    return logger  # type: ignore[return-value]


def get_config() -> LoggingConfig | None:
    """Return the active configuration, or None if not configured."""
    return _config


def is_configured() -> bool:
    return _config is not None


def reset_logging() -> None:
    """Remove all handlers installed by configure_logging."""
    global _config

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in _handlers:
        root.removeHandler(handler)
        handler.close()
    _handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True
    _config = None
