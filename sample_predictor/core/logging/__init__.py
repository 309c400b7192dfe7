"""Logging system for sample_predictor.

Usage:
    >>> from sample_predictor.core.logging import get_logger, configure_logging, LogContext
    >>>
    >>> # Configure at application startup
    >>> configure_logging(verbose=1)
    >>>
    >>> # Get logger in each module
    >>> logger = get_logger(__name__)
    >>>
    >>> with LogContext(run_name="predict"):
    ...     logger.info("Loading calibration model")
"""

from .config import (
    SUCCESS,
    LoggingConfig,
    SamplePredictorLogger,
    configure_logging,
    get_config,
    get_logger,
    is_configured,
    reset_logging,
)
from .context import (
    LogContext,
    RunState,
    get_current_state,
    get_run_id,
)
from .formatters import (
    ConsoleFormatter,
    FileFormatter,
    DEFAULT_SYMBOLS,
    Symbols,
)
from .handlers import (
    NullHandler,
    RotatingRunFileHandler,
)

__all__ = [
    # Main API
    "get_logger",
    "configure_logging",
    "LogContext",
    # Configuration
    "get_config",
    "is_configured",
    "reset_logging",
    "LoggingConfig",
    "SamplePredictorLogger",
    "SUCCESS",
    # Context
    "get_current_state",
    "get_run_id",
    "RunState",
    # Formatters
    "Symbols",
    "DEFAULT_SYMBOLS",
    "ConsoleFormatter",
    "FileFormatter",
    # Handlers
    "RotatingRunFileHandler",
    "NullHandler",
]
