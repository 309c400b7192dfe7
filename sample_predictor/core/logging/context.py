"""Run context management for sample_predictor logging.

This module provides a context manager for tracking the current run
(one invocation of the client) in the logging system.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class RunState:
    """State for a single run.

    Attributes:
        run_id: Unique run identifier.
        run_name: Human-readable run name.
        start_time: Run start timestamp.
        extra: Additional run-level metadata (model path, mode, ...).
    """

    run_id: str
    run_name: str | None = None
    start_time: datetime = field(default_factory=datetime.now)
    extra: dict[str, Any] = field(default_factory=dict)

class _ContextStorage(threading.local):
    """Thread-local storage for run context."""

    def __init__(self) -> None:
        super().__init__()
        self.run_state: RunState | None = None

# Global context storage
_context = _ContextStorage()

def get_current_state() -> RunState | None:
    """Get the current run state.

    Returns:
        Current RunState or None if not in a run context.
    """
    return _context.run_state

def get_run_id() -> str | None:
    """Get the current run ID.

    Returns:
        Current run ID or None if not in a run context.
    """
    state = get_current_state()
    return state.run_id if state else None

def generate_run_id() -> str:
    """Generate a unique run ID.

    Returns:
        Run ID in format "R-YYYYMMDD-HHMMSS-XXXX".
    """
    now = datetime.now()
    timestamp = now.strftime("%Y%m%d-%H%M%S")
    suffix = uuid.uuid4().hex[:4]
    return f"R-{timestamp}-{suffix}"

class LogContext:
    """Context manager for run-level logging context.

    Example:
        >>> with LogContext(run_name="preview", model="Milk-PLS1-Fat.calibration"):
        ...     logger.info("Loading calibration model")
    """

    def __init__(
        self,
        run_id: str | None = None,
        run_name: str | None = None,
        **extra: Any,
    ) -> None:
        """Initialize log context.

        Args:
            run_id: Unique run identifier (auto-generated if not provided).
            run_name: Human-readable run name.
            **extra: Additional run-level metadata.
        """
        self.run_id = run_id or generate_run_id()
        self.run_name = run_name or self.run_id
        self.extra = extra
        self._previous_state: RunState | None = None

    def __enter__(self) -> LogContext:
        """Enter the context, setting up run state."""
        self._previous_state = _context.run_state
        _context.run_state = RunState(
            run_id=self.run_id,
            run_name=self.run_name,
            start_time=datetime.now(),
            extra=self.extra,
        )
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit the context, restoring previous state."""
        _context.run_state = self._previous_state

def inject_context(record: logging.LogRecord) -> logging.LogRecord:
    """Inject current context into a log record.

    Args:
        record: Log record to inject context into.

    Returns:
        Modified log record with context fields.
    """
    state = get_current_state()

    if state is None:
        return record

    record.run_id = state.run_id
    record.run_name = state.run_name
    return record
