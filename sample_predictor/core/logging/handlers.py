"""Custom log handlers for sample_predictor logging."""

import logging
from pathlib import Path


class RotatingRunFileHandler(logging.Handler):
    """Handler that writes logs to run-specific files with rotation.

    Creates a new log file for each run, with rotation to limit
    total log storage.
    """

    def __init__(
        self,
        log_dir: Path,
        run_id: str,
        max_runs: int = 100,
    ) -> None:
        """Initialize rotating file handler.

        Args:
            log_dir: Directory for log files.
            run_id: Unique run identifier.
            max_runs: Maximum number of run logs to keep.
        """
        super().__init__()
        self.log_dir = Path(log_dir)
        self.run_id = run_id
        self.max_runs = max_runs

        self.log_dir.mkdir(parents=True, exist_ok=True)

        self._log_file = self.log_dir / f"{run_id}.log"
        self._log_handle = open(self._log_file, "w", encoding="utf-8")

        self._rotate_logs()

    @property
    def log_file(self) -> Path:
        """Path of the log file written by this handler."""
        return self._log_file

    def _rotate_logs(self) -> None:
        """Remove oldest log files if over limit."""
        log_files = sorted(
            (p for p in self.log_dir.glob("*.log") if p != self._log_file),
            key=lambda p: p.stat().st_mtime,
        )

        # Keep the current log plus the most recent others
        excess = len(log_files) - (self.max_runs - 1)
        for log_file in log_files[: max(excess, 0)]:
            try:
                log_file.unlink()
            except OSError:
                pass

    def emit(self, record: logging.LogRecord) -> None:
        """Write log record to file.

        Args:
            record: Log record to write.
        """
        try:
            msg = self.format(record)
            self._log_handle.write(msg + "\n")
            self._log_handle.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """Close file handle."""
        handle = getattr(self, "_log_handle", None)
        if handle is not None and not handle.closed:
            handle.close()
        super().close()


class NullHandler(logging.Handler):
    """Handler that discards all log records.

    Used when logging should be completely silent.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """Discard the log record.

        Args:
            record: Log record (ignored).
        """
        pass
