"""Tests for sample_predictor logging module."""

import logging
import tempfile
from pathlib import Path

import pytest

from sample_predictor.core.logging import (
    SUCCESS,
    ConsoleFormatter,
    FileFormatter,
    LogContext,
    NullHandler,
    RotatingRunFileHandler,
    Symbols,
    configure_logging,
    get_config,
    get_current_state,
    get_logger,
    get_run_id,
    is_configured,
    reset_logging,
)


def _record(level: int, msg: str, name: str = "sample_predictor.test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestSymbols:
    """Test symbol system."""

    def test_symbols(self) -> None:
        """Test default symbols."""
        symbols = Symbols()
        assert symbols.success == "[OK]"
        assert symbols.warning == "[!]"
        assert symbols.error == "[X]"

    def test_level_symbol_mapping(self) -> None:
        """Test level to symbol mapping."""
        symbols = Symbols()
        assert symbols.for_level(logging.ERROR) == "[X]"
        assert symbols.for_level(logging.WARNING) == "[!]"
        assert symbols.for_level(SUCCESS) == "[OK]"
        assert symbols.for_level(logging.INFO) == ""


class TestFormatters:
    """Test log formatters."""

    def test_console_formatter(self) -> None:
        formatter = ConsoleFormatter(use_colors=False)
        assert formatter.format(_record(logging.WARNING, "careful")) == "[!] careful"
        assert formatter.format(_record(logging.INFO, "plain")) == "plain"

    def test_console_formatter_custom_symbols(self) -> None:
        formatter = ConsoleFormatter(symbols=Symbols(warning="WARN"))
        assert formatter.format(_record(logging.WARNING, "careful")) == "WARN careful"

    def test_console_formatter_colors(self) -> None:
        formatter = ConsoleFormatter(use_colors=True)
        text = formatter.format(_record(logging.ERROR, "broken"))
        assert text.startswith("\033[31m")
        assert text.endswith("\033[0m")

    def test_file_formatter_includes_run_id(self) -> None:
        formatter = FileFormatter()
        with LogContext(run_id="R-test"):
            text = formatter.format(_record(logging.INFO, "hello"))
        assert "| INFO     | R-test | sample_predictor.test | hello" in text

    def test_file_formatter_without_context(self) -> None:
        text = FileFormatter().format(_record(logging.INFO, "hello"))
        assert "| - |" in text


class TestConfiguration:
    """Test logging configuration."""

    def setup_method(self) -> None:
        """Reset logging before each test."""
        reset_logging()

    def teardown_method(self) -> None:
        """Reset logging after each test."""
        reset_logging()

    def test_configure_logging(self) -> None:
        """Test basic configuration."""
        configure_logging(verbose=1, use_colors=False)

        assert is_configured()
        config = get_config()
        assert config.verbose == 1
        assert config.use_colors is False
        assert config.level == logging.INFO

    def test_verbosity_levels(self) -> None:
        assert configure_logging(verbose=0).level == logging.WARNING
        assert configure_logging(verbose=2).level == logging.DEBUG
        assert configure_logging(verbose=5).level == logging.DEBUG

    def test_reset_logging(self) -> None:
        configure_logging(verbose=1)
        reset_logging()

        assert not is_configured()
        assert get_config() is None
        assert logging.getLogger("sample_predictor").handlers == []

    def test_get_logger(self) -> None:
        """Test logger retrieval."""
        configure_logging(verbose=2)
        logger = get_logger("test_module")

        assert logger is not None
        assert logger.name == "sample_predictor.test_module"
        assert hasattr(logger, "success")

    def test_get_logger_keeps_namespace(self) -> None:
        assert get_logger("sample_predictor.report").name == "sample_predictor.report"

    def test_console_goes_to_stderr(self, capsys) -> None:
        configure_logging(verbose=1, use_colors=False)
        get_logger("test_console").info("to stderr")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "to stderr" in captured.err

    def test_quiet_uses_null_handler(self, capsys) -> None:
        configure_logging(verbose=-1)
        get_logger("test_quiet").error("hidden")

        handlers = logging.getLogger("sample_predictor").handlers
        assert any(isinstance(h, NullHandler) for h in handlers)
        assert capsys.readouterr().err == ""

    def test_success_level(self, capsys) -> None:
        configure_logging(verbose=1, use_colors=False)
        get_logger("test_success").success("done")

        assert "[OK] done" in capsys.readouterr().err


class TestLogContext:
    """Test run context tracking."""

    def test_context_sets_and_restores_state(self) -> None:
        assert get_current_state() is None

        with LogContext(run_name="predict", model="Milk.calibration") as ctx:
            state = get_current_state()
            assert state.run_id == ctx.run_id
            assert state.run_name == "predict"
            assert state.extra == {"model": "Milk.calibration"}

        assert get_current_state() is None

    def test_generated_run_id(self) -> None:
        with LogContext():
            run_id = get_run_id()
        assert run_id.startswith("R-")

    def test_nested_context(self) -> None:
        with LogContext(run_id="outer"):
            with LogContext(run_id="inner"):
                assert get_run_id() == "inner"
            assert get_run_id() == "outer"


class TestFileLogging:
    """Test file logging functionality."""

    def test_file_handler_creates_file(self) -> None:
        """Test that file handler creates log file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            reset_logging()
            configure_logging(
                verbose=0,
                log_file=True,
                log_dir=tmpdir,
                run_id="test-file-log",
            )

            logger = get_logger("test_file")
            logger.debug("Test file logging")

            log_file = Path(tmpdir) / "test-file-log.log"
            assert log_file.exists()
            assert "Test file logging" in log_file.read_text(encoding="utf-8")

            reset_logging()

    def test_rotation_keeps_newest_runs(self, tmp_path) -> None:
        for i in range(3):
            handler = RotatingRunFileHandler(tmp_path, f"run-{i}", max_runs=2)
            handler.close()

        remaining = sorted(p.name for p in tmp_path.glob("*.log"))
        assert len(remaining) == 2
        assert "run-2.log" in remaining

    def test_close_after_failed_open(self, tmp_path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(OSError):
            RotatingRunFileHandler(blocker / "logs", "run-broken")

        # same state the atexit hook sees for the half-built handler
        handler = RotatingRunFileHandler.__new__(RotatingRunFileHandler)
        logging.Handler.__init__(handler)
        handler.close()
