"""Tests for RunConfig."""

import argparse
from pathlib import Path

import pytest

from sample_predictor.config import RunConfig
from sample_predictor.core.exceptions import PreconditionError


def _namespace(**overrides):
    values = {
        "files": [],
        "model": None,
        "factory": "engine.py",
        "delimiter": None,
        "verbose": 0,
        "quiet": False,
        "log_file": False,
        "log_dir": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class TestRunConfig:
    """Test RunConfig construction and validation."""

    def test_defaults(self):
        config = RunConfig()
        assert config.data_files == []
        assert config.preview_mode is True
        assert config.verbose == 0

    def test_from_namespace(self):
        config = RunConfig.from_namespace(
            _namespace(files=["a.txt", "b.txt"], model="m.calibration", delimiter="comma", verbose=2)
        )

        assert config.factory_path == "engine.py"
        assert config.model_path == "m.calibration"
        assert config.data_files == ["a.txt", "b.txt"]
        assert config.delimiter == "comma"
        assert config.verbose == 2
        assert config.preview_mode is False

    def test_quiet_overrides_verbose(self):
        assert RunConfig.from_namespace(_namespace(quiet=True, verbose=2)).verbose == -1

    def test_log_dir_enables_log_file(self):
        config = RunConfig.from_namespace(_namespace(log_dir="runs"))
        assert config.log_file is True
        assert config.log_dir == Path("runs")

    def test_validate(self):
        config = RunConfig(factory_path="engine.py", model_path="m.calibration")
        assert config.validate() is config

    @pytest.mark.parametrize(
        "factory_path, model_path, name",
        [
            (None, "m.calibration", "factory_path"),
            ("engine.py", None, "model_path"),
            ("engine.py", "  ", "model_path"),
        ],
    )
    def test_validate_missing_paths(self, factory_path, model_path, name):
        config = RunConfig(factory_path=factory_path, model_path=model_path)

        with pytest.raises(PreconditionError) as exc_info:
            config.validate()

        assert exc_info.value.name == name
