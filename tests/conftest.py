"""
Pytest configuration for sample_predictor tests.

Provides a fake prediction engine written to a temporary directory, so the
engine loading code runs exactly as it does for a real engine, and resets
the logging configuration between tests.
"""

import textwrap
from pathlib import Path

import pytest

from sample_predictor.core.logging import reset_logging

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

FAKE_ENGINE_SOURCE = textwrap.dedent(
    '''
    """Fake prediction engine used by the test suite."""

    import numpy as np

    from sample_predictor.predictor import PredictionResult, Predictor, PredictorFactory


    class FakePredictor(Predictor):
        def __init__(self, model_path):
            self.model_path = model_path
            self.calls = []

        def predict(self, x, y):
            self.calls.append((np.array(x), np.array(y)))
            if self.model_path.endswith("empty.calibration"):
                return None
            if self.model_path.endswith("failing.calibration"):
                raise RuntimeError("Prediction failed for the given spectrum")
            return [
                PredictionResult("IdentifiedAs", "Aspartame"),
                PredictionResult("MahalanobisDistance", 0.5),
                PredictionResult("Points", float(len(x))),
                PredictionResult("Predicted", 2.5, "%", "Fat"),
                PredictionResult("Residual", -0.000142843589233665, "%", "Fat"),
            ]

        def get_result_preview(self):
            return [
                PredictionResult("IdentifiedAs", "Aspartame", None, "Aspartame"),
                PredictionResult.placeholder("MahalanobisDistance"),
                PredictionResult.placeholder("Points"),
                PredictionResult.placeholder("Predicted", "%", "Fat"),
                PredictionResult.placeholder("Residual", "%", "Fat"),
            ]


    class FakeFactory(PredictorFactory):
        def read_model_from_file(self, model_path):
            if model_path.endswith("missing.calibration"):
                raise FileNotFoundError(f"The calibration model '{model_path}' does not exist!")
            return FakePredictor(model_path)
    '''
)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Start and end every test with an unconfigured logging system."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def fake_engine(tmp_path):
    """Path of a python file implementing a fake prediction engine."""
    engine = tmp_path / "fake_engine.py"
    engine.write_text(FAKE_ENGINE_SOURCE, encoding="utf-8")
    return engine


@pytest.fixture
def milk_file():
    """Comma separated spectrum with 20 points."""
    return FIXTURES_DIR / "Milk.txt"


@pytest.fixture
def aspartame_file():
    """Tab separated spectrum with 6 points."""
    return FIXTURES_DIR / "SweetenerAspartame.tsv"


@pytest.fixture
def write_file(tmp_path):
    """Factory fixture writing text content to a file in tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
