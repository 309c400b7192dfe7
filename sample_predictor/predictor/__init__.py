"""Interface to the external prediction engine."""

from .factory import create_predictor, load_factory
from .interface import Predictor, PredictorFactory, ResultSet
from .results import PredictionResult

__all__ = [
    "Predictor",
    "PredictorFactory",
    "PredictionResult",
    "ResultSet",
    "load_factory",
    "create_predictor",
]
