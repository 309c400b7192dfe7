"""
Sample Predictor - A command line client for external chemometric prediction engines.

Loads spectral x,y data files, feeds them to a calibration model provided by
an external prediction engine and renders the prediction statistics as
tab separated text.
"""

__version__ = "1.0.0"
__author__ = "Sample Predictor Project"

from .data import XYSeries, load_data, load_xy_file
from .predictor import PredictionResult, Predictor, PredictorFactory, create_predictor
from .report import get_prediction_report, result_to_string, results_to_string

__all__ = [
    # Data
    "XYSeries",
    "load_xy_file",
    "load_data",

    # Engine interface
    "Predictor",
    "PredictorFactory",
    "PredictionResult",
    "create_predictor",

    # Reporting
    "result_to_string",
    "results_to_string",
    "get_prediction_report",
]
