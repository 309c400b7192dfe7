"""
Interface implemented by external prediction engines.

An engine ships a :class:`PredictorFactory` that reads a calibration model
file and returns a :class:`Predictor`. The client never looks inside the
model; it only feeds spectra in and reads :class:`PredictionResult` records
out.

Example:
    >>> class MyFactory(PredictorFactory):
    ...     def read_model_from_file(self, model_path):
    ...         return MyPredictor(model_path)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np

from .results import PredictionResult

ResultSet = Sequence[PredictionResult | None]


class Predictor(ABC):
    """A loaded calibration model."""

    @abstractmethod
    def predict(self, x: np.ndarray, y: np.ndarray) -> ResultSet | None:
        """Predict one spectrum.

        Args:
            x: Wavelength / wavenumber axis.
            y: Intensities, same length as ``x``.

        Returns:
            Ordered result records, or None if the engine has no result.
        """

    @abstractmethod
    def get_result_preview(self) -> ResultSet | None:
        """Return all records a prediction would produce, with NaN values."""


class PredictorFactory(ABC):
    """Entry point of a prediction engine."""

    @abstractmethod
    def read_model_from_file(self, model_path: str) -> Predictor:
        """Load a calibration model and return a ready predictor.

        Args:
            model_path: Path of the calibration model file.
        """
