"""Exception hierarchy for sample_predictor.

Loader specific errors live in :mod:`sample_predictor.data.loaders.base`
and derive from :class:`SamplePredictorError` as well.
"""


class SamplePredictorError(Exception):
    """Base exception for all sample_predictor errors."""
    pass


class PreconditionError(SamplePredictorError, ValueError):
    """Raised when a required argument is missing or blank."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The '{name}' must not be null or empty!")


class FactoryLoadError(SamplePredictorError):
    """Raised when the prediction engine factory cannot be resolved."""
    pass
