"""Core infrastructure: exceptions and logging."""

from .exceptions import FactoryLoadError, PreconditionError, SamplePredictorError

__all__ = [
    "SamplePredictorError",
    "PreconditionError",
    "FactoryLoadError",
]
