"""Prediction result records returned by a prediction engine."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Literal

ResultValue = float | str | None
ValueKind = Literal["number", "text", "none"]


@dataclass(frozen=True)
class PredictionResult:
    """One named statistic of a prediction.

    The value is one of exactly three cases: a real number, a text label
    (e.g. the material an identification model assigned), or absent.

    Attributes:
        property: Statistic name, e.g. ``Predicted`` or ``MahalanobisDistance``.
        value: Numeric value, text label or None.
        unit: Unit of a numeric value, e.g. ``%``.
        constituent: Constituent the value refers to. None for whole-sample
            statistics.
    """

    property: str
    value: ResultValue = None
    unit: str | None = None
    constituent: str | None = None

    @property
    def value_kind(self) -> ValueKind | None:
        """Which value case applies, or None for an unsupported value type."""
        if self.value is None:
            return "none"
        if isinstance(self.value, str):
            return "text"
        if isinstance(self.value, numbers.Real) and not isinstance(self.value, bool):
            return "number"
        return None

    @classmethod
    def placeholder(
        cls,
        property: str,
        unit: str | None = None,
        constituent: str | None = None,
    ) -> PredictionResult:
        """Build a preview record whose numeric value is not yet computed."""
        return cls(property, float("nan"), unit, constituent)
