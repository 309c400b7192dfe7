"""Coordinate series container."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


@dataclass
class XYSeries:
    """A named pair of equal-length x,y arrays.

    Attributes:
        name: Source name (file base name without extension).
        x: Wavelength / wavenumber axis, in file order.
        y: Intensity values, in file order.
    """

    name: str
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        self.x = np.asarray(self.x, dtype=np.float64).reshape(-1)
        self.y = np.asarray(self.y, dtype=np.float64).reshape(-1)
        if self.x.shape != self.y.shape:
            raise ValueError(
                f"x and y must have the same length, got {self.x.size} and {self.y.size}"
            )

    def __len__(self) -> int:
        return int(self.x.size)

    @classmethod
    def from_pairs(cls, name: str, pairs: Sequence[tuple[float, float]]) -> XYSeries:
        """Build a series from (x, y) tuples."""
        if not pairs:
            return cls(name, np.empty(0), np.empty(0))
        x, y = zip(*pairs)
        return cls(name, np.array(x, dtype=np.float64), np.array(y, dtype=np.float64))
