"""Spectral data containers and loaders."""

from .loaders import DataFormatError, load_data, load_xy_file
from .series import XYSeries

__all__ = [
    "XYSeries",
    "load_xy_file",
    "load_data",
    "DataFormatError",
]
