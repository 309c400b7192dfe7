"""File loaders for spectral x,y data."""

from .base import (
    DataFormatError,
    FileLoader,
    FileLoadError,
    FormatNotSupportedError,
    LoaderError,
    LoaderRegistry,
    register_loader,
)
from .xy_loader import (
    DELIMITER_LOADERS,
    CommaXYLoader,
    WhitespaceXYLoader,
    XYTextLoader,
    get_xy_loader,
    load_data,
    load_xy_file,
    parse_number,
)

__all__ = [
    "FileLoader",
    "LoaderRegistry",
    "register_loader",
    "LoaderError",
    "FormatNotSupportedError",
    "FileLoadError",
    "DataFormatError",
    "XYTextLoader",
    "CommaXYLoader",
    "WhitespaceXYLoader",
    "DELIMITER_LOADERS",
    "get_xy_loader",
    "load_xy_file",
    "load_data",
    "parse_number",
]
