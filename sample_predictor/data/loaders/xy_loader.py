"""
Two-column x,y text loaders.

Spectra are stored as plain text, one sample point per line, with the
x value (wavelength or wavenumber) and the y value (intensity) separated
by a delimiter. There is no header row. Two variants exist:

- comma separated (``CommaXYLoader``, the default for ``.txt``/``.csv``)
- tab or space separated (``WhitespaceXYLoader``, ``.tsv``/``.dat``/``.xy``)
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, ClassVar

from sample_predictor.core.logging import get_logger
from sample_predictor.data.series import XYSeries

from .base import (
    DataFormatError,
    FileLoader,
    FileLoadError,
    FormatNotSupportedError,
    LoaderError,
    LoaderRegistry,
    register_loader,
)

logger = get_logger(__name__)

_DECIMAL = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_SPECIAL_VALUES = {
    "nan": math.nan,
    "inf": math.inf,
    "infinity": math.inf,
}


def parse_number(token: str) -> float:
    """Parse a culture-invariant real number.

    Accepts decimal and exponent notation with an optional sign and
    surrounding whitespace, plus ``NaN``, ``Inf`` and ``Infinity`` in any
    case. The decimal separator is always ``.``.

    Raises:
        ValueError: If the token is not a number.
    """
    text = token.strip()
    if _DECIMAL.match(text):
        return float(text)

    lowered = text.lower()
    sign = 1.0
    if lowered[:1] in ("+", "-"):
        sign = -1.0 if lowered[0] == "-" else 1.0
        lowered = lowered[1:]

    if lowered in _SPECIAL_VALUES:
        return sign * _SPECIAL_VALUES[lowered]

    raise ValueError(f"could not convert string to float: {token!r}")


class XYTextLoader(FileLoader):
    """Base class for two-column text loaders.

    Subclasses set ``delimiter_pattern`` to the regular expression that
    separates the two columns.
    """

    delimiter_pattern: ClassVar[str] = ","
    encoding: ClassVar[str] = "utf-8-sig"

    @classmethod
    def supports(cls, path: Path) -> bool:
        """Check if this loader supports the given file."""
        return path.suffix.lower() in cls.supported_extensions

    @classmethod
    def split_line(cls, line: str) -> list[str]:
        """Split a line into tokens, dropping empty entries."""
        return [token for token in re.split(cls.delimiter_pattern, line) if token != ""]

    def load(self, path: Path, **params: Any) -> XYSeries:
        """Load an x,y series from a text file.

        Args:
            path: Path to the data file.
            **params: Ignored.

        Returns:
            XYSeries named after the file base name.

        Raises:
            FileNotFoundError: If the file does not exist.
            DataFormatError: At the first line that is not exactly two numbers.
            FileLoadError: If the file is not valid text.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        pairs: list[tuple[float, float]] = []
        try:
            with open(path, "r", encoding=self.encoding) as handle:
                for lineno, line in enumerate(handle, start=1):
                    pairs.append(self._parse_line(line.rstrip("\r\n"), lineno, path))
        except UnicodeDecodeError as e:
            raise FileLoadError(f"File is not valid text: {path}") from e

        logger.debug(f"Loaded {len(pairs)} points from {path} with {self.name}")
        return XYSeries.from_pairs(path.stem, pairs)

    def _parse_line(self, line: str, lineno: int, path: Path) -> tuple[float, float]:
        tokens = self.split_line(line)
        if len(tokens) != 2:
            raise DataFormatError(lineno, path)
        try:
            return parse_number(tokens[0]), parse_number(tokens[1])
        except ValueError as e:
            raise DataFormatError(lineno, path) from e


@register_loader
class CommaXYLoader(XYTextLoader):
    """Loader for comma separated x,y files."""

    supported_extensions: ClassVar[tuple[str, ...]] = (".txt", ".csv")
    name: ClassVar[str] = "Comma x,y Loader"
    priority: ClassVar[int] = 40
    delimiter_pattern: ClassVar[str] = ","


@register_loader
class WhitespaceXYLoader(XYTextLoader):
    """Loader for tab or space separated x,y files."""

    supported_extensions: ClassVar[tuple[str, ...]] = (".tsv", ".dat", ".xy")
    name: ClassVar[str] = "Whitespace x,y Loader"
    priority: ClassVar[int] = 45
    delimiter_pattern: ClassVar[str] = r"[\t ]"


DELIMITER_LOADERS: dict[str, type[XYTextLoader]] = {
    "comma": CommaXYLoader,
    "whitespace": WhitespaceXYLoader,
}


def get_xy_loader(path: str | Path, delimiter: str | None = None) -> FileLoader:
    """Pick the loader for a file.

    Args:
        path: Data file path.
        delimiter: ``"comma"``, ``"whitespace"`` or None to choose by extension.
            Unregistered extensions fall back to the comma loader.
    """
    if delimiter is not None:
        try:
            return DELIMITER_LOADERS[delimiter]()
        except KeyError:
            raise ValueError(
                f"Unknown delimiter '{delimiter}'. Must be one of: {sorted(DELIMITER_LOADERS)}"
            ) from None

    try:
        return LoaderRegistry.get_instance().get_loader(path)
    except FormatNotSupportedError:
        return CommaXYLoader()


def load_xy_file(path: str | Path, delimiter: str | None = None) -> XYSeries:
    """Load a single x,y data file.

    Raises:
        FileNotFoundError: If the file does not exist.
        DataFormatError: If a line is malformed.
    """
    return get_xy_loader(path, delimiter).load(Path(path))


def load_data(
    paths: Iterable[str | Path] | None,
    delimiter: str | None = None,
) -> Iterator[XYSeries]:
    """Load a batch of data files, skipping the ones that fail.

    A one-line diagnostic is printed to stdout for every skipped file.

    Args:
        paths: Data file paths, or None.
        delimiter: Delimiter variant passed to :func:`load_xy_file`.

    Yields:
        One XYSeries per successfully loaded file, in input order.
    """
    if paths is None:
        return

    for path in paths:
        if not Path(path).is_file():
            print(f"The file '{path}' does not exist!")
            continue

        try:
            series = load_xy_file(path, delimiter)
        except (LoaderError, OSError) as e:
            logger.debug(f"Skipping {path}: {e}")
            print(f"The file '{path}' failed to load!")
            continue

        yield series
