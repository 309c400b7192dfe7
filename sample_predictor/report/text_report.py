"""
Plain text prediction report.

The report is tab separated with CRLF line endings::

    Results for: Milk
    Property	Value [Unit]	Constituent
    MahalanobisDistance	0.952250952565498
    Predicted	2.19128593648249 [%]	Fat

All functions here are pure: rendering the same results twice gives the
same text.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from sample_predictor.core.logging import get_logger
from sample_predictor.data.series import XYSeries
from sample_predictor.predictor.interface import Predictor
from sample_predictor.predictor.results import PredictionResult

logger = get_logger(__name__)

LINE_TERMINATOR = "\r\n"
HEADER = "Property\tValue [Unit]\tConstituent"
NO_RESULTS = "No results!"
NO_DATA = "No x,y data files loaded!"
NONE_TEXT = "None"

# Decimal exponents rendered without scientific notation: -4..14
_MIN_POSITIONAL_EXP = -4
_MAX_POSITIONAL_EXP = 14


def format_value(value: float) -> str:
    """Format a number the invariant round-trip way.

    Uses the shortest representation that round-trips. Exponents outside
    ``-4..14`` use ``1.5E+20`` / ``3.1E-07`` notation.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    scientific = np.format_float_scientific(value, unique=True, trim="-", exp_digits=2)
    mantissa, exponent = scientific.split("e")
    if _MIN_POSITIONAL_EXP <= int(exponent) <= _MAX_POSITIONAL_EXP:
        return np.format_float_positional(value, unique=True, trim="-")
    return f"{mantissa}E{exponent}"


def result_to_string(result: PredictionResult | None) -> str:
    """Render one result record as a single line (without terminator).

    Records with no value or an unsupported value type render as ``None``.
    """
    if result is None:
        return NONE_TEXT

    kind = result.value_kind
    if kind == "text":
        value = result.value
    elif kind == "number":
        try:
            value = format_value(result.value)
        except OverflowError:
            # integers beyond the float range
            return NONE_TEXT
    else:
        # only text and numbers are rendered
        return NONE_TEXT

    if result.unit:
        value += f" [{result.unit}]"

    if result.constituent is None or not result.constituent.strip():
        return f"{result.property}\t{value}"
    return f"{result.property}\t{value}\t{result.constituent}"


def results_to_string(
    results: Sequence[PredictionResult | None] | None,
    name: str | None = None,
    newline: str = LINE_TERMINATOR,
) -> str:
    """Render a result set as a report block.

    Args:
        results: Records in engine order, or None.
        name: Source name for the ``Results for:`` line, omitted if None.
        newline: Line terminator.

    Returns:
        The block, every line terminated. ``No results!`` if ``results``
        is None.
    """
    if results is None:
        return NO_RESULTS + newline

    lines = []
    if name is not None:
        lines.append(f"Results for: {name}")
    lines.append(HEADER)
    lines.extend(result_to_string(result) for result in results)
    return "".join(line + newline for line in lines)


def get_prediction_report(
    predictor: Predictor,
    data: Iterable[XYSeries] | None,
    newline: str = LINE_TERMINATOR,
) -> str:
    """Predict every series and concatenate the report blocks.

    Each block is followed by an empty line. Errors raised by the predictor
    propagate.

    Args:
        predictor: Loaded calibration model.
        data: Series to predict, in order.
        newline: Line terminator.
    """
    series_list = list(data) if data is not None else []
    if not series_list:
        return NO_DATA

    text = ""
    for series in series_list:
        logger.info(f"Predicting {series.name} ({len(series)} points)")
        results = predictor.predict(series.x, series.y)
        text += results_to_string(results, series.name, newline) + newline
    return text
