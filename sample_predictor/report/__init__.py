"""Text rendering of prediction results."""

from .text_report import (
    HEADER,
    LINE_TERMINATOR,
    format_value,
    get_prediction_report,
    result_to_string,
    results_to_string,
)

__all__ = [
    "LINE_TERMINATOR",
    "HEADER",
    "format_value",
    "result_to_string",
    "results_to_string",
    "get_prediction_report",
]
