"""
Presentation helpers.

Rounding, currency formatting, chart series and JSON serialisation for
ranked comparisons. Rounding happens here and nowhere earlier.
"""
from .chart import build_chart_data
from .formatting import format_inr, round_currency
from .serializers import comparison_to_dict, result_to_dict

__all__ = [
    "build_chart_data",
    "format_inr",
    "round_currency",
    "comparison_to_dict",
    "result_to_dict",
]
