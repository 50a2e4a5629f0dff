"""Chart series for projected growth."""

from typing import Any

from ..models.investments import RankedComparison
from .formatting import round_currency


def build_chart_data(comparison: RankedComparison) -> list[dict[str, Any]]:
    """
    Build one row per year with a rounded value per instrument.

    Every instrument becomes one chart line keyed by its id; ``year`` is
    the shared x-axis from 0 to the horizon.
    """
    horizon = len(comparison.best.yearly_series)
    rows: list[dict[str, Any]] = [{"year": year} for year in range(horizon)]

    for result in comparison.results:
        for point in result.yearly_series:
            rows[point.year][result.instrument_id.value] = round_currency(point.value)

    return rows
