"""JSON-ready serialisation of projection results."""

from typing import Any, Optional

from ..data.catalog import InstrumentProfile, display_name
from ..models.investments import (
    InstrumentId,
    ProjectionRequest,
    ProjectionResult,
    RankedComparison,
)
from .chart import build_chart_data
from .formatting import round_currency


def result_to_dict(
    result: ProjectionResult,
    catalog: Optional[dict[InstrumentId, InstrumentProfile]] = None,
) -> dict[str, Any]:
    """Serialise a single projection with rounded currency values."""
    return {
        "type": result.instrument_id.value,
        "name": display_name(result.instrument_id, catalog),
        "nominalRate": round(result.nominal_rate_percent, 2),
        "rate": round(result.effective_rate_percent, 2),
        "risk": result.risk_level,
        "liquidity": result.liquidity_level,
        "finalValue": round_currency(result.final_value),
        "profit": round_currency(result.profit),
        "taxImplication": result.tax_note,
        "yearlyData": [
            {"year": point.year, "value": round_currency(point.value)}
            for point in result.yearly_series
        ],
    }


def comparison_to_dict(
    request: ProjectionRequest,
    comparison: RankedComparison,
    catalog: Optional[dict[InstrumentId, InstrumentProfile]] = None,
) -> dict[str, Any]:
    """Serialise a ranked comparison together with its request and chart rows."""
    results = [result_to_dict(result, catalog) for result in comparison.results]
    return {
        "request": {
            "investmentAmount": request.principal,
            "duration": request.horizon_years,
            "riskTolerance": request.risk_tolerance,
            "selectedInvestments": [i.value for i in request.selected_instrument_ids],
        },
        "results": results,
        "best": results[0],
        "chart": build_chart_data(comparison),
    }
