"""Investment comparison and ranking"""

from collections.abc import Mapping

from ..errors import UnknownInstrument
from ..models.investments import (
    InstrumentId,
    InstrumentQuote,
    ProjectionRequest,
    ProjectionResult,
    RankedComparison,
)
from .growth import project_yearly_values
from .rates import RISK_ADJUSTMENT_STEP, adjust_rate


def compare(
    request: ProjectionRequest,
    quotes: Mapping[InstrumentId, InstrumentQuote],
    risk_adjustment_step: float = RISK_ADJUSTMENT_STEP,
) -> RankedComparison:
    """
    Project every selected instrument and rank them by final value

    Instruments with identical final values keep their input order.
    The call is pure: it never logs, reads the clock or performs I/O.

    Args:
        request: Validated projection request
        quotes: Quote per instrument, supplied by a rate provider
        risk_adjustment_step: Rate scale per point of risk mismatch

    Returns:
        Ranked comparison with the best instrument first

    Raises:
        UnknownInstrument: A selected instrument has no quote
    """
    # Resolve everything first so a failure never leaves partial work
    selected = []
    for instrument_id in request.selected_instrument_ids:
        quote = quotes.get(instrument_id)
        if quote is None:
            raise UnknownInstrument(
                f"No quote available for instrument {instrument_id.value!r}",
                instrument_id=instrument_id,
                available=[i.value for i in quotes],
            )
        selected.append(quote)

    results = [_project(request, quote, risk_adjustment_step) for quote in selected]

    # sorted() is stable under reverse=True, so ties stay in input order
    ranked = sorted(results, key=lambda result: result.final_value, reverse=True)
    return RankedComparison(results=tuple(ranked))


def _project(
    request: ProjectionRequest,
    quote: InstrumentQuote,
    risk_adjustment_step: float,
) -> ProjectionResult:
    effective_rate = adjust_rate(
        quote.nominal_rate_percent,
        quote.risk_level,
        request.risk_tolerance,
        step=risk_adjustment_step,
    )
    series = project_yearly_values(
        request.principal,
        effective_rate,
        request.horizon_years,
        request.compounding_frequency,
    )
    final_value = series[request.horizon_years].value

    return ProjectionResult(
        instrument_id=quote.instrument_id,
        effective_rate_percent=effective_rate,
        final_value=final_value,
        profit=final_value - request.principal,
        yearly_series=series,
        nominal_rate_percent=quote.nominal_rate_percent,
        risk_level=quote.risk_level,
        liquidity_level=quote.liquidity_level,
        tax_note=quote.tax_note,
    )
