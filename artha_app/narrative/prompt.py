"""Prompt construction for investment summaries."""

from typing import Optional

from ..data.catalog import InstrumentProfile, display_name
from ..models.investments import InstrumentId, ProjectionRequest, RankedComparison


def build_summary_prompt(
    request: ProjectionRequest,
    comparison: RankedComparison,
    max_words: int = 150,
    catalog: Optional[dict[InstrumentId, InstrumentProfile]] = None,
) -> str:
    """
    Build an advisor prompt from the best instrument and the alternatives.

    Args:
        request: The projection request the comparison was computed for
        comparison: Ranked comparison to summarise
        max_words: Word limit requested from the model
        catalog: Instrument profiles for display names, defaults to the built-in catalog

    Returns:
        Prompt text
    """
    best = comparison.best
    alternatives = "\n".join(
        f"    - {display_name(result.instrument_id, catalog)}: {result.effective_rate_percent:.2f}% p.a., "
        f"final value ₹{result.final_value:.2f}, risk {result.risk_level}/10, "
        f"liquidity {result.liquidity_level}/10"
        for result in comparison.results[1:]
    ) or "    - None"

    return f"""
    You are a financial advisor for Indian retail investors. Review this investment
    comparison and write a short, personalised summary in simple Indian English.

    Initial Investment: ₹{request.principal}
    Duration: {request.horizon_years} years
    Risk Tolerance: {request.risk_tolerance}/10 (higher means more tolerant of risk)

    Best Performing Investment: {display_name(best.instrument_id, catalog)}
    - Projected Return Rate: {best.effective_rate_percent:.2f}%
    - Final Value: ₹{best.final_value:.2f}
    - Risk Level: {best.risk_level}/10
    - Liquidity: {best.liquidity_level}/10

    Other options considered:
{alternatives}

    Explain why this option fits their risk profile, mention Indian tax treatment
    (80C, LTCG, STCG) where relevant, and compare it with the other options.
    Account for Indian market conditions and inflation. Keep it under {max_words} words.
    End with a reminder to consult a SEBI-registered financial advisor before investing.
    """.strip()
