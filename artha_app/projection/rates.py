"""Risk-adjusted rate calculation"""

RISK_ADJUSTMENT_STEP = 0.01


def adjust_rate(
    nominal_rate_percent: float,
    instrument_risk: int,
    user_risk_tolerance: int,
    step: float = RISK_ADJUSTMENT_STEP,
) -> float:
    """
    Scale a nominal rate by the gap between instrument risk and user tolerance

    adjusted = nominal * (1 + (instrument_risk - user_risk_tolerance) * step)

    The heuristic is linear and unbounded: an instrument riskier than the
    user's tolerance is modelled with a higher rate, a safer one with a
    lower rate, and extreme mismatches can produce a negative rate.

    Args:
        nominal_rate_percent: Stated annual rate in percent
        instrument_risk: Instrument risk level (1-10)
        user_risk_tolerance: User risk tolerance (1-10)
        step: Rate scale applied per point of risk difference

    Returns:
        Adjusted annual rate in percent
    """
    if instrument_risk == user_risk_tolerance:
        return nominal_rate_percent

    return nominal_rate_percent * (1 + (instrument_risk - user_risk_tolerance) * step)
