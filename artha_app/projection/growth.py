"""Compound growth projection"""

import math

from ..errors import InvalidInput
from ..models.investments import YearlyValue


def _validate(principal: float, horizon_years: int, compounding_frequency: int) -> None:
    if (isinstance(principal, bool) or not isinstance(principal, (int, float))
            or not math.isfinite(principal) or principal <= 0):
        raise InvalidInput("principal must be a positive finite number",
                           field="principal", value=principal)

    if isinstance(horizon_years, bool) or not isinstance(horizon_years, int) or horizon_years < 0:
        raise InvalidInput("horizon_years must be a non-negative integer",
                           field="horizon_years", value=horizon_years)

    if (isinstance(compounding_frequency, bool) or not isinstance(compounding_frequency, int)
            or compounding_frequency <= 0):
        raise InvalidInput("compounding_frequency must be a positive integer",
                           field="compounding_frequency", value=compounding_frequency)


def compound_value(
    principal: float,
    annual_rate_percent: float,
    years: int,
    compounding_frequency: int = 1,
) -> float:
    """
    Calculate compounded value after a whole number of years

    value = principal * (1 + r/n) ** (n * years), with r = rate / 100

    Args:
        principal: Initial investment
        annual_rate_percent: Annual rate in percent
        years: Number of years to compound
        compounding_frequency: Compounding periods per year

    Returns:
        Compounded value at full floating-point precision
    """
    _validate(principal, years, compounding_frequency)
    return _grow(principal, annual_rate_percent, years, compounding_frequency)


def project_yearly_values(
    principal: float,
    annual_rate_percent: float,
    horizon_years: int,
    compounding_frequency: int = 1,
) -> tuple[YearlyValue, ...]:
    """
    Project the value at the end of every year from 0 to horizon_years

    Values are not rounded; rounding belongs to presentation only.

    Args:
        principal: Initial investment
        annual_rate_percent: Annual rate in percent
        horizon_years: Last year of the projection (inclusive)
        compounding_frequency: Compounding periods per year

    Returns:
        Tuple of horizon_years + 1 yearly values, year 0 first
    """
    _validate(principal, horizon_years, compounding_frequency)

    return tuple(
        YearlyValue(year=year, value=_grow(principal, annual_rate_percent, year, compounding_frequency))
        for year in range(horizon_years + 1)
    )


def _grow(principal: float, annual_rate_percent: float, years: int, n: int) -> float:
    # (1 + r/n) ** 0 == 1.0, so year 0 returns the principal exactly
    r = annual_rate_percent / 100
    return principal * (1 + r / n) ** (n * years)
