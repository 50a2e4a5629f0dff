"""
Canonical data models for investment projections.

Quotes are supplied by a rate provider, requests come from the caller,
and every result is derived once by the comparator and never mutated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ..errors import InvalidInput, UnknownInstrument

MAX_HORIZON_YEARS = 50


class InstrumentId(Enum):
    """Closed set of supported investment instruments."""
    NIFTY50 = "nifty50"
    SENSEX = "sensex"
    EQUITY_MF = "equityMF"
    DEBT_MF = "debtMF"
    HYBRID_MF = "hybridMF"
    REAL_ESTATE = "realEstate"
    FIXED_DEPOSIT = "fixedDeposit"
    GOLD = "gold"
    PPF = "ppf"
    NPS = "nps"

    @classmethod
    def parse(cls, value: Union["InstrumentId", str]) -> "InstrumentId":
        """Resolve a member or its wire value, raising UnknownInstrument otherwise."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownInstrument(
                f"Unknown instrument: {value!r}",
                instrument_id=value,
                available=[member.value for member in cls],
            ) from None

    @property
    def config_key(self) -> str:
        """Snake-case key used by configuration sections."""
        return self.name.lower()


@dataclass(frozen=True)
class InstrumentQuote:
    """Nominal annual rate and characteristics for one instrument."""
    instrument_id: InstrumentId
    nominal_rate_percent: float
    risk_level: int          # 1 (lowest) .. 10
    liquidity_level: int     # 1 (locked in) .. 10 (most liquid)
    tax_note: str = ""


@dataclass(frozen=True)
class ProjectionRequest:
    """User-supplied projection parameters."""
    principal: float
    horizon_years: int
    risk_tolerance: int
    selected_instrument_ids: tuple[InstrumentId, ...]
    compounding_frequency: int = 1

    def __post_init__(self) -> None:
        _require_number("principal", self.principal)
        if self.principal <= 0:
            raise InvalidInput("principal must be positive",
                               field="principal", value=self.principal)

        _require_int("horizon_years", self.horizon_years)
        if self.horizon_years < 0 or self.horizon_years > MAX_HORIZON_YEARS:
            raise InvalidInput(f"horizon_years must be between 0 and {MAX_HORIZON_YEARS}",
                               field="horizon_years", value=self.horizon_years)

        _require_int("risk_tolerance", self.risk_tolerance)
        if self.risk_tolerance < 1 or self.risk_tolerance > 10:
            raise InvalidInput("risk_tolerance must be between 1 and 10",
                               field="risk_tolerance", value=self.risk_tolerance)

        _require_int("compounding_frequency", self.compounding_frequency)
        if self.compounding_frequency <= 0:
            raise InvalidInput("compounding_frequency must be positive",
                               field="compounding_frequency", value=self.compounding_frequency)

        selected = tuple(InstrumentId.parse(i) for i in self.selected_instrument_ids)
        if not selected:
            raise InvalidInput("at least one instrument must be selected",
                               field="selected_instrument_ids", value=selected)
        if len(set(selected)) != len(selected):
            raise InvalidInput("selected instruments must be unique",
                               field="selected_instrument_ids",
                               value=[i.value for i in selected])
        object.__setattr__(self, "selected_instrument_ids", selected)


@dataclass(frozen=True)
class YearlyValue:
    """Projected value at the end of a given year."""
    year: int
    value: float


@dataclass(frozen=True)
class ProjectionResult:
    """Projection of one instrument over the requested horizon."""
    instrument_id: InstrumentId
    effective_rate_percent: float
    final_value: float
    profit: float
    yearly_series: tuple[YearlyValue, ...]
    nominal_rate_percent: float
    risk_level: int
    liquidity_level: int
    tax_note: str = ""


@dataclass(frozen=True)
class RankedComparison:
    """Projection results ordered by final value, best first."""
    results: tuple[ProjectionResult, ...]

    @property
    def best(self) -> ProjectionResult:
        return self.results[0]


def _require_number(field: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{field} must be a number", field=field, value=value)
    if value != value or value in (float("inf"), float("-inf")):
        raise InvalidInput(f"{field} must be finite", field=field, value=value)


def _require_int(field: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{field} must be an integer", field=field, value=value)
