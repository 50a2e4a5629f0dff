"""
Normalization of raw comparison payloads.

Accepts the camelCase keys sent by the web client as well as snake_case
keys, and produces a validated ProjectionRequest.
"""

from typing import Any

from ..errors import InvalidInput
from ..models.investments import MAX_HORIZON_YEARS, InstrumentId, ProjectionRequest

_ALIASES = {
    "principal": ("principal", "investmentAmount", "initialInvestment"),
    "horizon_years": ("horizon_years", "duration", "horizonYears"),
    "risk_tolerance": ("risk_tolerance", "riskTolerance"),
    "selected_instrument_ids": ("selected_instrument_ids", "selectedInvestments", "selectedInstrumentIds"),
    "compounding_frequency": ("compounding_frequency", "compoundingFrequency"),
}

_REQUIRED = ("principal", "horizon_years", "risk_tolerance", "selected_instrument_ids")


def _lookup(payload: dict[str, Any], field: str) -> Any:
    for key in _ALIASES[field]:
        if key in payload and payload[key] is not None:
            return payload[key]
    return None


def _as_number(field: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidInput(f"{field} must be a number", field=field, value=value)
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{field} must be a number", field=field, value=value) from None


def _as_int(field: str, value: Any) -> int:
    number = _as_number(field, value)
    if isinstance(number, float):
        if not number.is_integer():
            raise InvalidInput(f"{field} must be a whole number", field=field, value=value)
        return int(number)
    return number


def parse_projection_request(
    payload: dict[str, Any],
    default_compounding: int = 1,
    max_horizon_years: int = MAX_HORIZON_YEARS,
) -> ProjectionRequest:
    """
    Build a ProjectionRequest from a raw payload.

    Args:
        payload: Request body as decoded JSON
        default_compounding: Compounding frequency when the payload has none
        max_horizon_years: Longest horizon accepted, capped at MAX_HORIZON_YEARS

    Returns:
        Validated projection request

    Raises:
        InvalidInput: A field is missing or out of range
        UnknownInstrument: A selected instrument id is not recognised
    """
    if not isinstance(payload, dict):
        raise InvalidInput("request payload must be an object", value=payload)

    missing = [field for field in _REQUIRED if _lookup(payload, field) is None]
    if missing:
        raise InvalidInput(
            f"Missing required fields: {', '.join(missing)}",
            field=missing[0],
            context={"missing_fields": missing},
        )

    selected = _lookup(payload, "selected_instrument_ids")
    if isinstance(selected, str) or not isinstance(selected, (list, tuple)):
        raise InvalidInput("selected instruments must be a list",
                           field="selected_instrument_ids", value=selected)

    horizon_years = _as_int("horizon_years", _lookup(payload, "horizon_years"))
    if horizon_years > max_horizon_years:
        raise InvalidInput(f"horizon_years must not exceed {max_horizon_years}",
                           field="horizon_years", value=horizon_years)

    compounding = _lookup(payload, "compounding_frequency")

    return ProjectionRequest(
        principal=_as_number("principal", _lookup(payload, "principal")),
        horizon_years=horizon_years,
        risk_tolerance=_as_int("risk_tolerance", _lookup(payload, "risk_tolerance")),
        selected_instrument_ids=tuple(InstrumentId.parse(i) for i in selected),
        compounding_frequency=(
            _as_int("compounding_frequency", compounding) if compounding is not None
            else default_compounding
        ),
    )
