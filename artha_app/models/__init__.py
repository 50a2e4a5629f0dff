"""
Data models and contracts module.

Immutable data structures for instruments, quotes, projection requests
and ranked results. Follows functional programming principles with
frozen dataclasses.
"""
from .investments import (
    InstrumentId,
    InstrumentQuote,
    ProjectionRequest,
    ProjectionResult,
    RankedComparison,
    YearlyValue,
)

__all__ = [
    "InstrumentId",
    "InstrumentQuote",
    "ProjectionRequest",
    "ProjectionResult",
    "RankedComparison",
    "YearlyValue",
]
