"""
Input error classifications for projection requests.

These exceptions are raised before any projection is computed, so a
failing call never yields a partial comparison.
"""

from typing import Any, Optional, Dict


class InputValidationError(Exception):
    """Base class for caller-supplied input that cannot be projected."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidInput(InputValidationError):
    """A request parameter is outside its valid domain."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class UnknownInstrument(InputValidationError):
    """A requested instrument has no matching quote."""

    def __init__(self, message: str, instrument_id: Any = None,
                 available: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.instrument_id = instrument_id
        self.available = available or []
