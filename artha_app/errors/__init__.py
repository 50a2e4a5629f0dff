"""
Error classification for the investment comparison engine.

Input errors are raised synchronously by the engine and are always
recoverable by the caller. Collaborator failures come from the remote
rate and narrative services and are handled by substituting fallbacks.
"""

from .input_errors import (
    InputValidationError,
    InvalidInput,
    UnknownInstrument,
)
from .collaborator_failures import (
    CollaboratorFailureError,
    RateFetchError,
    SummaryGenerationError,
)

__all__ = [
    # Input Errors
    "InputValidationError",
    "InvalidInput",
    "UnknownInstrument",
    # Collaborator Failures
    "CollaboratorFailureError",
    "RateFetchError",
    "SummaryGenerationError",
]
