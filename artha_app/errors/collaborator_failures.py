"""
Failure classifications for remote collaborators.

Rate fetching and narrative generation are best-effort remote calls.
Their failures never reach the projection engine: callers catch them
and fall back to static quotes or a canned summary.
"""

from typing import Any, Optional, Dict


class CollaboratorFailureError(Exception):
    """Base class for failures of an external service call."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False
        self.allows_fallback = True


class RateFetchError(CollaboratorFailureError):
    """Market rate retrieval failed or returned unusable data."""

    def __init__(self, message: str, source: Optional[str] = None,
                 symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
        self.symbol = symbol


class SummaryGenerationError(CollaboratorFailureError):
    """No narrative model produced a usable summary."""

    def __init__(self, message: str, models: Optional[list] = None,
                 last_error: Optional[Exception] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.models = models or []
        self.last_error = last_error
