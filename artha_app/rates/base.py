"""Base classes for investment rate providers."""

from abc import ABC, abstractmethod

from ..models.investments import InstrumentId, InstrumentQuote

Quotes = dict[InstrumentId, InstrumentQuote]


class RateProvider(ABC):
    """Supplies a quote per instrument before each comparison."""

    name: str = "base"

    @abstractmethod
    def get_quotes(self) -> Quotes:
        """
        Return the current quote for every supported instrument.

        Raises:
            RateFetchError: The rates could not be obtained
        """
        pass
