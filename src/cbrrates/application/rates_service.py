"""
Rates Service - Business Logic for Exchange Rate Operations

This module exposes the public fetch operation: the latest USD and EUR
rates with their day-over-day change, either raised-on-failure (fetch) or
as a tagged outcome (fetch_outcome).

Files that USE this module:
- Host applications (dashboard widgets, bots)
- tests.test_rates_service (unit tests)

Files that this module USES:
- cbrrates.adapters.providers.base (CurrencyDataService interface)
- cbrrates.adapters.providers.cbr (CBRProvider default provider)
- cbrrates.domain (CurrencyData, RateFetchError)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from dataclasses import dataclass  # Decorator for creating data classes
from typing import Optional  # Type hints for optional values

from cbrrates.adapters.providers.base import CurrencyDataService  # Provider interface
from cbrrates.adapters.providers.cbr import CBRProvider  # Central Bank of Russia provider
from cbrrates.domain.errors import RateFetchError  # User-facing fetch error
from cbrrates.domain.models import CurrencyData  # Two-currency aggregate

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchOutcome:
    """
    Result of a fetch: exactly one of data or error is set.

    Attributes:
        data: Both currencies' rates on success
        error: The user-facing error on failure
    """
    data: Optional[CurrencyData] = None
    error: Optional[RateFetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RatesService:
    """
    High-level service returning the tracked currencies' rates.
    Holds no state between calls; each fetch issues fresh requests.
    """
    def __init__(self, provider: Optional[CurrencyDataService] = None):
        """
        Initialize rates service with a provider.

        Args:
            provider: CurrencyDataService instance (defaults to CBRProvider)
        """
        self.provider = provider or CBRProvider()

    def fetch(self) -> CurrencyData:
        """
        Fetch USD and EUR rates with their daily change.

        Returns:
            CurrencyData with both currencies populated

        Raises:
            RateFetchError: If either currency's request fails
        """
        return self.provider.get_data()

    def fetch_outcome(self) -> FetchOutcome:
        """Like fetch(), but returns the error instead of raising it."""
        try:
            return FetchOutcome(data=self.fetch())
        except RateFetchError as e:
            log.warning("Currency fetch failed (%s): %s", e.kind, e)
            return FetchOutcome(error=e)


def get_currency_data() -> CurrencyData:
    """
    Fetch current CBR rates with a default service.

    Raises:
        RateFetchError: If either currency's request fails
    """
    return RatesService().fetch()
