"""
Provider Adapters - External API Clients

This package contains adapters for external exchange rate services.
All providers implement the CurrencyDataService interface.
"""

from cbrrates.adapters.providers.base import CurrencyDataService
from cbrrates.adapters.providers.cbr import CBRProvider

__all__ = [
    "CurrencyDataService",
    "CBRProvider",
]
