"""
Base Provider Interface for Currency Data Services

This module defines the abstract base class for currency data providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- cbrrates.adapters.providers.cbr (CBRProvider implements CurrencyDataService)
- cbrrates.application.rates_service (RatesService depends on the interface)

Files that this module USES:
- cbrrates.domain.models (CurrencyData)
"""
from abc import ABC, abstractmethod

from cbrrates.domain.models import CurrencyData


class CurrencyDataService(ABC):
    @abstractmethod
    def get_data(self) -> CurrencyData:
        """Return the latest USD and EUR rates with their daily change."""
        raise NotImplementedError
