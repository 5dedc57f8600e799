"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O - uses adapters through interfaces.
"""

from cbrrates.application.rates_service import FetchOutcome, RatesService, get_currency_data

__all__ = [
    "FetchOutcome",
    "RatesService",
    "get_currency_data",
]
