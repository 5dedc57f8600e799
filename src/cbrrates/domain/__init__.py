"""
Domain Layer - Pure Business Objects

This package contains domain models and errors.
No dependencies on infrastructure or external systems.
"""

from cbrrates.domain.models import (
    NOT_AVAILABLE,
    CurrencyData,
    CurrencyRate,
    DateWindow,
)
from cbrrates.domain.errors import (
    DataShapeError,
    DomainError,
    ProviderRequestError,
    RateFetchError,
    ResponseParseError,
)

__all__ = [
    "NOT_AVAILABLE",
    "CurrencyRate",
    "CurrencyData",
    "DateWindow",
    "DomainError",
    "RateFetchError",
    "ProviderRequestError",
    "ResponseParseError",
    "DataShapeError",
]
