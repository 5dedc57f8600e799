"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Per-currency rate and day-over-day change
- The two-currency aggregate returned to callers
- The business-day window a request covers

Files that USE this module:
- cbrrates.adapters.providers.* (providers build these models)
- cbrrates.application.rates_service (returns the aggregate)
- cbrrates.shared.business_days (builds DateWindow)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import math  # NaN sentinel checks
from dataclasses import dataclass, field  # Decorator for creating data classes
from datetime import date  # Calendar dates for the request window

NOT_AVAILABLE = float("nan")


@dataclass(frozen=True)
class CurrencyRate:
    """
    Latest rate of one currency and its change against the previous sample.

    Attributes:
        latest: Most recent rate in roubles (NaN when not available)
        delta: latest minus the previous business day's rate (NaN when not available)
    """
    latest: float = NOT_AVAILABLE
    delta: float = NOT_AVAILABLE

    @property
    def available(self) -> bool:
        return not (math.isnan(self.latest) or math.isnan(self.delta))


@dataclass(frozen=True)
class CurrencyData:
    """
    Rates of both tracked currencies from a single fetch.

    Attributes:
        usd: US dollar rate
        eur: Euro rate
    """
    usd: CurrencyRate = field(default_factory=CurrencyRate)
    eur: CurrencyRate = field(default_factory=CurrencyRate)

    # Flat accessors
    @property
    def USD(self) -> float:
        return self.usd.latest

    @property
    def USDDelta(self) -> float:
        return self.usd.delta

    @property
    def EUR(self) -> float:
        return self.eur.latest

    @property
    def EURDelta(self) -> float:
        return self.eur.delta


@dataclass(frozen=True)
class DateWindow:
    """Closed range of two business days requested from the provider."""
    start: date
    end: date

    def as_tuple(self) -> tuple[date, date]:
        """Return the window as ``(start, end)``."""
        return (self.start, self.end)
