"""
Business Days - CBR publication day helpers

The CBR publishes no rate dated Sunday or Monday (the Saturday rate covers
both). Public holidays are not modelled: on such days the provider may return
fewer than two samples.

Files that USE this module:
- cbrrates.adapters.providers.cbr (date window for each request)
- tests.test_business_days (unit tests)

Files that this module USES:
- cbrrates.domain.models (DateWindow)
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from cbrrates.domain.models import DateWindow

# date.weekday(): Monday == 0, Sunday == 6
_SHIFT_BACK_DAYS = {6: 1, 0: 2}


def last_working_day(day: date) -> date:
    """Return ``day`` moved back to Saturday when it falls on Sunday or Monday."""

    return day - timedelta(days=_SHIFT_BACK_DAYS.get(day.weekday(), 0))


def date_window(today: Optional[date] = None) -> DateWindow:
    """
    Build the two-sample window ending on the latest CBR business day.

    Args:
        today: Basis date (defaults to the current local date)

    Returns:
        DateWindow whose end is today's adjusted date and whose start is the
        adjusted day before it
    """
    today = today or date.today()
    end = last_working_day(today)
    start = last_working_day(end - timedelta(days=1))
    return DateWindow(start=start, end=end)
