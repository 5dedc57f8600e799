"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Language management
- Logging configuration
- Business day calendar (cbrrates.shared.business_days)
"""

from cbrrates.shared.validators import parse_decimal, validate_currency_id
from cbrrates.shared.language import (
    get_language,
    translate,
    LANG_ENGLISH,
    LANG_RUSSIAN,
)
from cbrrates.shared.logging_conf import setup_logging

__all__ = [
    "parse_decimal",
    "validate_currency_id",
    "get_language",
    "translate",
    "LANG_ENGLISH",
    "LANG_RUSSIAN",
    "setup_logging",
]
