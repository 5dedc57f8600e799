"""
Input Validation Utilities - Provider Data Validation

Validates CBR currency codes and converts the provider's comma-decimal
numbers to floats.

Files that USE this module:
- cbrrates.adapters.providers.cbr (currency id checks and value parsing)

Files that this module USES:
- None (pure utility functions)
"""
import re
import struct

_CURRENCY_ID_RE = re.compile(r"^R\d{5}[A-Z]?$")
_DECIMAL_RE = re.compile(r"^-?\d+([,.]\d+)?$")


def validate_currency_id(currency_id: str) -> bool:
    """
    Validate CBR currency code format.

    Args:
        currency_id: Code such as 'R01235' (USD) or 'R01239' (EUR)

    Returns:
        True if valid, False otherwise
    """
    if not currency_id:
        return False
    return bool(_CURRENCY_ID_RE.match(currency_id))


def parse_decimal(text: str) -> float:
    """
    Parse a CBR decimal string, which uses ',' as the fractional separator.

    Args:
        text: Value such as '74,50'

    Returns:
        Parsed float (e.g. 74.5)

    Raises:
        ValueError: If text is empty or not a plain decimal number
    """
    if text is None or not text.strip():
        raise ValueError("empty numeric value")
    text = text.strip()
    if not _DECIMAL_RE.match(text):
        raise ValueError(f"not a decimal number: {text!r}")
    return float(text.replace(",", "."))


def to_single(value: float) -> float:
    """Round value to the nearest single-precision (float32) number."""
    return struct.unpack("f", struct.pack("f", value))[0]
