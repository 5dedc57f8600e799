"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions. RateFetchError is the single
user-facing error of a fetch; its subclasses tag what went wrong.
"""

from typing import Optional

from cbrrates.shared.language import translate


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class RateFetchError(DomainError):
    """
    Raised when the rates of a currency could not be obtained.

    The string form is a localized message naming the currency and the
    underlying cause.

    Attributes:
        currency_id: Provider code of the currency whose request failed
        cause: Message of the underlying exception
        kind: "request", "parse" or "data"
    """
    kind = "request"
    _reason_key = "request_failed"

    def __init__(self, currency_id: str, cause: str, currency: Optional[str] = None):
        self.currency_id = currency_id
        self.cause = cause
        self.currency = currency or currency_id
        super().__init__(self.message)

    @property
    def message(self) -> str:
        reason = translate(self._reason_key, cause=self.cause)
        return translate("fetch_error", currency=self.currency, cause=reason)


class ProviderRequestError(RateFetchError):
    """Raised on network failures, timeouts and non-2xx responses."""
    kind = "request"
    _reason_key = "request_failed"


class ResponseParseError(RateFetchError):
    """Raised when the response body is not well-formed XML."""
    kind = "parse"
    _reason_key = "parse_failed"


class DataShapeError(RateFetchError):
    """Raised when the XML lacks two Value samples or holds non-numeric text."""
    kind = "data"
    _reason_key = "data_invalid"
