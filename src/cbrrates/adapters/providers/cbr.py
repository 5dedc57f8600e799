"""
CBR Provider - Central Bank of Russia Exchange Rates

This module implements the client for the cbr.ru XML_dynamic endpoint. For
each tracked currency it requests the last two business days, reads the two
<Value> samples and reports the newer one with its change.

Files that USE this module:
- cbrrates.application.rates_service (RatesService defaults to CBRProvider)
- tests.test_providers (unit tests)

Files that this module USES:
- cbrrates.adapters.providers.base (CurrencyDataService interface)
- cbrrates.config (settings for timeout and response size limit)
- cbrrates.domain (models and errors)
- cbrrates.shared (business day window, validators, translations)
"""
import logging
import xml.etree.ElementTree as ET
from typing import List, Optional

import requests

from cbrrates.adapters.providers.base import CurrencyDataService
from cbrrates.config import settings
from cbrrates.domain.errors import DataShapeError, ProviderRequestError, ResponseParseError
from cbrrates.domain.models import CurrencyData, CurrencyRate, DateWindow
from cbrrates.shared.business_days import date_window
from cbrrates.shared.language import translate
from cbrrates.shared.validators import parse_decimal, to_single, validate_currency_id

log = logging.getLogger(__name__)


class CBRProvider(CurrencyDataService):
    """
    Client for https://www.cbr.ru/scripts/XML_dynamic.asp.

    The response for a window looks like:
      <ValCurs ID="R01235" ...>
        <Record Date="17.10.2026" Id="R01235"><Nominal>1</Nominal><Value>65,12</Value></Record>
        <Record Date="18.10.2026" Id="R01235"><Nominal>1</Nominal><Value>65,00</Value></Record>
      </ValCurs>
    Records are in ascending date order.
    """

    URL = "http://www.cbr.ru/scripts/XML_dynamic.asp?date_req1=%s&date_req2=%s&VAL_NM_RQ=%s"
    ID_USD = "R01235"
    ID_EUR = "R01239"
    DATE_FORMAT = "%d/%m/%Y"

    _NAME_KEYS = {ID_USD: "currency_usd", ID_EUR: "currency_eur"}

    def __init__(
        self,
        url: Optional[str] = None,
        usd_id: Optional[str] = None,
        eur_id: Optional[str] = None,
        timeout: Optional[int] = None,
        max_response_bytes: Optional[int] = None,
    ):
        """
        Initialize CBR provider.

        Args:
            url: Optional URL template with three %s slots (from, to, currency id)
            usd_id: Optional CBR code for the US dollar
            eur_id: Optional CBR code for the euro
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            max_response_bytes: Optional body size limit (defaults to settings.max_response_bytes)

        Raises:
            ValueError: If a currency code is malformed or the URL template has the wrong slots
        """
        self.url = url or self.URL
        if self.url.count("%s") != 3:
            raise ValueError("CBR URL template must contain exactly three %s placeholders")
        self.usd_id = usd_id or self.ID_USD
        self.eur_id = eur_id or self.ID_EUR
        for currency_id in (self.usd_id, self.eur_id):
            if not validate_currency_id(currency_id):
                raise ValueError(f"Invalid CBR currency id: {currency_id!r}")
        self.timeout = timeout or settings.http_timeout_seconds
        self.max_response_bytes = max_response_bytes or settings.max_response_bytes

    def build_url(self, window: DateWindow, currency_id: str) -> str:
        """
        Insert the request parameters into the URL template.

        Args:
            window: Business-day window to request
            currency_id: CBR currency code

        Returns:
            Ready-to-send URL
        """
        return self.url % (
            window.start.strftime(self.DATE_FORMAT),
            window.end.strftime(self.DATE_FORMAT),
            currency_id,
        )

    def _currency_name(self, currency_id: str) -> str:
        key = self._NAME_KEYS.get(currency_id)
        return translate(key) if key else currency_id

    def _download(self, url: str, currency_id: str) -> bytes:
        """GET url and return the body, bounded by max_response_bytes."""
        name = self._currency_name(currency_id)
        try:
            resp = requests.get(url, timeout=self.timeout, stream=True)
            try:
                resp.raise_for_status()
                chunks: List[bytes] = []
                size = 0
                for chunk in resp.iter_content(chunk_size=8192):
                    size += len(chunk)
                    if size > self.max_response_bytes:
                        log.error("CBR response for %s exceeds %d bytes", currency_id, self.max_response_bytes)
                        raise ProviderRequestError(
                            currency_id, f"response larger than {self.max_response_bytes} bytes", name
                        )
                    chunks.append(chunk)
            finally:
                resp.close()
        except requests.exceptions.Timeout as e:
            log.error("CBR request for %s timed out after %d seconds", currency_id, self.timeout)
            raise ProviderRequestError(currency_id, f"timeout after {self.timeout}s", name) from e
        except requests.exceptions.RequestException as e:
            log.error("CBR request for %s failed: %s", currency_id, e)
            raise ProviderRequestError(currency_id, str(e), name) from e
        return b"".join(chunks)

    @staticmethod
    def _value_texts(root: ET.Element) -> List[str]:
        """Full text content of every element named Value (any namespace), in document order."""
        texts = []
        for elem in root.iter():
            if isinstance(elem.tag, str) and elem.tag.rsplit("}", 1)[-1] == "Value":
                texts.append("".join(elem.itertext()))
        return texts

    def fetch_currency(self, currency_id: str, window: Optional[DateWindow] = None) -> CurrencyRate:
        """
        Fetch the latest rate and daily change of one currency.

        Args:
            currency_id: CBR currency code
            window: Business-day window (defaults to the window ending today)

        Returns:
            CurrencyRate with latest = newer sample and delta = newer - older

        Raises:
            ProviderRequestError: If the HTTP request fails
            ResponseParseError: If the body is not well-formed XML
            DataShapeError: If fewer than two numeric Value samples are present
        """
        window = window or date_window()
        url = self.build_url(window, currency_id)
        log.info("Requesting CBR rates: %s", url)
        name = self._currency_name(currency_id)

        body = self._download(url, currency_id)

        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            log.error("CBR returned malformed XML for %s: %s", currency_id, e)
            raise ResponseParseError(currency_id, str(e), name) from e

        texts = self._value_texts(root)
        if len(texts) < 2:
            log.error("CBR returned %d Value element(s) for %s, expected 2", len(texts), currency_id)
            raise DataShapeError(
                currency_id, f"expected 2 Value elements for {window.start} - {window.end}, got {len(texts)}", name
            )

        try:
            older = to_single(parse_decimal(texts[0]))
            newer = to_single(parse_decimal(texts[1]))
        except ValueError as e:
            log.error("CBR returned non-numeric Value for %s: %s", currency_id, e)
            raise DataShapeError(currency_id, str(e), name) from e

        rate = CurrencyRate(latest=newer, delta=to_single(newer - older))
        log.debug("CBR %s: latest=%s delta=%s", currency_id, rate.latest, rate.delta)
        return rate

    def get_data(self) -> CurrencyData:
        """
        Fetch USD then EUR for the current business-day window.

        The EUR request is not sent if the USD request fails.

        Returns:
            CurrencyData with both currencies populated

        Raises:
            RateFetchError: If either currency cannot be fetched
        """
        window = date_window()
        usd = self.fetch_currency(self.usd_id, window)
        eur = self.fetch_currency(self.eur_id, window)
        return CurrencyData(usd=usd, eur=eur)
