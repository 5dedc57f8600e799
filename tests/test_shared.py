"""
Shared Utility Tests - Settings, Translations, Validators, Errors and Logging

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- cbrrates.config (Settings)
- cbrrates.shared (translate, validators, setup_logging)
- cbrrates.domain.errors (localized error messages)
- pytest (testing framework)
"""
import logging  # Standard library logging (handler inspection)
from logging.handlers import RotatingFileHandler  # File handler type check

import pytest  # Testing framework for writing and running tests
from pydantic import ValidationError  # Raised for invalid settings

from unittest.mock import patch  # Patching settings values

from cbrrates.config import Settings, settings
from cbrrates.domain.errors import DataShapeError, ProviderRequestError, RateFetchError, ResponseParseError
from cbrrates.shared.language import translate
from cbrrates.shared.logging_conf import setup_logging
from cbrrates.shared.validators import parse_decimal, to_single, validate_currency_id


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.http_timeout_seconds == 10
        assert s.max_response_bytes == 1024 * 1024

    def test_language_is_normalized(self):
        assert Settings(DEFAULT_LANGUAGE="EN").default_language == "en"

    def test_invalid_language(self):
        with pytest.raises(ValidationError):
            Settings(DEFAULT_LANGUAGE="de")

    def test_timeout_bounds(self):
        with pytest.raises(ValidationError):
            Settings(HTTP_TIMEOUT_SECONDS=0)


class TestTranslate:
    def test_english(self):
        result = translate("fetch_error", lang="en", currency="euro", cause="down")
        assert result == "Currency request failed for euro: down"

    def test_russian(self):
        result = translate("fetch_error", lang="ru", currency="евро", cause="x")
        assert result == "Ошибка запроса валюты евро: x"

    def test_unknown_language_falls_back_to_english(self):
        assert translate("currency_usd", lang="xx") == "US dollar"

    def test_unknown_key_returns_key(self):
        assert translate("no_such_key", lang="en") == "no_such_key"

    def test_missing_parameter_returns_template(self):
        assert translate("fetch_error", lang="en") == "Currency request failed for {currency}: {cause}"


class TestValidators:
    def test_parse_decimal_comma(self):
        assert parse_decimal("74,50") == pytest.approx(74.5)
        assert parse_decimal(" 65,1234 ") == pytest.approx(65.1234)

    def test_parse_decimal_dot(self):
        assert parse_decimal("1.5") == pytest.approx(1.5)

    @pytest.mark.parametrize("text", ["", "   ", None, "abc", "NaN", "nan", "inf", "-Infinity", "1_0", "1e3", "1,2,3"])
    def test_parse_decimal_invalid(self, text):
        with pytest.raises(ValueError):
            parse_decimal(text)

    def test_to_single(self):
        assert to_single(74.5) == 74.5
        assert to_single(0.1) != 0.1
        assert to_single(0.1) == pytest.approx(0.1, abs=1e-7)
        assert to_single(to_single(65.12)) == to_single(65.12)

    def test_validate_currency_id(self):
        assert validate_currency_id("R01235")
        assert validate_currency_id("R01239")
        assert validate_currency_id("R01010A")
        assert not validate_currency_id("")
        assert not validate_currency_id("USD")
        assert not validate_currency_id("R0123")


class TestErrors:
    def test_hierarchy_and_kinds(self):
        assert issubclass(ProviderRequestError, RateFetchError)
        assert ProviderRequestError("R01235", "x").kind == "request"
        assert ResponseParseError("R01235", "x").kind == "parse"
        assert DataShapeError("R01235", "x").kind == "data"

    def test_localized_message(self):
        with patch.object(settings, "default_language", "en"):
            err = ResponseParseError("R01239", "bad token", "euro")
        assert str(err) == "Currency request failed for euro: malformed XML (bad token)"
        assert err.currency_id == "R01239"
        assert err.cause == "bad token"

    def test_currency_defaults_to_id(self):
        err = ProviderRequestError("R01235", "down")
        assert err.currency == "R01235"
        assert "R01235" in str(err)


class TestSetupLogging:
    def test_file_logging(self, tmp_path):
        setup_logging(log_dir=tmp_path, log_to_stdout=False)
        root = logging.getLogger()
        try:
            assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
            assert (tmp_path / "cbrrates.log").exists()
        finally:
            for handler in list(root.handlers):
                root.removeHandler(handler)
                handler.close()
