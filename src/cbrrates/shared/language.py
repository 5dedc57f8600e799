"""
Language Management - Localized User Messages

This module holds the user-facing message catalogue (Russian and English)
and the translate helper used when building errors shown to end users.

Files that USE this module:
- cbrrates.domain.errors (RateFetchError builds its localized message)

Files that this module USES:
- cbrrates.config (settings for the default language)
"""
import logging
from typing import Any, Dict, Optional

from cbrrates.config import settings

logger = logging.getLogger(__name__)

# Language constants
LANG_RUSSIAN = "ru"
LANG_ENGLISH = "en"

# Translation dictionaries
TRANSLATIONS: Dict[str, Dict[str, str]] = {
    LANG_RUSSIAN: {
        "fetch_error": "Ошибка запроса валюты {currency}: {cause}",
        "request_failed": "сервер ЦБ недоступен ({cause})",
        "parse_failed": "некорректный XML ({cause})",
        "data_invalid": "неожиданные данные ({cause})",
        "currency_usd": "доллар США",
        "currency_eur": "евро",
    },
    LANG_ENGLISH: {
        "fetch_error": "Currency request failed for {currency}: {cause}",
        "request_failed": "CBR server unavailable ({cause})",
        "parse_failed": "malformed XML ({cause})",
        "data_invalid": "unexpected data ({cause})",
        "currency_usd": "US dollar",
        "currency_eur": "euro",
    },
}


def get_language() -> str:
    """Get configured default language."""
    return settings.default_language


def translate(key: str, lang: Optional[str] = None, **kwargs: Any) -> str:
    """
    Translate a message key with optional parameters.

    Args:
        key: Translation key
        lang: Language code; defaults to settings.default_language
        **kwargs: Parameters to format into translation

    Returns:
        Translated and formatted string, or key if translation not found
    """
    current_lang = lang or get_language()
    if current_lang not in TRANSLATIONS:
        logger.warning("Language '%s' not in TRANSLATIONS, using English fallback", current_lang)
    lang_dict = TRANSLATIONS.get(current_lang, TRANSLATIONS[LANG_ENGLISH])
    template = lang_dict.get(key, key)

    try:
        return template.format(**kwargs)
    except KeyError as e:
        logger.warning("Missing parameter in translation '%s': %s", key, e)
        return template
