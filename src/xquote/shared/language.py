# src/xquote/shared/language.py
"""
Language Management - Multi-language Support

This module provides language management for user-facing text: validation
messages shown under the payin field and the labels of the entry form.
The language preference lives in memory only.

Files that USE this module:
- xquote.application.entry_controller (uses translate for validation messages and form labels)
- tests.test_shared (language manager tests)

Files that this module USES:
- xquote.config (default_language setting)
"""
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)

# Language constants
LANG_ENGLISH = "en"
LANG_FARSI = "fa"

SUPPORTED_LANGUAGES = (LANG_ENGLISH, LANG_FARSI)


# Translation dictionaries
TRANSLATIONS: Dict[str, Dict[str, str]] = {
    LANG_ENGLISH: {
        "minimum_order": "Minimum order is {amount} {currency}",
        "maximum_order": "Maximum order is {amount} {currency}",
        "send_label": "You Send",
        "receive_label": "They get",
        "rate_label": "Est. rate",
        "fee_label": "Service fee",
    },
    LANG_FARSI: {
        "minimum_order": "حداقل سفارش {amount} {currency} است",
        "maximum_order": "حداکثر سفارش {amount} {currency} است",
        "send_label": "شما می‌فرستید",
        "receive_label": "دریافت می‌کنند",
        "rate_label": "نرخ تخمینی",
        "fee_label": "کارمزد خدمات",
    }
}


class LanguageManager:
    """Holds the current language preference."""

    def __init__(self, default_language: str = None):
        """
        Initialize language manager.

        Args:
            default_language: Language to start with (defaults to settings.default_language)
        """
        if default_language is None:
            from xquote.config import settings
            default_language = settings.default_language
        self._current_language: str = (
            default_language if default_language in SUPPORTED_LANGUAGES else LANG_ENGLISH
        )

    def get_language(self) -> str:
        """
        Get current language.

        Returns:
            Current language code ('en' or 'fa')
        """
        return self._current_language

    def set_language(self, lang: str) -> bool:
        """
        Set language preference.

        Args:
            lang: Language code ('en' or 'fa')

        Returns:
            True if language was set successfully, False if invalid
        """
        if lang not in SUPPORTED_LANGUAGES:
            logger.warning("Invalid language code: %s", lang)
            return False

        old_lang = self._current_language
        self._current_language = lang
        logger.info("Language changed from %s to %s", old_lang, lang)
        return True

    def translate(self, key: str, **kwargs: Any) -> str:
        """
        Translate a message key with optional parameters.

        Args:
            key: Translation key
            **kwargs: Parameters to format into translation

        Returns:
            Translated and formatted string, or key if translation not found
        """
        lang_dict = TRANSLATIONS.get(self._current_language, TRANSLATIONS[LANG_ENGLISH])
        template = lang_dict.get(key, key)

        try:
            return template.format(**kwargs)
        except KeyError as e:
            logger.warning("Missing parameter in translation '%s': %s", key, e)
            return template


# Global language manager instance
language_manager = LanguageManager()


def get_language() -> str:
    """Get current language."""
    return language_manager.get_language()


def set_language(lang: str) -> bool:
    """Set language."""
    return language_manager.set_language(lang)


def translate(key: str, **kwargs: Any) -> str:
    """Translate a message key."""
    return language_manager.translate(key, **kwargs)
