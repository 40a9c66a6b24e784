"""
Locale resolution for revalidation.

Locales are looked up on every lifecycle event. There is no cache: content
writes are rare and a locale added in the admin must apply immediately.
"""

import logging
from typing import Any, Callable, List, Optional

from django.conf import settings
from django.db import transaction
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

DEFAULT_LOCALE_PROVIDER = 'catalog.locales.active_locale_codes'


def get_default_locale() -> str:
    return getattr(settings, 'REVALIDATION_DEFAULT_LOCALE', 'en') or 'en'


def _locale_code(locale: Any) -> str:
    if isinstance(locale, str):
        return locale
    if isinstance(locale, dict):
        return locale['code']
    return locale.code


def _read_locales(provider: Callable[[], Any]) -> List[str]:
    records = provider()
    if isinstance(records, (str, bytes, dict)):
        raise TypeError(f"Locale provider must return a list of locales, got {type(records).__name__}")
    return [_locale_code(locale) for locale in records]


def get_available_locales(provider: Optional[Callable[[], Any]] = None) -> List[str]:
    """
    Get all available locale codes.

    Args:
        provider: Callable returning locale codes or records with a 'code'
            field. Defaults to REVALIDATION_LOCALE_PROVIDER.

    Returns:
        List of locale codes, or the default locale alone if the lookup fails
    """
    try:
        if provider is None:
            provider = import_string(
                getattr(settings, 'REVALIDATION_LOCALE_PROVIDER', DEFAULT_LOCALE_PROVIDER)
            )
        if transaction.get_connection().in_atomic_block:
            # A failed query must not abort the caller's transaction
            with transaction.atomic():
                return _read_locales(provider)
        return _read_locales(provider)
    except Exception as e:
        fallback = get_default_locale()
        logger.error(f"[Revalidation] Error fetching locales, using default '{fallback}': {str(e)}")
        return [fallback]
