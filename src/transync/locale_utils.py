"""Locale utilities for human-readable language reports.

Language codes in translation documents are arbitrary identifiers; they are
never validated or rewritten. These helpers only decorate them for display,
using Babel's CLDR data when the optional `babel` extra is installed.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from transync.core.babel_compat import (
    get_locale_class,
    get_unknown_locale_error,
    is_babel_available,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "describe_language",
    "get_babel_locale",
    "language_display_name",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    locale_class = get_locale_class()
    return locale_class.parse(normalize_locale(locale_code))


def language_display_name(language: str, *, display_locale: str = "en") -> str | None:
    """English (or display_locale) name of a language code.

    Args:
        language: Language code as written in the document
        display_locale: Locale the name is rendered in

    Returns:
        Display name, or None when Babel does not know the code

    Raises:
        BabelImportError: If Babel is not installed
    """
    unknown_locale_error = get_unknown_locale_error()
    try:
        return get_babel_locale(language).get_display_name(display_locale)
    except (unknown_locale_error, ValueError, TypeError) as e:
        logger.debug("No display name for language %r: %s", language, e)
        return None


def describe_language(language: str) -> str:
    """Label a language code for reports.

    Returns "ar (Arabic)" when Babel is installed and knows the code,
    otherwise the code itself.

    Example:
        >>> describe_language("x-custom")
        'x-custom'
    """
    if not is_babel_available():
        return language
    name = language_display_name(language)
    return f"{language} ({name})" if name else language
