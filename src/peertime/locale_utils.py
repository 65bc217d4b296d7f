"""Locale resolution for rendering.

Locale tags are BCP 47 (``en-US``, ``zh-TW``). The host may expose the
active display locale through a getter; when it doesn't, or the tag is
unknown to CLDR, rendering falls back to DEFAULT_LOCALE.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from babel import Locale, UnknownLocaleError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"

LocaleGetter = Callable[[], str | None]


def resolve_locale(getter: LocaleGetter | None = None) -> str:
    """Return the host's locale tag, or DEFAULT_LOCALE if it has none.

    A getter that raises or returns a non-string counts as having none.
    """
    if getter is None:
        return DEFAULT_LOCALE
    try:
        tag = getter()
    except Exception as e:
        logger.warning("Locale getter failed, using %s: %s", DEFAULT_LOCALE, e)
        return DEFAULT_LOCALE
    if not isinstance(tag, str) or not tag.strip():
        return DEFAULT_LOCALE
    return tag.strip()


def parse_locale(tag: str) -> Locale:
    """Parse a BCP 47 tag into a Babel Locale, falling back to DEFAULT_LOCALE."""
    try:
        return Locale.parse(tag.replace("_", "-"), sep="-")
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug("Unknown locale %r, using %s: %s", tag, DEFAULT_LOCALE, e)
        return Locale.parse(DEFAULT_LOCALE, sep="-")
