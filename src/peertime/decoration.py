"""Per-event local-time tags.

For each displayed event the host hands over the author's identity id and
the event timestamp; we answer with a short inline tag and a longer hover
text, or None when there is nothing to show.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from .locale_utils import LocaleGetter, resolve_locale
from .registry import TimezoneRegistry
from .render import FormatOptions, Instant, RenderError, format_user_time
from .settings import DisplaySettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decoration:
    inline: str  # e.g. "(13:00)"
    tooltip: str  # long form plus zone id


def decorate(
    registry: TimezoneRegistry,
    identity_id: str,
    timestamp: Instant | None,
    settings: DisplaySettings,
    locale_getter: LocaleGetter | None = None,
) -> Decoration | None:
    """Build the local-time tag for one event, or None.

    A missing timestamp means "now". Unknown zone ids and out-of-range
    instants are logged and rendered as nothing.
    """
    if not settings.show_time_inline or not identity_id:
        return None

    tz = registry.get(identity_id)
    if not tz:
        return None

    if timestamp is None:
        timestamp = datetime.now(timezone.utc)
    locale = settings.locale or resolve_locale(locale_getter)

    try:
        short = format_user_time(
            registry, identity_id, timestamp, FormatOptions.from_settings(settings, locale)
        )
        long = format_user_time(
            registry,
            identity_id,
            timestamp,
            FormatOptions.from_settings(settings, locale, include_full_date=True),
        )
    except RenderError as e:
        logger.warning("Cannot render local time: %s", e)
        return None

    if not short or not long:
        return None
    return Decoration(inline=f"({short})", tooltip=f"{long} ({tz})")
