"""Render "what time is it for them" strings.

Turns (identity, instant, options) into a short clock string or a long
weekday + date + clock string, observed in the identity's registered zone.
Locale spelling comes from Babel/CLDR; zone rules from zoneinfo.

The short form is always contained verbatim in the long form.

Key class: FormatOptions.
Key functions: format_user_time(), format_zone_time().
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Union
from zoneinfo import ZoneInfo

from babel import Locale
from babel.dates import format_date, format_skeleton, get_datetime_format

from .locale_utils import DEFAULT_LOCALE, parse_locale

if TYPE_CHECKING:
    from .registry import TimezoneRegistry
    from .settings import DisplaySettings

# Aware datetime, naive datetime (UTC) or Unix timestamp in seconds
Instant = Union[datetime, float, int]


class RenderError(Exception):
    """The zone id or the instant cannot be formatted."""

    def __init__(self, message: str, zone_id: str = "", identity_id: str = "") -> None:
        self.zone_id = zone_id
        self.identity_id = identity_id
        if identity_id:
            message = f"{message} (identity {identity_id!r})"
        super().__init__(message)


@dataclass(frozen=True)
class FormatOptions:
    locale: str = DEFAULT_LOCALE
    use_24_hour: bool = False
    show_offset: bool = False
    include_full_date: bool = False

    @classmethod
    def from_settings(
        cls,
        settings: DisplaySettings,
        locale: str,
        include_full_date: bool = False,
    ) -> FormatOptions:
        return cls(
            locale=locale,
            use_24_hour=settings.use_24_hour,
            show_offset=settings.show_offset,
            include_full_date=include_full_date,
        )


def format_user_time(
    registry: TimezoneRegistry,
    identity_id: str,
    instant: Instant,
    options: FormatOptions,
) -> str | None:
    """Format ``instant`` in the zone registered for ``identity_id``.

    Returns None when the identity has no zone (render nothing).

    Raises:
        RenderError: The stored zone id is unknown to the zoneinfo database,
            or the instant falls outside the representable date range.
    """
    tz_name = registry.get(identity_id)
    if not tz_name:
        return None
    return format_zone_time(tz_name, instant, options, identity_id=identity_id)


def format_zone_time(
    tz_name: str,
    instant: Instant,
    options: FormatOptions,
    identity_id: str = "",
) -> str:
    """Format ``instant`` as observed in ``tz_name``."""
    zone = _load_zone(tz_name, identity_id)
    try:
        local = _to_utc(instant).astimezone(zone)
    except (OverflowError, OSError, ValueError) as e:
        raise RenderError(
            f"cannot place instant {instant!r} in {tz_name!r}: {e}",
            tz_name,
            identity_id,
        ) from e
    locale = parse_locale(options.locale)

    clock = format_skeleton(
        "Hm" if options.use_24_hour else "hm",
        local,
        tzinfo=zone,
        locale=locale,
    )
    if options.show_offset:
        clock = f"{clock} {_gmt_offset(local, locale)}"

    if not options.include_full_date:
        return clock

    date_text = format_date(local.date(), format="full", locale=locale)
    glue = _unquote(get_datetime_format("full", locale=locale))
    return glue.replace("{0}", clock).replace("{1}", date_text)


def _load_zone(tz_name: str, identity_id: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz_name)
    except (KeyError, ValueError, OSError) as e:
        raise RenderError(f"unknown timezone {tz_name!r}: {e}", tz_name, identity_id) from e


def _unquote(pattern: str) -> str:
    """Drop CLDR literal quotes; a doubled quote stands for one apostrophe."""
    return "'".join(part.replace("'", "") for part in pattern.split("''"))


def _to_utc(instant: Instant) -> datetime:
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            return instant.replace(tzinfo=timezone.utc)
        return instant
    return datetime.fromtimestamp(instant, tz=timezone.utc)


def _gmt_offset(local: datetime, locale: Locale) -> str:
    """Short GMT offset such as ``GMT+1``, ``GMT+5:30`` or plain ``GMT``."""
    gmt = locale.zone_formats.get("gmt", "GMT%s")
    offset = local.utcoffset() or timedelta(0)
    total_minutes = int(offset.total_seconds()) // 60
    if total_minutes == 0:
        return gmt % ""
    sign = "+" if total_minutes > 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    text = f"{sign}{hours}" if minutes == 0 else f"{sign}{hours}:{minutes:02d}"
    return gmt % text
