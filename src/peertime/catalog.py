"""Curated timezone catalog.

A small, human-friendly list of zones grouped by region so users don't have
to scroll through hundreds of IANA names. Each entry pairs a display label
with its canonical zone id. Several labels may share one zone id.

Key class: ZoneOption.
Key functions: iter_catalog(), zones_in_region(), labels_for_zone(),
find_unknown_zones().
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from zoneinfo import available_timezones


@dataclass(frozen=True)
class ZoneOption:
    """One selectable catalog entry."""

    label: str
    tz: str


CATALOG: tuple[tuple[str, tuple[ZoneOption, ...]], ...] = (
    (
        "Americas",
        (
            ZoneOption("New York (EST/EDT)", "America/New_York"),
            ZoneOption("Chicago (CST/CDT)", "America/Chicago"),
            ZoneOption("Denver (MST/MDT)", "America/Denver"),
            ZoneOption("Los Angeles (PST/PDT)", "America/Los_Angeles"),
            ZoneOption("Phoenix (MST)", "America/Phoenix"),
            ZoneOption("Anchorage (AKST/AKDT)", "America/Anchorage"),
            ZoneOption("Honolulu (HST)", "Pacific/Honolulu"),
            ZoneOption("Toronto", "America/Toronto"),
            ZoneOption("Mexico City", "America/Mexico_City"),
            ZoneOption("São Paulo", "America/Sao_Paulo"),
            ZoneOption("Buenos Aires", "America/Argentina/Buenos_Aires"),
        ),
    ),
    (
        "Europe",
        (
            ZoneOption("London (GMT/BST)", "Europe/London"),
            ZoneOption("Paris (CET/CEST)", "Europe/Paris"),
            ZoneOption("Berlin", "Europe/Berlin"),
            ZoneOption("Amsterdam", "Europe/Amsterdam"),
            ZoneOption("Madrid", "Europe/Madrid"),
            ZoneOption("Rome", "Europe/Rome"),
            ZoneOption("Stockholm", "Europe/Stockholm"),
            ZoneOption("Moscow", "Europe/Moscow"),
            ZoneOption("Athens", "Europe/Athens"),
            ZoneOption("Istanbul", "Europe/Istanbul"),
        ),
    ),
    (
        "Asia",
        (
            ZoneOption("Dubai", "Asia/Dubai"),
            ZoneOption("Mumbai", "Asia/Kolkata"),
            ZoneOption("Bangkok", "Asia/Bangkok"),
            ZoneOption("Singapore", "Asia/Singapore"),
            ZoneOption("Hong Kong", "Asia/Hong_Kong"),
            ZoneOption("Shanghai", "Asia/Shanghai"),
            ZoneOption("Tokyo", "Asia/Tokyo"),
            ZoneOption("Seoul", "Asia/Seoul"),
            ZoneOption("Manila", "Asia/Manila"),
        ),
    ),
    (
        "Oceania",
        (
            ZoneOption("Sydney (AEST/AEDT)", "Australia/Sydney"),
            ZoneOption("Melbourne", "Australia/Melbourne"),
            ZoneOption("Brisbane", "Australia/Brisbane"),
            ZoneOption("Perth", "Australia/Perth"),
            ZoneOption("Auckland", "Pacific/Auckland"),
        ),
    ),
    (
        "Africa",
        (
            ZoneOption("Cairo", "Africa/Cairo"),
            ZoneOption("Johannesburg", "Africa/Johannesburg"),
            ZoneOption("Lagos", "Africa/Lagos"),
            ZoneOption("Nairobi", "Africa/Nairobi"),
        ),
    ),
)


def region_names() -> list[str]:
    return [region for region, _ in CATALOG]


def iter_catalog() -> Iterator[tuple[str, ZoneOption]]:
    """Yield ``(region, option)`` for every entry, in catalog order."""
    for region, options in CATALOG:
        for option in options:
            yield region, option


def zones_in_region(region: str) -> tuple[ZoneOption, ...]:
    """Return the options listed under ``region`` (empty for unknown regions)."""
    for name, options in CATALOG:
        if name == region:
            return options
    return ()


def labels_for_zone(tz: str) -> list[str]:
    """Return every label that maps to ``tz``."""
    return [option.label for _, option in iter_catalog() if option.tz == tz]


def is_catalog_zone(tz: str) -> bool:
    return any(option.tz == tz for _, option in iter_catalog())


def find_unknown_zones() -> list[ZoneOption]:
    """Return catalog entries whose zone id the zoneinfo database lacks.

    A non-empty result means the catalog needs correcting.
    """
    known = available_timezones()
    return [option for _, option in iter_catalog() if option.tz not in known]
