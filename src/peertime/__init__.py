"""peertime - show other people's local time next to their messages.

Keeps a registry of identity -> timezone, persisted as a JSON blob, and
renders locale-aware "their time" strings for any instant.

Package entry point. Exports the version string and the main entry points.
"""

from .registry import TimezoneRegistry, open_registry
from .render import FormatOptions, RenderError, format_user_time

__version__ = "0.1.0"

__all__ = [
    "FormatOptions",
    "RenderError",
    "TimezoneRegistry",
    "format_user_time",
    "open_registry",
]
