"""Set/remove timezones on behalf of a named identity.

Thin wrappers the host's menus call. They log who was changed, which the
bare registry can't do since it only sees opaque ids.
"""

import logging
from dataclasses import dataclass

from .catalog import is_catalog_zone
from .registry import TimezoneRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    id: str
    name: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.id


def current_timezone(registry: TimezoneRegistry, identity: Identity) -> str | None:
    return registry.get(identity.id)


def assign_timezone(registry: TimezoneRegistry, identity: Identity, tz: str) -> bool:
    """Register ``tz`` for ``identity``. Returns False if it wasn't persisted."""
    if not is_catalog_zone(tz):
        logger.info("Timezone %s is not in the catalog, storing anyway", tz)
    saved = registry.set(identity.id, tz)
    logger.info("Set timezone for %s to %s", identity.display_name, tz)
    return saved


def clear_timezone(registry: TimezoneRegistry, identity: Identity) -> bool:
    saved = registry.remove(identity.id)
    logger.info("Removed timezone for %s", identity.display_name)
    return saved
