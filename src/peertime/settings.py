"""Display settings — reads settings.toml + .env to produce DisplaySettings.

Settings are an explicit value handed to each render call, so a change takes
effect on the next call without a restart.

Key entities:
  - DisplaySettings: frozen dataclass with resolved display options.
  - load_settings(): parse .env + settings.toml -> DisplaySettings.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .utils import peertime_dir

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}

# settings.toml key -> environment override
_ENV_OVERRIDES = {
    "use_24_hour": "PEERTIME_USE_24_HOUR",
    "show_time_inline": "PEERTIME_SHOW_TIME_INLINE",
    "show_offset": "PEERTIME_SHOW_OFFSET",
    "locale": "PEERTIME_LOCALE",
}

_BOOL_KEYS = {"use_24_hour", "show_time_inline", "show_offset"}


@dataclass(frozen=True)
class DisplaySettings:
    """Resolved display options."""

    use_24_hour: bool = False
    show_time_inline: bool = True
    show_offset: bool = False

    # Empty means "ask the host for its locale"
    locale: str = ""

    config_dir: Path = field(default_factory=peertime_dir)
    store_file: str = "timezones.json"

    @property
    def store_path(self) -> Path:
        return self.config_dir / self.store_file


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{key}: expected a boolean, got {raw!r}")


def load_settings(config_dir: Path | None = None) -> DisplaySettings:
    """Read .env + settings.toml and return DisplaySettings.

    Args:
        config_dir: Override for the base config directory.
                    Defaults to ``peertime_dir()``.

    A missing settings.toml is fine; defaults apply. Environment variables
    win over the file.
    """
    if config_dir is None:
        config_dir = peertime_dir()

    # Load .env files (local cwd first, then config_dir)
    local_env = Path(".env")
    global_env = config_dir / ".env"
    if local_env.is_file():
        load_dotenv(local_env)
    if global_env.is_file():
        load_dotenv(global_env)

    section: dict = {}
    toml_path = config_dir / "settings.toml"
    if toml_path.is_file():
        try:
            with open(toml_path, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid {toml_path}: {e}") from e
        section = raw.get("display", {})
        if not isinstance(section, dict):
            raise ValueError(f"{toml_path}: [display] must be a table.")
    else:
        logger.debug("No %s, using default display settings", toml_path)

    values: dict = {}
    for key in ("use_24_hour", "show_time_inline", "show_offset"):
        if key in section:
            if not isinstance(section[key], bool):
                raise ValueError(f"{toml_path}: {key} must be true or false.")
            values[key] = section[key]
    for key in ("locale", "store_file"):
        if key in section:
            values[key] = str(section[key])

    for key, env_name in _ENV_OVERRIDES.items():
        env_value = os.getenv(env_name)
        if env_value is None:
            continue
        if key in _BOOL_KEYS:
            values[key] = _parse_bool(env_name, env_value)
        else:
            values[key] = env_value.strip()

    return DisplaySettings(config_dir=config_dir, **values)
