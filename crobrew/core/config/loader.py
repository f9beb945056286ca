"""
Configuration loader — reads the optional YAML settings file.

Reads YAML, validates against the ``Settings`` Pydantic schema, and
returns a typed object. A missing file at a default location is not an
error: crobrew works without any configuration.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from crobrew.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Env var pointing at an explicit config file
CONFIG_ENV_VAR = "CROBREW_CONFIG"


class ConfigError(Exception):
    """Raised when configuration is invalid or unreadable."""


def default_config_path() -> Path:
    """``$XDG_CONFIG_HOME/crobrew/config.yml`` (``~/.config`` by default)."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "crobrew" / "config.yml"


def find_config_file(explicit: Path | None = None) -> Path | None:
    """Resolve which config file to read.

    Precedence: explicit path > ``CROBREW_CONFIG`` > default location.
    Explicit paths are returned even when they don't exist so that the
    loader can report them; the default location is only returned when
    the file is present.
    """
    if explicit is not None:
        return explicit

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    candidate = default_config_path()
    return candidate if candidate.is_file() else None


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate user settings.

    Args:
        path: Explicit config path. If None, the usual locations are
            searched and defaults are used when nothing is found.

    Returns:
        Validated Settings model.

    Raises:
        ConfigError: If the file is missing (explicit path) or invalid.
    """
    path = find_config_file(path)
    if path is None:
        logger.debug("No config file found, using defaults")
        return Settings()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info(
        "Loaded settings from %s (%d extra profiles)",
        path,
        sum(len(group) for group in settings.profiles.values()),
    )
    return settings
