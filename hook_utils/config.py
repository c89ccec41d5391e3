"""
Configuration management for hook-utils.

Settings are read from ~/.config/hook-utils/config.yaml (or the location
named by $HOOK_UTILS_CONFIG) and cached for the life of the process.

Example config.yaml:
---
strict_paths: false
default_label: anonymous
items_key: data
total_key: total
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger("hook-utils.config")


@dataclass(frozen=True)
class Settings:
    """Package-wide settings."""
    strict_paths: bool = False  # reject empty path segments
    default_label: str = "anonymous"
    items_key: str = "items"  # paginated envelope keys
    total_key: str = "total"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown hook-utils settings: {', '.join(unknown)}")

        for name, value in data.items():
            if name == "strict_paths":
                if not isinstance(value, bool):
                    raise ValueError(f"strict_paths must be true or false, got {value!r}")
            elif not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")
        return cls(**data)


def get_config_file() -> Path:
    """Get path to the settings file.

    Priority order:
    1. $HOOK_UTILS_CONFIG (if set)
    2. $XDG_CONFIG_HOME/hook-utils/config.yaml (if set)
    3. ~/.config/hook-utils/config.yaml (default)
    """
    explicit = os.environ.get("HOOK_UTILS_CONFIG")
    if explicit:
        return Path(explicit)

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / "hook-utils" / "config.yaml"


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a YAML file.

    A missing file yields the defaults. Invalid YAML, a document that is
    not a mapping, unknown settings or mistyped values raise ``ValueError``.
    """
    config_file = path or get_config_file()
    logger.debug("Loading settings from %s", config_file)

    if not config_file.exists():
        logger.debug("Settings file not found, using defaults")
        return Settings()

    try:
        data = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in settings file {config_file}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a YAML dictionary, got {type(data)}")

    return Settings.from_dict(data)


# Module-level singleton
_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def configure(**overrides: Any) -> Settings:
    """Replace the process-wide settings with ``overrides`` applied."""
    global _settings
    _settings = Settings.from_dict({**dataclasses.asdict(get_settings()), **overrides})
    return _settings


def reset_settings() -> None:
    """Forget cached settings (for testing)."""
    global _settings
    _settings = None
