"""Environment variable loaders for configuration."""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING

from .errors import InvalidConfigurationError, MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank."""

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = os.getenv(name)
        if value is None or not value.strip():
            missing.append(name)
            continue
        values[name] = value

    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(f"Missing configuration for: {missing_list}")

    return values


def env_flag(name: str, *, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def parse_plugin_list(raw: str, *, name: str = "value") -> list[str]:
    """Parse a JSON array or comma-separated list of plugin files.

    Order and duplicates are kept; blank entries are dropped.
    """

    text = raw.strip()
    if text.startswith("["):
        try:
            decoded = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidConfigurationError(f"{name} is not a valid JSON array") from exc
        if not isinstance(decoded, list) or not all(isinstance(item, str) for item in decoded):
            raise InvalidConfigurationError(f"{name} must be a JSON array of strings")
        items = decoded
    else:
        items = text.split(",")
    return [item.strip() for item in items if item.strip()]


def env_plugin_list(name: str) -> list[str] | None:
    """Return the plugin list stored in ``name`` or ``None`` when unset/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return parse_plugin_list(value, name=name)
