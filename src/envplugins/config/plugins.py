"""Plugin list and install location settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import env_flag, env_plugin_list, require_env_vars

ENABLED_PLUGINS_VAR: Final[str] = "ENABLED_PLUGINS"
DISABLED_PLUGINS_VAR: Final[str] = "DISABLED_PLUGINS"
TRUSTED_DIR_VAR: Final[str] = "WPMU_PLUGIN_DIR"
INSTALL_DIR_VAR: Final[str] = "ENVPLUGINS_INSTALL_DIR"
ADMIN_VAR: Final[str] = "ENVPLUGINS_ADMIN"


@dataclass(frozen=True, slots=True)
class PluginConfig:
    """Plugins to force on and off, ``None`` when the variable was not set."""

    enabled: tuple[str, ...] | None = None
    disabled: tuple[str, ...] | None = None

    @property
    def is_empty(self) -> bool:
        return not self.enabled and not self.disabled


@dataclass(frozen=True, slots=True)
class LocationConfig:
    trusted_dir: str
    install_dir: str
    is_admin: bool = False


def default_install_dir() -> str:
    return str(Path(__file__).resolve().parent.parent)


def get_plugin_config() -> PluginConfig:
    enabled = env_plugin_list(ENABLED_PLUGINS_VAR)
    disabled = env_plugin_list(DISABLED_PLUGINS_VAR)
    return PluginConfig(
        enabled=tuple(enabled) if enabled is not None else None,
        disabled=tuple(disabled) if disabled is not None else None,
    )


def require_trusted_dir() -> str:
    return require_env_vars((TRUSTED_DIR_VAR,))[TRUSTED_DIR_VAR]


def get_location_config(*, is_admin: bool | None = None) -> LocationConfig:
    """Resolve where we are installed and where we are allowed to run from.

    An unset trusted directory yields an empty string, which never authorizes.
    """

    install_dir = os.getenv(INSTALL_DIR_VAR) or default_install_dir()
    return LocationConfig(
        trusted_dir=os.getenv(TRUSTED_DIR_VAR, ""),
        install_dir=install_dir,
        is_admin=env_flag(ADMIN_VAR) if is_admin is None else is_admin,
    )
