"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, env_plugin_list, parse_plugin_list, require_env_vars
from .errors import ConfigurationError, InvalidConfigurationError, MissingConfigurationError
from .logging import configure_logging, level_for_verbosity
from .plugins import (
    ADMIN_VAR,
    DISABLED_PLUGINS_VAR,
    ENABLED_PLUGINS_VAR,
    INSTALL_DIR_VAR,
    TRUSTED_DIR_VAR,
    LocationConfig,
    PluginConfig,
    get_location_config,
    get_plugin_config,
    require_trusted_dir,
)

__all__ = [
    "ADMIN_VAR",
    "DISABLED_PLUGINS_VAR",
    "ENABLED_PLUGINS_VAR",
    "INSTALL_DIR_VAR",
    "TRUSTED_DIR_VAR",
    "ConfigurationError",
    "InvalidConfigurationError",
    "LocationConfig",
    "MissingConfigurationError",
    "PluginConfig",
    "configure_logging",
    "env_flag",
    "env_plugin_list",
    "get_location_config",
    "get_plugin_config",
    "level_for_verbosity",
    "parse_plugin_list",
    "require_env_vars",
    "require_trusted_dir",
]
