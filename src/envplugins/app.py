"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from envplugins.config import get_location_config, get_plugin_config
from envplugins.domain.events import ChangeNotifier
from envplugins.domain.location import LocationGuard
from envplugins.domain.manager import default_registry
from envplugins.domain.types import Scope

if TYPE_CHECKING:
    from envplugins.adapters.snapshot import ActivePluginsSnapshot
    from envplugins.config import LocationConfig, PluginConfig
    from envplugins.domain.manager import PluginManager, PluginManagerRegistry
    from envplugins.domain.types import ChangeEvent, ChangeSet

NOT_MU_PLUGIN_MESSAGE = "Configure Environment Plugins must be installed as must-use plugin."

log = getLogger(__name__)


def log_changes(event: ChangeEvent, changed: ChangeSet) -> None:
    """Default change listener: report every pass that flipped something."""

    if not changed:
        return
    verb = "Enabled" if event.enabling else "Disabled"
    log.info("%s %s plugins: %s", verb, event.scope.value, ", ".join(changed))


def warn_not_mu_plugin() -> None:
    log.warning(NOT_MU_PLUGIN_MESSAGE)


def bootstrap_plugin_manager(
    *,
    plugin_config: PluginConfig | None = None,
    location_config: LocationConfig | None = None,
    notifier: ChangeNotifier | None = None,
    registry: PluginManagerRegistry | None = None,
) -> PluginManager | None:
    """Install the process plugin manager from environment configuration.

    An already installed manager is returned as is. Otherwise nothing is
    installed when neither list names a plugin.
    """

    effective_registry = registry or default_registry()
    if effective_registry.instance is not None:
        log.debug("Plugin manager already installed; reusing it")
        return effective_registry.instance

    plugins = plugin_config or get_plugin_config()
    if plugins.is_empty:
        log.debug("No plugins configured to enable or disable")
        return None

    location = location_config or get_location_config()
    if notifier is None:
        notifier = ChangeNotifier()
        notifier.subscribe(log_changes)

    manager = effective_registry.install(
        plugins.enabled,
        plugins.disabled,
        guard=LocationGuard(install_dir=location.install_dir, trusted_dir=location.trusted_dir),
        listener=notifier,
        on_not_authorized=warn_not_mu_plugin,
        is_admin=location.is_admin,
    )
    log.debug(
        "Plugin manager ready: active=%s, enable=%s, disable=%s",
        manager.active,
        manager.enabled_plugins,
        manager.disabled_plugins,
    )
    return manager


def reconcile_snapshot(
    manager: PluginManager | None,
    snapshot: ActivePluginsSnapshot,
    *,
    scopes: frozenset[Scope],
) -> ActivePluginsSnapshot:
    """Apply the manager to the selected parts of an exported snapshot."""

    if manager is None:
        return snapshot

    update: dict[str, object] = {}
    if Scope.LOCAL in scopes:
        update["active_plugins"] = manager.configure_local_plugins(snapshot.active_plugins)
    if Scope.NETWORK in scopes:
        update["active_sitewide_plugins"] = manager.configure_network_plugins(
            snapshot.active_sitewide_plugins
        )
    return snapshot.model_copy(update=update)


__all__ = [
    "NOT_MU_PLUGIN_MESSAGE",
    "bootstrap_plugin_manager",
    "log_changes",
    "reconcile_snapshot",
    "warn_not_mu_plugin",
]
