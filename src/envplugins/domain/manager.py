"""Force plugins on or off on top of the list the host reports as active.

The manager never persists anything: the host calls
:meth:`PluginManager.configure_local_plugins` or
:meth:`PluginManager.configure_network_plugins` each time it reads its active
plugin list and uses the returned collection instead.

Each call runs an enable pass followed by a disable pass, so a plugin named in
both lists ends up disabled. After every pass the plugins that actually changed
state are sent to the change listener, even when nothing changed.
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Mapping
from logging import getLogger
from typing import TYPE_CHECKING, TypeVar

from .types import ChangeEvent, Scope

if TYPE_CHECKING:
    from collections.abc import Callable

    from .ports import ChangeListener, Clock, NotAuthorizedNotifier
    from .types import ChangeSet, PluginFile

V = TypeVar("V")

log = getLogger(__name__)


def _unix_time() -> int:
    return int(time.time())


def _as_list(plugins: object) -> list[PluginFile]:
    # A missing option comes back as ``False``; anything unusable counts as empty.
    if not plugins or not isinstance(plugins, Iterable):
        return []
    if isinstance(plugins, str):
        return [plugins]
    return list(plugins)


def _as_dict(plugins: object) -> dict[PluginFile, V]:
    # An empty option may come back as a list, ``False`` or ``None`` rather than a mapping.
    if not plugins:
        return {}
    if isinstance(plugins, Mapping):
        return dict(plugins)
    return dict.fromkeys(_as_list(plugins))  # type: ignore[return-value]


class PluginManager:
    """Enable and disable plugins according to environment settings."""

    def __init__(
        self,
        to_enable: Iterable[PluginFile] | None = None,
        to_disable: Iterable[PluginFile] | None = None,
        *,
        guard: Callable[[], bool],
        listener: ChangeListener | None = None,
        on_not_authorized: NotAuthorizedNotifier | None = None,
        is_admin: bool = False,
        clock: Clock = _unix_time,
    ) -> None:
        self._enabled_plugins: list[PluginFile] = []
        self._disabled_plugins: list[PluginFile] = []
        self._listener = listener
        self._clock = clock
        self._active = guard()

        if not self._active:
            log.debug("Plugin manager is not running from the must-use directory")
            if is_admin and on_not_authorized is not None:
                on_not_authorized()
            return

        self.process_plugins(to_enable or (), to_disable or ())

    @property
    def active(self) -> bool:
        return self._active

    @property
    def enabled_plugins(self) -> tuple[PluginFile, ...]:
        return tuple(self._enabled_plugins)

    @property
    def disabled_plugins(self) -> tuple[PluginFile, ...]:
        return tuple(self._disabled_plugins)

    def enable(self, file: PluginFile) -> None:
        self._enabled_plugins.append(file)

    def disable(self, file: PluginFile) -> None:
        self._disabled_plugins.append(file)

    def process_plugins(
        self,
        to_enable: Iterable[PluginFile],
        to_disable: Iterable[PluginFile],
    ) -> None:
        for plugin in to_enable:
            self.enable(plugin)
        for plugin in to_disable:
            self.disable(plugin)

    def configure_local_plugins(self, plugins: Iterable[PluginFile] | None) -> list[PluginFile]:
        """Return the single-site active plugin list with the overrides applied."""

        if not self._active:
            return plugins  # type: ignore[return-value]
        result = self._enable_local_plugins(_as_list(plugins))
        return self._disable_local_plugins(result)

    def _enable_local_plugins(self, plugins: list[PluginFile]) -> list[PluginFile]:
        configured: list[PluginFile] = []
        for plugin in self._enabled_plugins:
            if plugin not in plugins:
                plugins.append(plugin)
                configured.append(plugin)
        self._notify(Scope.LOCAL, enabling=True, changed=configured)
        return plugins

    def _disable_local_plugins(self, plugins: list[PluginFile]) -> list[PluginFile]:
        configured: list[PluginFile] = []
        for plugin in self._disabled_plugins:
            if plugin in plugins:
                # Drop every copy so a malformed list cannot keep the plugin alive.
                plugins = [entry for entry in plugins if entry != plugin]
                configured.append(plugin)
        self._notify(Scope.LOCAL, enabling=False, changed=configured)
        return plugins

    def configure_network_plugins(
        self,
        plugins: Mapping[PluginFile, V] | None,
    ) -> dict[PluginFile, V]:
        """Return the network-wide active plugin mapping with the overrides applied.

        Only key presence matters. Newly enabled plugins get the clock's value,
        existing entries keep theirs.
        """

        if not self._active:
            return plugins  # type: ignore[return-value]
        result = self._enable_network_plugins(_as_dict(plugins))
        return self._disable_network_plugins(result)

    def _enable_network_plugins(self, plugins: dict[PluginFile, V]) -> dict[PluginFile, V]:
        configured: list[PluginFile] = []
        for plugin in self._enabled_plugins:
            if plugin not in plugins:
                plugins[plugin] = self._clock()  # type: ignore[assignment]
                configured.append(plugin)
        self._notify(Scope.NETWORK, enabling=True, changed=configured)
        return plugins

    def _disable_network_plugins(self, plugins: dict[PluginFile, V]) -> dict[PluginFile, V]:
        configured: list[PluginFile] = []
        for plugin in self._disabled_plugins:
            if plugin in plugins:
                del plugins[plugin]
                configured.append(plugin)
        self._notify(Scope.NETWORK, enabling=False, changed=configured)
        return plugins

    def _notify(self, scope: Scope, *, enabling: bool, changed: list[PluginFile]) -> None:
        if self._listener is None:
            return
        changeset: ChangeSet = tuple(changed)
        self._listener(ChangeEvent.for_pass(scope, enabling=enabling), changeset)


class PluginManagerRegistry:
    """Holds the one plugin manager a process is allowed to configure.

    The first :meth:`install` wins; later calls get the existing manager back and
    their arguments are ignored.
    """

    def __init__(self) -> None:
        self._instance: PluginManager | None = None

    @property
    def instance(self) -> PluginManager | None:
        return self._instance

    @property
    def installed(self) -> bool:
        return self._instance is not None

    def install(
        self,
        to_enable: Iterable[PluginFile] | None = None,
        to_disable: Iterable[PluginFile] | None = None,
        *,
        guard: Callable[[], bool],
        listener: ChangeListener | None = None,
        on_not_authorized: NotAuthorizedNotifier | None = None,
        is_admin: bool = False,
        clock: Clock = _unix_time,
    ) -> PluginManager:
        if self._instance is not None:
            log.debug("Plugin manager already installed; ignoring new plugin lists")
            return self._instance
        self._instance = PluginManager(
            to_enable,
            to_disable,
            guard=guard,
            listener=listener,
            on_not_authorized=on_not_authorized,
            is_admin=is_admin,
            clock=clock,
        )
        return self._instance

    def reset(self) -> None:
        self._instance = None


_default_registry = PluginManagerRegistry()


def default_registry() -> PluginManagerRegistry:
    """Return the process-wide registry used by the application layer."""

    return _default_registry


def get_plugin_manager() -> PluginManager | None:
    return _default_registry.instance


__all__ = [
    "PluginManager",
    "PluginManagerRegistry",
    "default_registry",
    "get_plugin_manager",
]
