"""Core value types shared by the reconciler and its collaborators."""

from __future__ import annotations

from enum import StrEnum
from typing import TypeAlias

PluginFile: TypeAlias = str
"""Plugin file path relative to the plugins directory, e.g. ``akismet/akismet.php``."""

ChangeSet: TypeAlias = tuple[PluginFile, ...]


class Scope(StrEnum):
    LOCAL = "local"
    NETWORK = "network"


class ChangeEvent(StrEnum):
    """Notifications emitted after each enable or disable pass."""

    ENABLED_LOCAL = "environment_plugins_after_enabling_local_plugins"
    DISABLED_LOCAL = "environment_plugins_after_disabling_local_plugins"
    ENABLED_NETWORK = "environment_plugins_after_enabling_network_plugins"
    DISABLED_NETWORK = "environment_plugins_after_disabling_network_plugins"

    @classmethod
    def for_pass(cls, scope: Scope, *, enabling: bool) -> ChangeEvent:
        if scope is Scope.LOCAL:
            return cls.ENABLED_LOCAL if enabling else cls.DISABLED_LOCAL
        return cls.ENABLED_NETWORK if enabling else cls.DISABLED_NETWORK

    @property
    def scope(self) -> Scope:
        if self in (ChangeEvent.ENABLED_LOCAL, ChangeEvent.DISABLED_LOCAL):
            return Scope.LOCAL
        return Scope.NETWORK

    @property
    def enabling(self) -> bool:
        return self in (ChangeEvent.ENABLED_LOCAL, ChangeEvent.ENABLED_NETWORK)


__all__ = ["ChangeEvent", "ChangeSet", "PluginFile", "Scope"]
