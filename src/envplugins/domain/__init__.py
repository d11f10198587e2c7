"""Domain layer: plugin list reconciliation and its collaborators."""

from __future__ import annotations

from .events import ChangeNotifier
from .location import LocationGuard, is_authorized_location
from .manager import PluginManager, PluginManagerRegistry, default_registry, get_plugin_manager
from .ports import ChangeListener, Clock, NotAuthorizedNotifier
from .types import ChangeEvent, ChangeSet, PluginFile, Scope

__all__ = [
    "ChangeEvent",
    "ChangeListener",
    "ChangeNotifier",
    "ChangeSet",
    "Clock",
    "LocationGuard",
    "NotAuthorizedNotifier",
    "PluginFile",
    "PluginManager",
    "PluginManagerRegistry",
    "Scope",
    "default_registry",
    "get_plugin_manager",
    "is_authorized_location",
]
