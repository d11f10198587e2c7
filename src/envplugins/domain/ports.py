"""Collaborator ports used by the plugin manager."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .types import ChangeEvent, ChangeSet


@runtime_checkable
class ChangeListener(Protocol):
    """Receives the plugins whose state flipped during one pass."""

    def __call__(self, event: ChangeEvent, changed: ChangeSet) -> None: ...


class NotAuthorizedNotifier(Protocol):
    """Surfaces a warning when the manager may not run from its location."""

    def __call__(self) -> None: ...


class Clock(Protocol):
    """Produces the activation value stored for newly enabled network plugins."""

    def __call__(self) -> object: ...


__all__ = ["ChangeListener", "Clock", "NotAuthorizedNotifier"]
