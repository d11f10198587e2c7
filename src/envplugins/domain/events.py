"""Fan-out of change sets to subscribed listeners."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .ports import ChangeListener
    from .types import ChangeEvent, ChangeSet

log = getLogger(__name__)


@dataclass(slots=True)
class _Subscription:
    listener: ChangeListener
    events: frozenset[ChangeEvent] | None


@dataclass(slots=True)
class ChangeNotifier:
    """Ordered listener registry.

    Listeners are called in subscription order. A listener registered with
    ``events=None`` receives every notification.
    """

    _subscriptions: list[_Subscription] = field(default_factory=list["_Subscription"])

    def subscribe(
        self,
        listener: ChangeListener,
        *,
        events: Iterable[ChangeEvent] | None = None,
    ) -> Callable[[], None]:
        subscription = _Subscription(
            listener=listener,
            events=frozenset(events) if events is not None else None,
        )
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

        return unsubscribe

    def emit(self, event: ChangeEvent, changed: ChangeSet) -> None:
        log.debug("Emitting %s with %d plugin(s)", event.value, len(changed))
        for subscription in list(self._subscriptions):
            if subscription.events is None or event in subscription.events:
                subscription.listener(event, changed)

    def __call__(self, event: ChangeEvent, changed: ChangeSet) -> None:
        self.emit(event, changed)

    def __len__(self) -> int:
        return len(self._subscriptions)


__all__ = ["ChangeNotifier"]
