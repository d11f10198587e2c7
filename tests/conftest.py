from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from envplugins.config import (
    ADMIN_VAR,
    DISABLED_PLUGINS_VAR,
    ENABLED_PLUGINS_VAR,
    INSTALL_DIR_VAR,
    TRUSTED_DIR_VAR,
)
from envplugins.domain.manager import PluginManager, default_registry
from tests.helpers.listeners import RecordingListener

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        ENABLED_PLUGINS_VAR,
        DISABLED_PLUGINS_VAR,
        TRUSTED_DIR_VAR,
        INSTALL_DIR_VAR,
        ADMIN_VAR,
    ):
        monkeypatch.delenv(name, raising=False)
    default_registry().reset()
    yield
    default_registry().reset()


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def make_manager(listener: RecordingListener) -> Callable[..., PluginManager]:
    def factory(
        to_enable: Sequence[str] | None = None,
        to_disable: Sequence[str] | None = None,
        *,
        authorized: bool = True,
        clock: Callable[[], object] = lambda: 1_700_000_000,
    ) -> PluginManager:
        return PluginManager(
            to_enable,
            to_disable,
            guard=lambda: authorized,
            listener=listener,
            clock=clock,
        )

    return factory
