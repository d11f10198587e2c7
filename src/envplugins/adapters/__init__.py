"""Adapters translating external payloads into domain collections."""

from __future__ import annotations

from .snapshot import ActivePluginsSnapshot, SnapshotError, dump_snapshot, load_snapshot

__all__ = ["ActivePluginsSnapshot", "SnapshotError", "dump_snapshot", "load_snapshot"]
