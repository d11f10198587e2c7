"""Minimal Pydantic model for an exported active-plugins option snapshot."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class SnapshotError(ValueError):
    """Raised when a snapshot payload cannot be parsed."""


class ActivePluginsSnapshot(BaseModel):
    model_config = ConfigDict(extra="ignore")

    active_plugins: list[str] = Field(default_factory=list)
    active_sitewide_plugins: dict[str, Any] = Field(default_factory=dict)

    @field_validator("active_plugins", mode="before")
    @classmethod
    def _accept_indexed_mapping(cls, value: Any) -> Any:
        # A missing option exports as null or false.
        if value is None or value is False:
            return []
        # Serialised PHP arrays with holes come out as {"0": "...", "2": "..."}.
        if isinstance(value, dict):
            return list(value.values())
        return value

    @field_validator("active_sitewide_plugins", mode="before")
    @classmethod
    def _accept_empty_list(cls, value: Any) -> Any:
        if value is None or value is False or value == []:
            return {}
        return value


def load_snapshot(text: str) -> ActivePluginsSnapshot:
    if not text.strip():
        return ActivePluginsSnapshot()
    try:
        return ActivePluginsSnapshot.model_validate_json(text)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid active plugins snapshot: {exc}") from exc


def dump_snapshot(snapshot: ActivePluginsSnapshot) -> str:
    return snapshot.model_dump_json(indent=2)


__all__ = ["ActivePluginsSnapshot", "SnapshotError", "dump_snapshot", "load_snapshot"]
