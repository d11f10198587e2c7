"""Check that the manager runs from the must-use plugin directory."""

from __future__ import annotations

from dataclasses import dataclass, field


def is_authorized_location(install_dir: str, trusted_dir: str) -> bool:
    """Return whether ``install_dir`` starts with ``trusted_dir``.

    Plain case-sensitive string comparison: paths are not normalised and the
    filesystem is never consulted. An empty ``trusted_dir`` never matches.
    """

    if not trusted_dir:
        return False
    return install_dir.startswith(trusted_dir)


@dataclass(slots=True)
class LocationGuard:
    install_dir: str
    trusted_dir: str
    _authorized: bool | None = field(default=None, init=False, repr=False)

    def is_authorized(self) -> bool:
        if self._authorized is None:
            self._authorized = is_authorized_location(self.install_dir, self.trusted_dir)
        return self._authorized

    __call__ = is_authorized


__all__ = ["LocationGuard", "is_authorized_location"]
