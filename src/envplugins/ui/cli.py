from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from envplugins.adapters.snapshot import SnapshotError, dump_snapshot, load_snapshot
from envplugins.app import bootstrap_plugin_manager, reconcile_snapshot
from envplugins.config import (
    ConfigurationError,
    configure_logging,
    get_location_config,
    level_for_verbosity,
    require_trusted_dir,
)
from envplugins.domain.types import Scope

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from envplugins.adapters.snapshot import ActivePluginsSnapshot

log = logging.getLogger(__name__)

_SCOPES: dict[str, frozenset[Scope]] = {
    "local": frozenset({Scope.LOCAL}),
    "network": frozenset({Scope.NETWORK}),
    "all": frozenset(Scope),
}


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Apply ENABLED_PLUGINS / DISABLED_PLUGINS to an active plugins snapshot",
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        help="JSON snapshot of the active plugin options (reads stdin when omitted)",
    )
    parser.add_argument(
        "--scope",
        choices=sorted(_SCOPES),
        default="all",
        help="Which active plugin list to reconcile (default: %(default)s)",
    )
    parser.add_argument(
        "--admin",
        action="store_true",
        help="Treat the run as administrative so location warnings are reported",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when WPMU_PLUGIN_DIR is not configured",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (repeat for debug)",
    )
    return parser.parse_args(list(argv))


def _read_snapshot(path: Path | None) -> ActivePluginsSnapshot:
    if path is None:
        return load_snapshot(sys.stdin.read())
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Cannot read snapshot {path}: {exc}") from exc
    return load_snapshot(text)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=level_for_verbosity(parsed_args.verbose))

    try:
        if parsed_args.strict:
            require_trusted_dir()
        snapshot = _read_snapshot(parsed_args.snapshot)
        location = get_location_config(is_admin=True if parsed_args.admin else None)
        manager = bootstrap_plugin_manager(location_config=location)
    except (ValueError, ConfigurationError, SnapshotError):
        log.exception("Invalid configuration or snapshot")
        sys.exit(2)

    try:
        result = reconcile_snapshot(manager, snapshot, scopes=_SCOPES[parsed_args.scope])
        sys.stdout.write(dump_snapshot(result) + "\n")
    except Exception:
        log.exception("Fatal error while reconciling plugins")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
