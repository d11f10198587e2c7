#!/usr/bin/env python3
"""Script entry point; ``python -m envplugins.main`` behaves like the console script."""

from __future__ import annotations

from envplugins.ui.cli import main, run

__all__ = ["main", "run"]

if __name__ == "__main__":
    run()
