"""
Per-run memoized directory walks.

Pattern specifiers are matched against every path under files-base; the
walk is computed once per directory and reused for the rest of the run.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from assetbuster.logging import buster_message, get_logger

logger = get_logger("resolver")


def walk_tree(root: Path, _visited: set[Path] | None = None) -> Iterator[Path]:
    """
    Yield ``root`` and everything beneath it, depth-first, pre-order.

    Children are visited in sorted name order. Each real directory is
    descended into once, so symlink loops terminate.
    """
    yield root
    if not root.is_dir():
        return

    visited = set() if _visited is None else _visited
    real = root.resolve()
    if real in visited:
        logger.warning(buster_message(f"Skipping already visited directory: {root}"))
        return
    visited.add(real)

    for child in sorted(root.iterdir(), key=lambda p: p.name):
        yield from walk_tree(child, visited)


class WalkCache:
    """Directory walk results keyed by absolute directory path."""

    def __init__(self) -> None:
        self._walks: dict[Path, tuple[Path, ...]] = {}
        self.hits = 0
        self.misses = 0

    def paths_under(self, directory: Path) -> tuple[Path, ...]:
        """Return every path under ``directory``, including itself."""
        key = Path(directory).resolve()

        if key in self._walks:
            self.hits += 1
            return self._walks[key]

        self.misses += 1
        paths = tuple(walk_tree(key)) if key.exists() else ()
        self._walks[key] = paths
        return paths

    def get_stats(self) -> dict[str, Any]:
        return {
            "directories": len(self._walks),
            "hits": self.hits,
            "misses": self.misses,
        }
