"""
Expansion of path specifiers into a deduplicated list of files.

Literal specifiers name a file or directory; pattern specifiers select
paths under files-base. Either way a directory contributes every file
beneath it.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from assetbuster.core.pathspec import LiteralSpec, PatternSpec
from assetbuster.logging import buster_message, get_logger
from assetbuster.resolver.walk_cache import WalkCache, walk_tree

logger = get_logger("resolver")


def expand_path(path: Path) -> Iterator[Path]:
    """
    Yield the files a path stands for.

    Zero files if it does not exist (with a warning), the path itself if
    it is a file, or every file beneath it if it is a directory.
    """
    if not path.exists():
        logger.warning(buster_message(f"File does not exist: {path}"))
        return

    if path.is_file():
        yield path
        return

    for child in walk_tree(path):
        if child.is_file():
            yield child


def match_paths(pattern: PatternSpec, files_base: Path, cache: WalkCache) -> list[Path]:
    """Return every path under files-base whose string form matches ``pattern``."""
    if not files_base.exists():
        logger.warning(buster_message(f"File does not exist: {files_base}"))
    return [p for p in cache.paths_under(files_base) if pattern.matches(str(p))]


def _normalize(path: Path) -> Path:
    """
    Resolve symlinks the way files-base is resolved.

    A directory is resolved fully. For anything else only the parent is
    resolved, so a symlinked file keeps its own name and location.
    """
    path = Path(os.path.normpath(path))
    if path.is_dir():
        return path.resolve()
    return path.parent.resolve() / path.name


def resolve_literal(spec: LiteralSpec, project_root: Path, files_base: Path) -> Path:
    """
    Resolve a literal specifier to an absolute path.

    Paths are taken relative to the project root. If that does not exist
    but the same path exists under files-base, the files-base path is used.
    """
    candidate = _normalize(project_root / spec.path)
    if not candidate.exists():
        fallback = _normalize(files_base / spec.path)
        if fallback.exists():
            return fallback
    return candidate


def expand_files(
    specs: Iterable[LiteralSpec | PatternSpec],
    *,
    project_root: Path,
    files_base: Path,
    cache: WalkCache | None = None,
) -> list[Path]:
    """
    Expand specifiers into absolute file paths, in input order.

    Duplicates from overlapping specifiers are dropped; the first
    occurrence wins.

    Args:
        specs: Parsed path specifiers.
        project_root: Root that literal paths are relative to.
        files_base: Directory that patterns are matched under.
        cache: Walk cache for this run. A fresh one is used if omitted.

    Returns:
        Absolute paths of existing files.
    """
    cache = cache if cache is not None else WalkCache()
    project_root = Path(project_root).resolve()
    files_base = Path(files_base).resolve()

    seen: set[Path] = set()
    files: list[Path] = []

    for spec in specs:
        if isinstance(spec, PatternSpec):
            targets = match_paths(spec, files_base, cache)
        else:
            targets = [resolve_literal(spec, project_root, files_base)]

        for target in targets:
            for file in expand_path(target):
                if file not in seen:
                    seen.add(file)
                    files.append(file)

    return files
