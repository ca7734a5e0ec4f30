"""
Buster run entry point.

Resolves the configured files, fingerprints and copies them, and writes
the rev-manifest. A run is a pure function of configuration and project
root; it assumes nothing about the host build's lifecycle.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from assetbuster.core.config import BusterConfig, BusterSettings
from assetbuster.errors import UnsupportedFileNameError
from assetbuster.fingerprint.digest import make_digest
from assetbuster.logging import buster_message, get_logger
from assetbuster.manifest.builder import BustResult, bust_paths, fingerprint_entry
from assetbuster.resolver.expand import expand_files
from assetbuster.resolver.walk_cache import WalkCache

logger = get_logger("run")


def _coerce_config(config: BusterConfig | dict[str, Any]) -> BusterConfig:
    if isinstance(config, BusterConfig):
        return config
    return BusterConfig.from_mapping(config)


def resolve_run(
    config: BusterConfig | dict[str, Any],
    project_root: Path,
) -> tuple[BusterConfig, BusterSettings, list[Path]]:
    """
    Validate configuration and resolve the files a run would process.

    Raises:
        ConfigError: Before any filesystem access if the config is invalid.
    """
    config = _coerce_config(config)
    settings = config.resolve(project_root)
    logger.debug(buster_message(settings.describe()))

    files = expand_files(
        config.files,
        project_root=settings.project_root,
        files_base=settings.files_base,
        cache=WalkCache(),
    )
    return config, settings, files


def run_buster(
    config: BusterConfig | dict[str, Any],
    project_root: Path | str,
) -> BustResult:
    """
    Run buster on a project.

    Args:
        config: Validated config, or a raw ``buster`` mapping.
        project_root: Directory that relative config paths are resolved against.

    Returns:
        BustResult describing the copies and the written manifest.

    Raises:
        ConfigError: If the configuration is invalid.
        ManifestError: If merging into an unreadable manifest.
        OSError: On any filesystem failure.
    """
    config, settings, files = resolve_run(config, Path(project_root))
    digest = make_digest(config.digest, config.digest_length)

    result = bust_paths(files, settings, digest)

    logger.info(
        buster_message(
            f"Fingerprinted {len(result.copied)} file(s); manifest written to {settings.manifest}"
        )
    )
    return result


def plan_buster(
    config: BusterConfig | dict[str, Any],
    project_root: Path | str,
) -> list[tuple[str, str]]:
    """
    Return the manifest entries a run would write, without writing anything.

    Files are hashed; unsupported file names are left out with a warning.
    """
    config, settings, files = resolve_run(config, Path(project_root))
    digest = make_digest(config.digest, config.digest_length)

    entries: list[tuple[str, str]] = []
    for source in files:
        try:
            source_rel, target_rel, _ = fingerprint_entry(source, settings, digest)
        except UnsupportedFileNameError as e:
            logger.warning(buster_message(f"Skipping {source}: {e}"))
            continue
        entries.append((source_rel, target_rel))
    return entries
