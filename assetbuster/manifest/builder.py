"""
Copy-and-record pass.

Copies each resolved file to its fingerprinted name under output-base and
writes the rev-manifest once every copy has succeeded.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from assetbuster.core.config import BusterSettings
from assetbuster.errors import BusterError, UnsupportedFileNameError
from assetbuster.fingerprint.digest import DigestFunction, make_digest
from assetbuster.fingerprint.naming import fingerprinted_path
from assetbuster.logging import buster_message, get_logger
from assetbuster.manifest.rev_manifest import RevManifest

logger = get_logger("manifest")


@dataclass
class BustResult:
    """Outcome of a buster run."""

    settings: BusterSettings
    manifest: RevManifest
    copied: list[tuple[Path, Path]] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def written(self) -> list[Path]:
        return [destination for _, destination in self.copied]


def relative_to_base(path: Path, base: Path) -> str:
    """
    Return ``path`` relative to ``base`` with forward slashes.

    Raises:
        BusterError: If ``path`` is not under ``base``.
    """
    try:
        return path.relative_to(base).as_posix()
    except ValueError as e:
        raise BusterError(f"{path} is outside files-base {base}") from e


def fingerprint_entry(
    source: Path, settings: BusterSettings, digest: DigestFunction
) -> tuple[str, str, Path]:
    """
    Compute the manifest entry and copy destination for one file.

    Returns:
        (original relative path, fingerprinted relative path, destination path)
    """
    target = fingerprinted_path(source, digest)
    source_rel = relative_to_base(source, settings.files_base)
    target_rel = relative_to_base(target, settings.files_base)
    return source_rel, target_rel, settings.output_base / target_rel


def bust_paths(
    files: Iterable[Path],
    settings: BusterSettings,
    digest: DigestFunction | None = None,
) -> BustResult:
    """
    Fingerprint, copy, and record every file, then write the manifest.

    Args:
        files: Resolved absolute file paths, in the order to process them.
        settings: Resolved run settings.
        digest: Digest function; MD5 truncated to 10 characters if omitted.

    Returns:
        BustResult with the final manifest and the copies made.

    Raises:
        ManifestError: If merging and the existing manifest is unreadable.
        BusterError: If a file lies outside files-base.
        OSError: On any copy, directory creation, or write failure.
    """
    digest = digest or make_digest()
    manifest = RevManifest.load_or_empty(settings.manifest, settings.merge)
    result = BustResult(settings=settings, manifest=manifest)

    entries: dict[str, str] = {}
    for source in files:
        try:
            source_rel, target_rel, destination = fingerprint_entry(source, settings, digest)
        except UnsupportedFileNameError as e:
            logger.warning(buster_message(f"Skipping {source}: {e}"))
            result.skipped.append(source)
            continue

        logger.debug(buster_message(f"Writing {destination}"))
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)

        result.copied.append((source, destination))
        entries[source_rel] = target_rel

    result.manifest = manifest.merged(entries)
    result.manifest.save(settings.manifest)

    return result
