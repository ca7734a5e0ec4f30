"""Rev-manifest model and the copy-and-record pass."""

from assetbuster.manifest.builder import BustResult, bust_paths, fingerprint_entry
from assetbuster.manifest.rev_manifest import RevManifest

__all__ = ["BustResult", "RevManifest", "bust_paths", "fingerprint_entry"]
