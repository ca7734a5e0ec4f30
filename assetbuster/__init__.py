"""
assetbuster: content-addressed static asset fingerprinting.

Copies asset files to hash-suffixed names and records the mapping in a
rev-manifest for browser cache-busting.
"""

__version__ = "0.2.0"

from assetbuster.buster import BustResult, run_buster
from assetbuster.core.config import BusterConfig, BusterProject, load_project
from assetbuster.errors import BusterError, ConfigError, ManifestError

__all__ = [
    "__version__",
    "BustResult",
    "BusterConfig",
    "BusterError",
    "BusterProject",
    "ConfigError",
    "ManifestError",
    "load_project",
    "run_buster",
]
