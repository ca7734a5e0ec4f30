"""File resolution: expanding path specifiers into concrete files."""

from assetbuster.resolver.expand import expand_files, expand_path, match_paths
from assetbuster.resolver.walk_cache import WalkCache

__all__ = ["WalkCache", "expand_files", "expand_path", "match_paths"]
