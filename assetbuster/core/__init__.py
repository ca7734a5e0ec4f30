"""Core utilities: path specifiers, configuration, JSON serialization."""

from assetbuster.core.config import BusterConfig, BusterProject, BusterSettings, load_project
from assetbuster.core.json_canonical import canonical_json_dumps, canonical_json_loads
from assetbuster.core.pathspec import LiteralSpec, PathSpec, PatternSpec, parse_path_specs

__all__ = [
    "BusterConfig",
    "BusterProject",
    "BusterSettings",
    "load_project",
    "canonical_json_dumps",
    "canonical_json_loads",
    "LiteralSpec",
    "PathSpec",
    "PatternSpec",
    "parse_path_specs",
]
