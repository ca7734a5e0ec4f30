"""
Rev-manifest schema.

Maps asset paths relative to files-base onto their fingerprinted
counterparts:

    {
      "css/app.css": "css/app-acbd18db4c.css"
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import orjson
from pydantic import Field, RootModel, ValidationError

from assetbuster.core.json_canonical import canonical_json_dumps, canonical_json_loads
from assetbuster.errors import ManifestError


class RevManifest(RootModel[dict[str, str]]):
    """Original-to-fingerprinted path mapping."""

    root: dict[str, str] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __getitem__(self, key: str) -> str:
        return self.root[key]

    def merged(self, entries: Mapping[str, str]) -> RevManifest:
        """Return a new manifest with ``entries`` applied; later entries win."""
        return RevManifest({**self.root, **entries})

    def to_json(self) -> str:
        """Serialize to pretty-printed canonical JSON with a trailing newline."""
        return canonical_json_dumps(self.root, indent=True) + "\n"

    def save(self, path: Path) -> None:
        """Write the manifest, replacing any existing file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> RevManifest:
        """
        Load a manifest from file.

        Raises:
            ManifestError: If the file is not a JSON object of strings.
        """
        try:
            data = canonical_json_loads(path.read_bytes())
        except orjson.JSONDecodeError as e:
            raise ManifestError(f"Manifest {path} is not valid JSON: {e}") from e

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ManifestError(
                f"Manifest {path} must be a JSON object mapping paths to paths"
            ) from e

    @classmethod
    def load_or_empty(cls, path: Path, merge: bool) -> RevManifest:
        """Load the existing manifest when merging, otherwise start empty."""
        if merge and path.exists():
            return cls.load(path)
        return cls()
