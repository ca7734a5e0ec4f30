"""
Buster configuration schema and project loading.

A project file is YAML with a ``buster`` section:

    buster:
      files:
        - css/app.css
        - regex: "\\.js$"
      files-base: resources/public
      output-base: resources/public
      manifest: resources/rev-manifest.json
      merge: true

All relative paths are resolved against the directory containing the
project file.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from assetbuster.core.pathspec import PathSpec, parse_path_specs
from assetbuster.errors import ConfigError
from assetbuster.fingerprint.digest import DEFAULT_DIGEST_LENGTH, DigestAlgorithm

DEFAULT_PROJECT_FILE = "buster.yaml"
DEFAULT_MANIFEST_NAME = "rev-manifest.json"
CONFIG_SECTION = "buster"


class BusterConfig(BaseModel):
    """The ``buster`` section of a project configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    files: tuple[PathSpec, ...] = Field(
        description="Literal paths and/or regexes selecting the files to fingerprint"
    )
    files_base: str | None = Field(
        default=None,
        alias="files-base",
        description="Base directory for pattern matching and manifest keys (default: project root)",
    )
    output_base: str | None = Field(
        default=None,
        alias="output-base",
        description="Destination root for fingerprinted files (default: files-base)",
    )
    manifest: str | None = Field(
        default=None,
        description="Manifest file path (default: <output-base>/rev-manifest.json)",
    )
    merge: bool = Field(
        default=False, description="Merge into an existing manifest instead of replacing it"
    )
    digest: DigestAlgorithm = Field(
        default=DigestAlgorithm.MD5, description="Content digest algorithm"
    )
    digest_length: int = Field(
        default=DEFAULT_DIGEST_LENGTH,
        ge=1,
        le=64,
        alias="digest-length",
        description="Number of leading hex digest characters kept in file names",
    )

    @field_validator("files", mode="before")
    @classmethod
    def _parse_files(cls, value: Any) -> Any:
        return parse_path_specs(value)

    @classmethod
    def from_mapping(cls, data: Any) -> BusterConfig:
        """
        Validate a raw configuration mapping.

        Raises:
            ConfigError: If the mapping is malformed. The ``files`` setting
                is checked first so its error wins over others.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"{CONFIG_SECTION} must be a mapping, got {type(data).__name__}")

        parse_path_specs(data.get("files"))

        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigError(_describe_validation_error(e)) from e

    def resolve(self, project_root: Path) -> BusterSettings:
        """Resolve the configured paths against a project root."""
        root = Path(project_root).resolve()
        files_base = (root / self.files_base).resolve() if self.files_base else root
        output_base = (root / self.output_base).resolve() if self.output_base else files_base
        manifest = (
            (root / self.manifest).resolve()
            if self.manifest
            else output_base / DEFAULT_MANIFEST_NAME
        )

        return BusterSettings(
            project_root=root,
            files_base=files_base,
            output_base=output_base,
            manifest=manifest,
            merge=self.merge,
        )


@dataclass(frozen=True)
class BusterSettings:
    """Absolute paths and flags for a single run."""

    project_root: Path
    files_base: Path
    output_base: Path
    manifest: Path
    merge: bool

    def describe(self) -> str:
        return (
            "Using:\n"
            f"  files-base:  {self.files_base}\n"
            f"  output-base: {self.output_base}\n"
            f"  manifest:    {self.manifest}\n"
            f"  merge:       {self.merge}"
        )


@dataclass(frozen=True)
class BusterProject:
    """A project root together with its buster configuration."""

    root: Path
    config: BusterConfig

    @property
    def settings(self) -> BusterSettings:
        return self.config.resolve(self.root)


def load_project(config_path: Path | str) -> BusterProject:
    """
    Load a project file.

    Args:
        config_path: Path to the YAML project file. Its parent directory
            becomes the project root.

    Raises:
        ConfigError: If the file is missing, not valid YAML, or has no
            usable ``buster`` section.
    """
    path = Path(config_path)
    if not path.is_file():
        raise ConfigError(f"Project file not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing {path}: {e}") from e

    if not isinstance(data, Mapping) or CONFIG_SECTION not in data:
        raise ConfigError(f"{path} has no '{CONFIG_SECTION}' section")

    config = BusterConfig.from_mapping(data[CONFIG_SECTION])
    return BusterProject(root=path.parent.resolve(), config=config)


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{CONFIG_SECTION}.{location}: {first['msg']}"
