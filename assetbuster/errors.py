"""Exception types raised by assetbuster."""

from __future__ import annotations


class BusterError(Exception):
    """Base class for all assetbuster failures."""


class ConfigError(BusterError):
    """Raised when the buster configuration is missing or malformed."""


class ManifestError(BusterError):
    """Raised when an existing rev-manifest cannot be read."""


class UnsupportedFileNameError(BusterError):
    """Raised for file names that cannot be split into basename and extension."""

    def __init__(self, name: str):
        super().__init__(f"Cannot fingerprint file name without basename and extension: {name!r}")
        self.name = name
