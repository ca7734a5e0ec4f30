"""
Fingerprinted file naming.

``app.min.css`` with digest ``acbd18db4c`` becomes ``app.min-acbd18db4c.css``.
"""

from __future__ import annotations

from pathlib import Path

from assetbuster.errors import UnsupportedFileNameError
from assetbuster.fingerprint.digest import DigestFunction


def split_name(name: str) -> tuple[str, str]:
    """
    Split a file name into basename and extension on its last dot.

    Names without a dot, with an empty basename (``.htaccess``) or with an
    empty extension (``foo.``) are not supported.

    Raises:
        UnsupportedFileNameError: For unsupported names.
    """
    parts = name.split(".")
    if len(parts) < 2:
        raise UnsupportedFileNameError(name)

    basename = ".".join(parts[:-1])
    extension = parts[-1]
    if not basename or not extension:
        raise UnsupportedFileNameError(name)

    return basename, extension


def fingerprinted_name(name: str, fingerprint: str) -> str:
    basename, extension = split_name(name)
    return f"{basename}-{fingerprint}.{extension}"


def fingerprinted_path(path: Path, digest: DigestFunction) -> Path:
    """
    Return the fingerprinted sibling of ``path``.

    The name is validated before the file is read, so unsupported names
    fail without hashing.
    """
    split_name(path.name)
    return path.with_name(fingerprinted_name(path.name, digest(path)))
