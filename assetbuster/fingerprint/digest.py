"""
Content digests for fingerprinted file names.

A digest function maps a file to a short, stable hex string that depends
only on the file's bytes.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from enum import Enum
from pathlib import Path

import xxhash

# Same length as gulp-rev file names.
DEFAULT_DIGEST_LENGTH = 10
CHUNK_SIZE = 65536

DigestFunction = Callable[[Path], str]


class DigestAlgorithm(str, Enum):
    """Supported content digest algorithms."""

    MD5 = "md5"
    SHA256 = "sha256"
    XXH64 = "xxh64"


def _new_hasher(algorithm: DigestAlgorithm):
    if algorithm is DigestAlgorithm.XXH64:
        return xxhash.xxh64()
    return hashlib.new(algorithm.value)


def compute_file_digest(path: Path, algorithm: DigestAlgorithm = DigestAlgorithm.MD5) -> str:
    """
    Compute the full hex digest of a file's contents.

    Args:
        path: Path to file.
        algorithm: Digest algorithm.

    Returns:
        Hex-encoded digest string.
    """
    hasher = _new_hasher(algorithm)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def make_digest(
    algorithm: DigestAlgorithm = DigestAlgorithm.MD5,
    length: int = DEFAULT_DIGEST_LENGTH,
) -> DigestFunction:
    """
    Build a digest function that keeps the first ``length`` hex characters.

    Lengths beyond the algorithm's hex digest size are clamped.

    Examples:
        >>> digest = make_digest()
        >>> digest(Path("foo.css"))  # file containing b"foo"
        'acbd18db4c'
    """
    if length < 1:
        raise ValueError(f"Digest length must be positive, got {length}")

    algorithm = DigestAlgorithm(algorithm)

    def digest(path: Path) -> str:
        return compute_file_digest(path, algorithm)[:length]

    return digest
