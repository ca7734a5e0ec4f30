"""Content digests and fingerprinted file naming."""

from assetbuster.fingerprint.digest import (
    DEFAULT_DIGEST_LENGTH,
    DigestAlgorithm,
    DigestFunction,
    compute_file_digest,
    make_digest,
)
from assetbuster.fingerprint.naming import fingerprinted_name, fingerprinted_path, split_name

__all__ = [
    "DEFAULT_DIGEST_LENGTH",
    "DigestAlgorithm",
    "DigestFunction",
    "compute_file_digest",
    "make_digest",
    "fingerprinted_name",
    "fingerprinted_path",
    "split_name",
]
