"""Shared fixtures for assetbuster tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_buster_logger():
    """Undo CLI logging setup so caplog sees assetbuster records."""
    yield
    logger = logging.getLogger("assetbuster")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_file():
    """Create a file with parent directories and return its path."""

    def _write(path: Path, content: str | bytes = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path.resolve()

    return _write
