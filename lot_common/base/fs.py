"""Filesystem helper utilities shared across lot_common modules."""

from __future__ import annotations

import os
from pathlib import Path


def ensure_dir(path: Path | str) -> Path:
    p = Path(path).expanduser()
    p.mkdir(parents=True, exist_ok=True)
    return p


def is_directory(path: Path | str) -> bool:
    """Return True when ``path`` exists and its metadata marks it a directory."""
    try:
        return Path(path).expanduser().is_dir()
    except OSError:
        return False


def list_entry_names(path: Path | str) -> list[str]:
    """Return the names of the immediate entries of ``path`` (unsorted)."""
    return os.listdir(Path(path).expanduser())
