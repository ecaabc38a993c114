"""
lot_rename.lister

Enumerate the entry names of a target directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from lot_common.base.fs import list_entry_names
from lot_common.base.logging import get_logger

log = get_logger(__name__)


def list_files(directory: Path | str) -> List[str]:
    """
    Return the names of the immediate entries of ``directory``.

    Files and subdirectories are listed alike, without recursion and in no
    particular order. An unreadable or missing directory yields an empty list.
    """
    try:
        names = list_entry_names(directory)
    except OSError as exc:
        log.warning("⚠️ unreadable_directory path=%s error=%s", directory, exc)
        return []
    log.debug("Listed %d entries in %s", len(names), directory)
    return names
