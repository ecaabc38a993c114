"""
lot_common.base.ops

Filesystem operations with logging and dry-run support.
"""

from __future__ import annotations

import os
from pathlib import Path

from .logging import get_logger

log = get_logger(__name__)


def rename_path(src: Path | str, dst: Path | str, dry_run: bool = False) -> None:
    """
    Rename ``src`` to ``dst`` with a single ``os.rename`` call.

    The rename is atomic on the same filesystem. Errors are logged and re-raised.

    Args:
        src: Existing path.
        dst: Target path (same directory in practice).
        dry_run: Simulate the rename without performing it.
    """
    src, dst = Path(src), Path(dst)

    if dry_run:
        log.debug(f"[DRY-RUN] Would rename {src} → {dst}")
        return

    try:
        os.rename(src, dst)
        log.debug(f"Renamed {src} → {dst}")
    except OSError as e:
        log.error(f"Rename failed {src} → {dst}: {e}")
        raise
