"""
lot_rename.renamer

Apply a rename plan to the target directory.

Renames run one at a time in plan order. The first filesystem error aborts
the batch; renames already performed stay in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping

from lot_common.base.logging import get_logger
from lot_common.base.ops import rename_path
from lot_common.shared.utils import Progress

log = get_logger(__name__)

STATUS_RENAMED = "renamed"
STATUS_DRY_RUN = "dry-run"

REPORT_FIELDS = ("old_name", "new_name", "status")


@dataclass(frozen=True)
class RenameResult:
    old_name: str
    new_name: str
    status: str

    def as_row(self) -> Dict[str, str]:
        return {"old_name": self.old_name, "new_name": self.new_name, "status": self.status}


def apply_renames(
    directory: Path | str,
    plan: Mapping[str, str],
    *,
    dry_run: bool = False,
) -> List[RenameResult]:
    """
    Rename every ``old -> new`` pair of ``plan`` inside ``directory``.

    Logs one line per rename before performing it. Raises the first
    ``OSError`` encountered; earlier renames are not rolled back.
    """
    root = Path(directory)
    results: List[RenameResult] = []

    for old_name, new_name in Progress(plan.items(), desc="Renaming files", total=len(plan)):
        if dry_run:
            log.info(f"[DRY-RUN] Would rename {old_name} to {new_name}")
        else:
            log.info(f"renaming {old_name} to {new_name}")
        rename_path(root / old_name, root / new_name, dry_run=dry_run)
        results.append(
            RenameResult(old_name, new_name, STATUS_DRY_RUN if dry_run else STATUS_RENAMED)
        )

    return results
