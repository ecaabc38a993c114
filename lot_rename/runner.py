"""
lot_rename.runner

One rename run: list the directory, read the data file, plan, apply, report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from lot_common.base.fs import is_directory
from lot_common.base.logging import get_logger
from lot_common.shared.report import export_report, summarize_counts

from .errors import ArgumentError
from .lister import list_files
from .planner import RenamePlan, plan_renames, unmatched_files
from .records import read_rows
from .renamer import REPORT_FIELDS, STATUS_RENAMED, RenameResult, apply_renames

log = get_logger(__name__)

REPORT_BASE_NAME = "lot_rename"


@dataclass(frozen=True)
class RenameJob:
    data_file: Path
    directory: Path
    dry_run: bool = False
    report_dir: Optional[Path] = None

    @classmethod
    def from_args(
        cls,
        data_file: Path | str,
        directory: Path | str,
        *,
        dry_run: bool = False,
        report_dir: Path | str | None = None,
    ) -> "RenameJob":
        """Validate the directory argument; the data file is only opened by ``run``."""
        directory_path = Path(directory).expanduser()
        if not is_directory(directory_path):
            raise ArgumentError(f"given directory path is not a directory: {directory_path}")
        return cls(
            data_file=Path(data_file).expanduser(),
            directory=directory_path,
            dry_run=dry_run,
            report_dir=Path(report_dir).expanduser() if report_dir else None,
        )


@dataclass
class RunSummary:
    plan: RenamePlan
    results: List[RenameResult]
    unmatched: List[str]
    report_path: Optional[Path] = None
    counts: Dict[str, int] = field(init=False)

    def __post_init__(self) -> None:
        self.counts = {
            "Planned": len(self.plan),
            "Renamed": sum(1 for r in self.results if r.status == STATUS_RENAMED),
            "Unmatched": len(self.unmatched),
        }


def run(job: RenameJob) -> RunSummary:
    """Execute ``job``. Planning errors abort before any file is renamed."""
    file_names = list_files(job.directory)
    rows = read_rows(job.data_file)
    log.info(f"Loaded {len(rows)} data rows and {len(file_names)} directory entries")

    plan = plan_renames(rows, file_names)
    untouched = unmatched_files(plan, file_names)
    for name in untouched:
        log.debug(f"No data row matches {name}")

    results = apply_renames(job.directory, plan, dry_run=job.dry_run)

    report_path = None
    if job.report_dir is not None:
        report_path = export_report(
            [result.as_row() for result in results],
            base_name=REPORT_BASE_NAME,
            output_dir=job.report_dir,
            fieldnames=REPORT_FIELDS,
        )

    summary = RunSummary(
        plan=plan,
        results=results,
        unmatched=untouched,
        report_path=report_path,
    )
    log.info(summarize_counts("Rename Summary", summary.counts))
    if job.dry_run:
        log.info("[DRY-RUN] No changes were applied.")
    return summary
