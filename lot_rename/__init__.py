"""
lot_rename

Rename auction inventory photos after their lot numbers.

Modules:
  lister   : directory entry listing
  records  : tab-delimited data file reader
  planner  : old name -> new name plan
  renamer  : plan application
  runner   : one complete run
  cli      : `lot-rename` entry point
"""

from .errors import (
    ArgumentError,
    LotRenameError,
    MalformedRowError,
    RecordParseError,
    SuffixExtractionError,
)
from .lister import list_files
from .planner import plan_renames
from .records import read_rows
from .renamer import RenameResult, apply_renames
from .runner import RenameJob, RunSummary, run

__all__ = [
    "ArgumentError",
    "LotRenameError",
    "MalformedRowError",
    "RecordParseError",
    "SuffixExtractionError",
    "list_files",
    "plan_renames",
    "read_rows",
    "RenameResult",
    "apply_renames",
    "RenameJob",
    "RunSummary",
    "run",
]
