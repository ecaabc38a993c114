"""Exception types raised while planning and applying lot renames.

I/O failures are not wrapped: they surface as the built-in ``OSError`` family.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class LotRenameError(Exception):
    """Base class for all lot renamer errors."""


class ArgumentError(LotRenameError):
    """Command-line arguments do not describe a runnable job."""


class RecordParseError(LotRenameError, ValueError):
    """A line of the data file is malformed for the tab-delimited format."""

    def __init__(self, path: Path | str, line: int, reason: str) -> None:
        self.path = Path(path)
        self.line = line
        self.reason = reason
        super().__init__(f"{self.path}: line {line}: {reason}")


class MalformedRowError(LotRenameError, ValueError):
    """A data row is too short to hold its inventory number (field 8).

    ``index`` is the 1-based position of the row among the parsed rows.
    """

    def __init__(self, index: int, row: Sequence[str], reason: str) -> None:
        self.index = index
        self.row = list(row)
        self.reason = reason
        super().__init__(f"Malformed data row {index}: {reason}")


class SuffixExtractionError(LotRenameError, ValueError):
    """A matched file name has no segment between its first and second period."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(
            f"Cannot extract suffix from '{file_name}': expected '<inventory>.<suffix>[.<ext>]'"
        )
