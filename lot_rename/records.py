"""
lot_rename.records

Read the tab-delimited auction data file into rows of text fields.

The file has no header line and rows may carry any number of fields. Double
quotes delimit fields that contain tabs or line breaks; a line whose quoting
does not balance is a parse error for the whole file.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import List

from lot_common.base.file_io import open_file
from lot_common.base.logging import get_logger

from .errors import RecordParseError

log = get_logger(__name__)

DELIMITER = "\t"
QUOTECHAR = '"'

Row = List[str]


def read_rows(path: Path | str) -> List[Row]:
    """
    Parse ``path`` into rows, preserving line and field order.

    Blank lines are skipped. Raises ``OSError`` when the file cannot be
    opened and ``RecordParseError`` on the first malformed line; no partial
    result is returned.
    """
    rows: List[Row] = []
    with open_file(path, "r", newline="") as handle:
        reader = csv.reader(handle, delimiter=DELIMITER, quotechar=QUOTECHAR, strict=True)
        try:
            for record in reader:
                if not record:
                    continue
                rows.append(record)
        except csv.Error as exc:
            raise RecordParseError(path, reader.line_num, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise RecordParseError(path, reader.line_num + 1, f"invalid UTF-8 data ({exc.reason})") from exc

    log.debug("Read %d data rows from %s", len(rows), path)
    return rows
