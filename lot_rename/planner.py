"""
lot_rename.planner

Compute the rename plan: which existing file gets which new name.

Each data row pairs a lot number (field 0) with an inventory number (field 8).
Every file whose name starts with the inventory number is an "object file" of
that row and is renamed to ``<lot>_<suffix>.jpg``, where the suffix is the text
between the first and second period of the original name. One inventory number
usually fans out to several numbered photos::

    00243878.1.jpg  ->  1_1.jpg
    00243878.2.jpg  ->  1_2.jpg

Rows are applied in order and a later row overwrites an earlier row's entry for
the same file.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from lot_common.base.logging import get_logger

from .errors import MalformedRowError, SuffixExtractionError

log = get_logger(__name__)

LOT_FIELD = 0
INVENTORY_FIELD = 8
NEW_EXTENSION = "jpg"

RenamePlan = Dict[str, str]


def filter_object_files(file_names: Iterable[str], inventory_number: str) -> List[str]:
    """Return the file names that start with ``inventory_number`` (exact, case-sensitive)."""
    return [name for name in file_names if name.startswith(inventory_number)]


def extract_suffix(file_name: str) -> str:
    """Return the second period-delimited segment of ``file_name``, verbatim."""
    parts = file_name.split(".")
    if len(parts) < 2:
        raise SuffixExtractionError(file_name)
    return parts[1]


def compose_new_name(lot_number: str, suffix: str) -> str:
    return f"{lot_number}_{suffix}.{NEW_EXTENSION}"


def _required_fields(row: Sequence[str], index: int) -> tuple[str, str]:
    if len(row) <= INVENTORY_FIELD:
        raise MalformedRowError(
            index, row, f"expected at least {INVENTORY_FIELD + 1} fields, found {len(row)}"
        )
    return row[LOT_FIELD], row[INVENTORY_FIELD]


def plan_renames(rows: Iterable[Sequence[str]], file_names: Sequence[str]) -> RenamePlan:
    """
    Build the mapping from existing file name to new file name.

    ``rows`` are numbered from 1 in the order given, so ``MalformedRowError``
    names a row position rather than a line of the data file. Raises
    ``MalformedRowError`` for a row with fewer than nine fields and
    ``SuffixExtractionError`` for a matched file name without a suffix. Both
    abort planning, so nothing is renamed. Empty lot or inventory fields are
    used as-is.
    """
    plan: RenamePlan = {}
    for index, row in enumerate(rows, start=1):
        lot_number, inventory_number = _required_fields(row, index)

        object_files = filter_object_files(file_names, inventory_number)
        if not object_files:
            log.debug("Row %d: no files match inventory number %s", index, inventory_number)
            continue

        for object_file in object_files:
            new_name = compose_new_name(lot_number, extract_suffix(object_file))
            previous = plan.get(object_file)
            if previous is not None and previous != new_name:
                log.debug(
                    "Row %d overrides %s: %s replaces %s",
                    index,
                    object_file,
                    new_name,
                    previous,
                )
            plan[object_file] = new_name

    for new_name, sources in shared_targets(plan).items():
        log.warning(
            "%d files are planned onto %s (%s); only the last one renamed will remain",
            len(sources),
            new_name,
            ", ".join(sources),
        )

    log.debug("Planned %d renames", len(plan))
    return plan


def shared_targets(plan: RenamePlan) -> Dict[str, List[str]]:
    """Return new names that more than one existing file is planned onto."""
    sources: Dict[str, List[str]] = {}
    for old_name, new_name in plan.items():
        sources.setdefault(new_name, []).append(old_name)
    return {new_name: names for new_name, names in sources.items() if len(names) > 1}


def unmatched_files(plan: RenamePlan, file_names: Iterable[str]) -> List[str]:
    """Return the file names the plan leaves untouched."""
    return [name for name in file_names if name not in plan]
