"""
lot_common.shared.report

Reporting utilities for rename runs.

 - Timestamped report filenames
 - CSV export
 - Human-readable summary blocks
"""

from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from lot_common.base.file_io import open_file
from lot_common.base.fs import ensure_dir
from lot_common.base.logging import get_logger

log = get_logger(__name__)


# ----------------------------------------------------------------------
# TIMESTAMPED FILENAMES
# ----------------------------------------------------------------------

def timestamped_filename(base_name: str, ext: str = "csv", output_dir: Optional[Path] = None) -> Path:
    """
    Generate a timestamped output filename (e.g., lot_rename_2025-10-06_103000.csv)
    """
    ts = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    name = f"{base_name}_{ts}.{ext}"
    output_dir = ensure_dir(output_dir or Path.cwd())
    return output_dir / name


# ----------------------------------------------------------------------
# CSV WRITER
# ----------------------------------------------------------------------

def write_csv(
    data: List[Dict[str, Any]],
    output_path: Path,
    fieldnames: Optional[Sequence[str]] = None,
) -> Path:
    """Write structured data to a CSV file."""
    if not data:
        log.warning("No data provided for CSV export.")
        return output_path

    ensure_dir(output_path.parent)
    try:
        with open_file(output_path, "w", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=list(fieldnames or data[0].keys()))
            writer.writeheader()
            writer.writerows(data)
        log.debug(f"📊 CSV report saved → {output_path}")
        return output_path
    except OSError as e:
        log.error(f"Failed to write CSV report: {e}")
        raise


# ----------------------------------------------------------------------
# HUMAN-READABLE SUMMARY
# ----------------------------------------------------------------------

def summarize_counts(title: str, summary: Dict[str, int]) -> str:
    """
    Return a formatted, human-readable summary string.
    Example:
        summarize_counts("Rename Summary", {"Planned": 12, "Unmatched": 3})
    """
    lines = [f"\n===== {title.upper()} ====="]
    for key, val in summary.items():
        lines.append(f"{key}: {val}")
    lines.append("=====================\n")
    return "\n".join(lines)


# ----------------------------------------------------------------------
# EXPORT WRAPPER
# ----------------------------------------------------------------------

def export_report(
    data: List[Dict[str, Any]],
    base_name: str,
    output_dir: Optional[Path] = None,
    fieldnames: Optional[Sequence[str]] = None,
) -> Optional[Path]:
    """
    Export report rows to a timestamped CSV file.

    Args:
        data: List of dicts (structured data)
        base_name: Base filename for the report (e.g. 'lot_rename')
        output_dir: Directory for report storage
        fieldnames: Column order (defaults to the first row's keys)

    Returns:
        Path of the written report, None when there is no data.
    """
    if not data:
        log.warning("No report data to export.")
        return None

    output_path = timestamped_filename(base_name, "csv", output_dir)
    written = write_csv(data, output_path, fieldnames=fieldnames)
    log.info(f"Report export completed for '{base_name}'")
    return written
