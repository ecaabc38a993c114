"""
lot_rename.cli

Command-line entry point:

    lot-rename <data_file> <directory> [--dry-run] [--config PATH] [--report-dir PATH]

Exit codes: 0 on success, 1 when the run fails, 2 for argument or
configuration errors, 130 when interrupted.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from lot_common.base.logging import get_logger, normalize_use_rich, setup_logging
from lot_common.shared.loader import load_task_config, resolve_config_path

from .errors import ArgumentError, LotRenameError
from .runner import RenameJob, run

log = get_logger(__name__)

TASK_NAME = "lot_rename"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_ARGUMENT_ERROR = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lot-rename",
        description="Rename inventory photos to <lot>_<n>.jpg using a tab-delimited auction data file.",
    )
    parser.add_argument("data_file", type=Path, help="Tab-delimited data file (lot in field 0, inventory number in field 8).")
    parser.add_argument("directory", type=Path, help="Directory holding the photos to rename.")
    parser.add_argument("--dry-run", action="store_true", help="Print the rename plan without applying it.")
    parser.add_argument("--config", "-c", type=Path, help="YAML configuration (defaults to ./configs/config.yaml when present).")
    parser.add_argument("--report-dir", type=Path, help="Write a CSV report of the renames to this directory.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default: config value or INFO).",
    )
    parser.add_argument("--log-dir", type=Path, help="Also write a log file to this directory.")
    parser.add_argument("--no-rich", action="store_true", help="Use plain console output instead of Rich.")
    return parser


def _configure_logging(args: argparse.Namespace, logging_cfg: Dict[str, Any]) -> None:
    use_rich: Optional[bool] = False if args.no_rich else normalize_use_rich(logging_cfg.get("use_rich"))
    setup_logging(
        level=args.log_level or logging_cfg.get("level"),
        use_rich=use_rich,
        log_dir=args.log_dir or logging_cfg.get("log_dir"),
        file_prefix=logging_cfg.get("file_prefix"),
    )


def cli(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        cfg = load_task_config(TASK_NAME, resolve_config_path(args.config))
    except (OSError, ValueError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_ARGUMENT_ERROR

    _configure_logging(args, cfg.get("__logging__") or {})

    try:
        job = RenameJob.from_args(
            args.data_file,
            args.directory,
            dry_run=args.dry_run or bool(cfg.get("dry_run")),
            report_dir=args.report_dir or cfg.get("report_dir"),
        )
    except ArgumentError as exc:
        print(f"Problem parsing arguments: {exc}", file=sys.stderr)
        return EXIT_ARGUMENT_ERROR

    log.debug(f"Job: {job}")

    try:
        summary = run(job)
    except KeyboardInterrupt:
        log.warning("⚠️ Operation cancelled by user.")
        return EXIT_INTERRUPTED
    except (LotRenameError, OSError) as exc:
        log.debug("Run aborted", exc_info=True)
        print(f"Application error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if summary.report_path is not None:
        log.info(f"📂 Rename report written to: {summary.report_path}")
    return EXIT_SUCCESS


def main() -> None:
    raise SystemExit(cli())


if __name__ == "__main__":
    main()
