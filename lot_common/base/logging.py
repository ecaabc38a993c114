"""
lot_common.base.logging

Typed logging setup for the lot renamer.

Features:
 - Custom RenamerLogger subclass with Rich flag and log file path
 - Rich console handler with an emoji level column
 - Colorized ANSI fallback formatter when Rich is turned off
 - Optional per-run log file
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, cast

from rich.logging import RichHandler
from rich.text import Text

ROOT_LOGGER_NAME = "lot_renamer"

# ----------------------------------------------------------------------
# LEVEL STYLE METADATA
# ----------------------------------------------------------------------

ANSI_RESET = "\033[0m"

LEVEL_STYLES: Dict[int, Dict[str, str]] = {
    logging.DEBUG: {"emoji": "🐛", "ansi": "\033[36m", "rich": "bright_cyan"},
    logging.INFO: {"emoji": "ℹ️", "ansi": "\033[32m", "rich": "green"},
    logging.WARNING: {"emoji": "⚠️", "ansi": "\033[33m", "rich": "yellow"},
    logging.ERROR: {"emoji": "❌", "ansi": "\033[31m", "rich": "red"},
    logging.CRITICAL: {"emoji": "💥", "ansi": "\033[95m", "rich": "bold magenta"},
}
DEFAULT_STYLE = LEVEL_STYLES[logging.INFO]


def _level_style(record: logging.LogRecord) -> Dict[str, str]:
    return LEVEL_STYLES.get(record.levelno, DEFAULT_STYLE)


# ----------------------------------------------------------------------
# FORMATTERS
# ----------------------------------------------------------------------

class ColorEmojiFormatter(logging.Formatter):
    """Console formatter that injects colored level names and emojis."""

    def format(self, record: logging.LogRecord) -> str:
        style = _level_style(record)
        display = f"{style['emoji']} {record.levelname}"
        record.level_display = f"{style['ansi']}{display}{ANSI_RESET}"  # type: ignore[attr-defined]
        try:
            return super().format(record)
        finally:
            delattr(record, "level_display")


class EmojiFormatter(logging.Formatter):
    """File formatter that prefixes log lines with the level emoji."""

    def format(self, record: logging.LogRecord) -> str:
        record.level_emoji = _level_style(record)["emoji"]  # type: ignore[attr-defined]
        try:
            return super().format(record)
        finally:
            delattr(record, "level_emoji")


class RenamerRichHandler(RichHandler):
    """Rich console handler with emoji-enhanced level column."""

    def get_level_text(self, record: logging.LogRecord) -> Text:
        style = _level_style(record)
        text = Text()
        text.append(f"{style['emoji']} ", style=style["rich"])
        text.append(record.levelname, style=style["rich"])
        return text


# ----------------------------------------------------------------------
# LOGGER CLASS
# ----------------------------------------------------------------------

class RenamerLogger(logging.Logger):
    """Logger with Rich flag and optional log file."""

    rich_enabled: bool = False
    log_file: Optional[Path] = None


def normalize_level(value: Any) -> str:
    if isinstance(value, str):
        candidate = value.strip().upper()
        if candidate in logging._nameToLevel:  # type: ignore[attr-defined]
            return candidate
    elif isinstance(value, int):
        label = logging.getLevelName(value)
        if isinstance(label, str) and not label.startswith("Level "):
            return label
    return "INFO"


def normalize_use_rich(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1", "on"}:
            return True
        if lowered in {"false", "no", "0", "off"}:
            return False
    return None


def _root_logger() -> RenamerLogger:
    logging.setLoggerClass(RenamerLogger)
    return cast(RenamerLogger, logging.getLogger(ROOT_LOGGER_NAME))


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


# ----------------------------------------------------------------------
# SETUP
# ----------------------------------------------------------------------

def setup_logging(
    level: str | int | None = None,
    use_rich: Optional[bool] = None,
    log_dir: Optional[Path | str] = None,
    file_prefix: Optional[str] = None,
) -> RenamerLogger:
    """
    Configure and return the root renamer logger.

    Args:
        level: Desired logging level (INFO if unset or unknown).
        use_rich: Use the Rich console handler. None means on.
        log_dir: Directory for a per-run log file. No file is written when unset.
        file_prefix: Prefix for the log filename (default: lot_rename).
    """
    resolved_level = normalize_level(level)
    logger = _root_logger()
    logger.setLevel(resolved_level)

    # Rebuild handlers on every call so settings can change between runs.
    _drop_handlers(logger)

    console_handler: logging.Handler
    if use_rich is None or use_rich:
        console_handler = RenamerRichHandler(
            rich_tracebacks=True,
            markup=False,
            show_time=True,
            show_level=True,
            show_path=False,
            log_time_format="[%X]",
        )
        logger.rich_enabled = True
    else:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            ColorEmojiFormatter(
                fmt="%(asctime)s %(level_display)s %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.rich_enabled = False
    console_handler.setLevel(logging.NOTSET)
    logger.addHandler(console_handler)

    logger.log_file = None
    if log_dir:
        resolved_dir = Path(log_dir).expanduser()
        resolved_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_file_path = resolved_dir / f"{file_prefix or 'lot_rename'}_{timestamp}.log"

        file_handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            EmojiFormatter(
                fmt="%(asctime)s %(level_emoji)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        file_handler.setLevel(logging.NOTSET)
        logger.addHandler(file_handler)
        logger.log_file = log_file_path

    logger.propagate = False
    logger._initialized = True  # type: ignore[attr-defined]
    logger.debug(
        "Logger initialized at level %s (Rich=%s)",
        resolved_level,
        "ON" if logger.rich_enabled else "OFF",
    )
    if logger.log_file is not None:
        logger.info("📄 Log file created at: %s", logger.log_file.resolve())

    return logger


def reset_logging() -> None:
    """Remove configured handlers and restore propagation. Mainly for tests."""
    logger = _root_logger()
    _drop_handlers(logger)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logger.rich_enabled = False
    logger.log_file = None
    logger._initialized = False  # type: ignore[attr-defined]


def get_logger(name: str = ROOT_LOGGER_NAME) -> RenamerLogger:
    """Retrieve a namespaced renamer logger (configured later via setup_logging)."""
    base = _root_logger()

    if not getattr(base, "_initialized", False) and not base.handlers:
        base.addHandler(logging.NullHandler())

    if not name or name == ROOT_LOGGER_NAME:
        return base

    return cast(RenamerLogger, base.getChild(name))
