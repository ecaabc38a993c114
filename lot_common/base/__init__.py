"""Low-level shared utilities for the lot renamer."""

from .logging import get_logger, reset_logging, setup_logging, RenamerLogger

__all__ = [
    "get_logger",
    "reset_logging",
    "setup_logging",
    "RenamerLogger",
]
