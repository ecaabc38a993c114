"""Shared infrastructure for the lot renamer: logging, file I/O, config and reports."""
