"""
Shared configuration loading and validation helpers.

Provides:
 - `load_config`: basic YAML loader
 - `resolve_config_path`: locate the configuration file for a run
 - `load_task_config`: validated configuration for a given task
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from lot_common.base.file_io import read_yaml


ConfigDict = Dict[str, Any]

DEFAULT_CONFIG_FILENAME = "config.yaml"
DEFAULT_CONFIG_DIRNAME = "configs"
LOGGING_SECTION_KEY = "logging"
TASKS_SECTION_KEY = "tasks"


TASK_SCHEMAS: Dict[str, Dict[str, Iterable[str]]] = {
    "lot_rename": {
        "required": [],
        "optional": ["dry_run", "report_dir"],
    },
}

FIELD_ALIASES = {
    "dry-run": "dry_run",
    "report": "report_dir",
    "reports": "report_dir",
}

SINGLE_PATH_FIELDS = {"report_dir"}
BOOLEAN_FIELDS = {"dry_run"}
LOGGING_ALLOWED_KEYS = {"level", "use_rich", "log_dir", "file_prefix"}

YES_VALUES = {"1", "true", "yes", "y", "on"}
NO_VALUES = {"0", "false", "no", "n", "off"}


def load_config(path: str | Path | None) -> Mapping[str, Any]:
    if not path:
        return {}

    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {cfg_path}")

    data = read_yaml(cfg_path)
    if not isinstance(data, Mapping):
        raise ValueError(f"Configuration root must be a mapping in {cfg_path}")

    return data


def resolve_config_path(explicit: str | Path | None = None) -> Optional[Path]:
    """
    Return the configuration file to use for a run.

    An explicit path is returned as-is (its existence is checked on load).
    Otherwise ``./configs/config.yaml`` is used when present, else None.
    """
    if explicit:
        return Path(explicit).expanduser()

    candidate = Path.cwd() / DEFAULT_CONFIG_DIRNAME / DEFAULT_CONFIG_FILENAME
    return candidate if candidate.exists() else None


def load_task_config(task: str, config_path: str | Path | None = None) -> ConfigDict:
    """
    Load and validate the section for ``task``.

    Relative paths are anchored at the configuration file's directory. The
    merged logging settings (root section plus a per-task override) are
    returned under ``__logging__``. Without a configuration path only the
    bookkeeping keys are returned.
    """
    if task not in TASK_SCHEMAS:
        raise ValueError(f"Unknown task '{task}'. Expected one of: {', '.join(sorted(TASK_SCHEMAS))}")

    resolved_path = Path(config_path).expanduser() if config_path else None
    root_config = dict(load_config(resolved_path))
    anchor = resolved_path.parent if resolved_path else None

    task_config_raw = _extract_task_config(root_config, task, resolved_path)
    task_logging_override: Dict[str, Any] = {}
    if LOGGING_SECTION_KEY in task_config_raw:
        logging_payload = task_config_raw.pop(LOGGING_SECTION_KEY)
        if not isinstance(logging_payload, Mapping):
            raise ValueError(
                f"Task '{task}' logging section must be a mapping in {resolved_path}"
            )
        task_logging_override = dict(logging_payload)

    config = _apply_aliases(task_config_raw)

    schema = TASK_SCHEMAS[task]
    required = set(schema.get("required", []))
    optional = set(schema.get("optional", []))
    allowed_keys = required | optional

    missing = [key for key in required if not config.get(key)]
    if missing:
        raise ValueError(
            f"Configuration '{resolved_path}' missing required fields for task '{task}': {', '.join(missing)}"
        )

    unexpected = [key for key in config if key not in allowed_keys]
    if unexpected:
        raise ValueError(
            f"Configuration '{resolved_path}' contains unsupported keys for task '{task}': {', '.join(sorted(unexpected))}"
        )

    normalized: ConfigDict = {}
    for key, value in config.items():
        if key in SINGLE_PATH_FIELDS:
            normalized[key] = _normalize_single_path(value, anchor)
        elif key in BOOLEAN_FIELDS:
            normalized[key] = _coerce_bool(value, key, resolved_path)
        else:
            normalized[key] = value

    merged_logging = _extract_logging_settings(root_config)
    merged_logging.update(task_logging_override)
    merged_logging = _normalize_logging(merged_logging, anchor, resolved_path)

    normalized["__task__"] = task
    normalized["__config_path__"] = str(resolved_path) if resolved_path else None
    if merged_logging:
        normalized["__logging__"] = merged_logging
    return normalized


def _apply_aliases(config: Mapping[str, Any]) -> ConfigDict:
    result: ConfigDict = {}
    for key, value in config.items():
        canonical = FIELD_ALIASES.get(key, key)
        result[canonical] = value
    return result


def _anchor_path(value: Any, anchor: Optional[Path]) -> str:
    path = Path(str(value)).expanduser()
    if not path.is_absolute() and anchor is not None:
        path = anchor / path
    return str(path.resolve())


def _normalize_single_path(value: Any, anchor: Optional[Path]) -> str:
    if value is None or value == "":
        raise ValueError("Expected a path value, received nothing")
    return _anchor_path(value, anchor)


def _coerce_bool(value: object, key: str, config_path: Optional[Path]) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in YES_VALUES:
        return True
    if text in NO_VALUES:
        return False
    raise ValueError(
        f"Configuration '{config_path}' field '{key}' must be a boolean (true/false, yes/no)."
    )


def _extract_task_config(root: Mapping[str, Any], task: str, config_path: Optional[Path]) -> ConfigDict:
    if TASKS_SECTION_KEY not in root:
        return {}
    tasks_section = root.get(TASKS_SECTION_KEY) or {}
    if not isinstance(tasks_section, Mapping):
        raise ValueError(f"'{TASKS_SECTION_KEY}' section must be a mapping in {config_path}")
    task_payload = tasks_section.get(task) or {}
    if not isinstance(task_payload, Mapping):
        raise ValueError(f"Task '{task}' entry must be a mapping in {config_path}")
    return dict(task_payload)


def _extract_logging_settings(root: Mapping[str, Any]) -> Dict[str, Any]:
    section = root.get(LOGGING_SECTION_KEY, {})
    return dict(section) if isinstance(section, Mapping) else {}


def _normalize_logging(
    logging_cfg: Dict[str, Any],
    anchor: Optional[Path],
    config_path: str | Path | None,
) -> Dict[str, Any]:
    invalid = [key for key in logging_cfg if key not in LOGGING_ALLOWED_KEYS]
    if invalid:
        raise ValueError(
            f"Logging section contains unsupported keys in {config_path}: {', '.join(sorted(invalid))}"
        )
    cfg = dict(logging_cfg)
    if cfg.get("log_dir"):
        cfg["log_dir"] = _anchor_path(cfg["log_dir"], anchor)
    return cfg
