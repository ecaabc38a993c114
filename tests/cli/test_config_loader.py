from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from lot_common.shared.loader import load_task_config, resolve_config_path


def _write_config(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")
    return path


def _wrap_task_config(task: str, body: str, logging_body: str | None = None) -> str:
    logging_block = (logging_body or "level: INFO").strip()
    parts = [
        "logging:\n",
        textwrap.indent(logging_block, "  "),
        "\ntasks:\n",
        f"  {task}:\n",
        textwrap.indent(body.strip(), "    "),
        "\n",
    ]
    return "".join(parts)


def test_load_task_config_lot_rename(tmp_path: Path) -> None:
    cfg_path = _write_config(
        tmp_path,
        "rename.yaml",
        _wrap_task_config(
            "lot_rename",
            "dry_run: true\nreport_dir: './reports'\n",
            logging_body="level: DEBUG\nlog_dir: logs\nfile_prefix: nightly\n",
        ),
    )

    config = load_task_config("lot_rename", cfg_path)

    assert config["dry_run"] is True
    assert config["report_dir"] == str((tmp_path / "reports").resolve())
    assert config["__task__"] == "lot_rename"
    assert config["__config_path__"] == str(cfg_path)
    logging_cfg = config["__logging__"]
    assert logging_cfg["level"] == "DEBUG"
    assert logging_cfg["file_prefix"] == "nightly"
    assert logging_cfg["log_dir"] == str((tmp_path / "logs").resolve())


def test_load_task_config_aliases_and_string_booleans(tmp_path: Path) -> None:
    cfg_path = _write_config(
        tmp_path,
        "alias.yaml",
        _wrap_task_config("lot_rename", "dry-run: 'no'\nreports: /srv/reports\n"),
    )

    config = load_task_config("lot_rename", cfg_path)

    assert config["dry_run"] is False
    assert config["report_dir"] == str(Path("/srv/reports").resolve())


def test_load_task_config_task_logging_override(tmp_path: Path) -> None:
    cfg_path = _write_config(
        tmp_path,
        "override.yaml",
        _wrap_task_config(
            "lot_rename",
            "dry_run: false\nlogging:\n  level: WARNING\n",
            logging_body="level: INFO\nuse_rich: false\n",
        ),
    )

    config = load_task_config("lot_rename", cfg_path)

    assert config["__logging__"] == {"level": "WARNING", "use_rich": False}


def test_load_task_config_without_file_uses_defaults() -> None:
    config = load_task_config("lot_rename", None)

    assert config == {"__task__": "lot_rename", "__config_path__": None}


def test_load_task_config_without_task_section(tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, "logging_only.yaml", "logging:\n  level: ERROR\n")

    config = load_task_config("lot_rename", cfg_path)

    assert "dry_run" not in config
    assert config["__logging__"] == {"level": "ERROR"}


def test_load_task_config_rejects_unknown_keys(tmp_path: Path) -> None:
    cfg_path = _write_config(
        tmp_path,
        "bad.yaml",
        _wrap_task_config("lot_rename", "dry_run: true\ntemplate: '{lot}-{n}.png'\n"),
    )

    with pytest.raises(ValueError, match="unsupported keys"):
        load_task_config("lot_rename", cfg_path)


def test_load_task_config_rejects_bad_boolean(tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, "bool.yaml", _wrap_task_config("lot_rename", "dry_run: maybe\n"))

    with pytest.raises(ValueError, match="dry_run"):
        load_task_config("lot_rename", cfg_path)


def test_load_task_config_rejects_unknown_logging_keys(tmp_path: Path) -> None:
    cfg_path = _write_config(
        tmp_path,
        "log.yaml",
        _wrap_task_config("lot_rename", "dry_run: true\n", logging_body="colour: red\n"),
    )

    with pytest.raises(ValueError, match="colour"):
        load_task_config("lot_rename", cfg_path)


def test_load_task_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, "list.yaml", "- one\n- two\n")

    with pytest.raises(ValueError, match="mapping"):
        load_task_config("lot_rename", cfg_path)


def test_load_task_config_unknown_task(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unknown task"):
        load_task_config("vid_rename", None)


def test_load_task_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_task_config("lot_rename", tmp_path / "absent.yaml")


def test_resolve_config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert resolve_config_path(None) is None

    default = tmp_path / "configs" / "config.yaml"
    default.parent.mkdir()
    default.write_text("logging: {}\n", encoding="utf-8")
    assert resolve_config_path(None) == default

    explicit = tmp_path / "other.yaml"
    assert resolve_config_path(explicit) == explicit
