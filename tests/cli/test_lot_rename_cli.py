from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from lot_rename.cli import (
    EXIT_ARGUMENT_ERROR,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    cli,
)
from lot_rename.lister import list_files


@pytest.fixture(autouse=True)
def _run_in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep ./configs/config.yaml discovery away from the checkout.
    monkeypatch.chdir(tmp_path)


def test_cli_renames_and_prints_each_rename(
    photo_dir: Path, data_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = cli([str(data_file), str(photo_dir), "--no-rich"])

    out = capsys.readouterr().out
    assert code == EXIT_SUCCESS
    assert "renaming 00243878.1.jpg to 1_1.jpg" in out
    assert "RENAME SUMMARY" in out
    assert "1_1.jpg" in list_files(photo_dir)


def test_cli_requires_exactly_two_arguments(
    data_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli([str(data_file)])

    assert excinfo.value.code == 2
    assert "directory" in capsys.readouterr().err


def test_cli_rejects_extra_arguments(photo_dir: Path, data_file: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli([str(data_file), str(photo_dir), "extra"])

    assert excinfo.value.code == 2


def test_cli_non_directory_argument(
    tmp_path: Path, data_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = cli([str(data_file), str(data_file), "--no-rich"])

    assert code == EXIT_ARGUMENT_ERROR
    assert "not a directory" in capsys.readouterr().err


def test_cli_missing_data_file(
    tmp_path: Path, photo_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    before = set(list_files(photo_dir))

    code = cli([str(tmp_path / "absent.csv"), str(photo_dir), "--no-rich"])

    assert code == EXIT_FAILURE
    assert "Application error" in capsys.readouterr().err
    assert set(list_files(photo_dir)) == before


def test_cli_malformed_file_name_aborts(
    photo_dir: Path, data_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (photo_dir / "00243344").write_bytes(b"")
    before = set(list_files(photo_dir))

    code = cli([str(data_file), str(photo_dir), "--no-rich"])

    assert code == EXIT_FAILURE
    assert "00243344" in capsys.readouterr().err
    assert set(list_files(photo_dir)) == before


def test_cli_dry_run(photo_dir: Path, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    before = set(list_files(photo_dir))

    code = cli([str(data_file), str(photo_dir), "--dry-run", "--no-rich"])

    assert code == EXIT_SUCCESS
    assert "[DRY-RUN] Would rename 00243878.1.jpg to 1_1.jpg" in capsys.readouterr().out
    assert set(list_files(photo_dir)) == before


def test_cli_config_file_drives_dry_run_report_and_log(
    tmp_path: Path, photo_dir: Path, data_file: Path
) -> None:
    config = tmp_path / "configs" / "config.yaml"
    config.parent.mkdir()
    config.write_text(
        textwrap.dedent(
            """
            logging:
              level: DEBUG
              use_rich: false
              log_dir: ../logs
              file_prefix: nightly
            tasks:
              lot_rename:
                dry_run: true
                report_dir: ../reports
            """
        ),
        encoding="utf-8",
    )
    before = set(list_files(photo_dir))

    code = cli([str(data_file), str(photo_dir)])

    assert code == EXIT_SUCCESS
    assert set(list_files(photo_dir)) == before
    reports = list((tmp_path / "reports").glob("lot_rename_*.csv"))
    assert len(reports) == 1
    logs = list((tmp_path / "logs").glob("nightly_*.log"))
    assert len(logs) == 1
    assert "Would rename 00243878.1.jpg to 1_1.jpg" in logs[0].read_text(encoding="utf-8")


def test_cli_invalid_config(tmp_path: Path, photo_dir: Path, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text("tasks:\n  lot_rename:\n    rename_all: yes\n", encoding="utf-8")

    code = cli([str(data_file), str(photo_dir), "--config", str(config)])

    assert code == EXIT_ARGUMENT_ERROR
    assert "unsupported keys" in capsys.readouterr().err
