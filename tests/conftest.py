from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Sequence

import pytest

from lot_common.base.logging import reset_logging

INVENTORY_NUMBERS = ("00243878", "00243880", "00243344")
PHOTOS_PER_OBJECT = {"00243878": 7, "00243880": 6, "00243344": 7}


def data_row(lot: str, inventory: str, title: str = "Lot description") -> List[str]:
    """Build a 20-field auction export row with the lot in field 0 and inventory in field 8."""
    return [lot, "", f"{title} ...", title, "EUR", "4000", "6000", "3000", inventory] + [""] * 11


def write_data_file(path: Path, rows: Sequence[Sequence[str]]) -> Path:
    lines = []
    for row in rows:
        lines.append("\t".join(f'"{field}"' if " " in field else field for field in row))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolated_logging() -> Iterator[None]:
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def photo_dir(tmp_path: Path) -> Path:
    """Directory with the numbered photos of three auction objects."""
    directory = tmp_path / "photos"
    directory.mkdir()
    for inventory, count in PHOTOS_PER_OBJECT.items():
        for index in range(1, count + 1):
            (directory / f"{inventory}.{index}.jpg").write_bytes(b"\xff\xd8\xff")
    return directory


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    rows = [
        data_row("1", "00243878", "Henricus Johannes (Harrie) Kuyten, Schoorl, Beach view with various people"),
        data_row("2", "00243880", "Henricus Johannes (Harrie) Kuyten, Schoorl, Beach view, pastel drawing"),
        data_row("3", "00243344", "Very large antique blue/white Chinese porcelain lidded vase"),
    ]
    return write_data_file(tmp_path / "data.csv", rows)
