from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


_ORGREPAIR_ENV = (
    "ORGREPAIR_EXPORT_FILENAME",
    "ORGREPAIR_CSV_DELIMITER",
    "ORGREPAIR_CSV_ENCODING",
    "ORGREPAIR_EXPORT_ENCODING",
    "ORGREPAIR_PREVIEW_ROWS",
    "ORGREPAIR_MAX_ITERATIONS",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ORGREPAIR_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_csv_file(tmp_path: Path) -> Callable[[str, str], Path]:
    def factory(content: str, name: str = "people.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return factory


@pytest.fixture
def messy_csv() -> str:
    return (
        "Name,Email,Manager Email,Team\n"
        "Ada Lovelace, ADA@Example.com ,,Platform\n"
        ",grace.hopper@example.com,ada@example.com,Platform\n"
        "Dup Ada,ada@example.com,,Platform\n"
        "No Email,,ada@example.com,Ops\n"
        "Bad Email,not-an-email,ada@example.com,Ops\n"
        "Linus,linus@example.com,linus@example.com,Kernel\n"
        "Ken,ken@example.com,boss@example.com,Unix\n"
        "Alan,alan@example.com,edsger@example.com,Theory\n"
        "Edsger,edsger@example.com,alan@example.com,Theory\n"
    )
