from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence

import pytest
from openpyxl import Workbook

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from barbook.config import SyncConfig
from barbook.core.logger import WORK_DIR_ENV, reset_logger

PAGE_HEADER = [
    "Page #",
    "Type",
    "Title",
    "Description",
    "Items Note",
    "Columns",
    "Answer Key URL",
    "Action Note",
    "Note Position",
    "Note Rotation",
    "Note Icon",
]
MATCHUP_HEADER = ["Page #", "Context", "Center Text", "Notes"]

Rows = Sequence[Sequence[object]]


def _write_sheet(workbook: Workbook, title: str, header: Sequence[str], rows: Rows, header_rows: int) -> None:
    worksheet = workbook.create_sheet(title=title)
    worksheet.cell(row=1, column=1, value=f"{title} (authoring sheet)")
    if header_rows:
        for idx, label in enumerate(header, start=1):
            worksheet.cell(row=header_rows, column=idx, value=label)
    for offset, row in enumerate(rows):
        for idx, value in enumerate(row, start=1):
            if value is None:
                continue
            worksheet.cell(row=header_rows + 1 + offset, column=idx, value=value)


def build_workbook(
    path: Path,
    pages: Optional[Rows] = None,
    matchups: Optional[Rows] = None,
    header_rows: int = 4,
) -> Path:
    """Write a workbook shaped like the authoring template.

    ``None`` for *pages* or *matchups* leaves that sheet out entirely.
    """

    workbook = Workbook()
    workbook.remove(workbook.active)
    if pages is not None:
        _write_sheet(workbook, "Pages", PAGE_HEADER, pages, header_rows)
    if matchups is not None:
        _write_sheet(workbook, "Matchup Items", MATCHUP_HEADER, matchups, header_rows)
    if not workbook.sheetnames:
        workbook.create_sheet(title="Notes")
    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
    return path


NFL_PAGES: Rows = [
    [1, "list", "Super Bowl Champions", "Name the last 5 winners", "5 items - clues are years descending from 2024", 1, "https://example.com/nfl/1"],
    [2, "Matchup", "Famous Rivalries", "Fill in the rival", "", 2, "https://example.com/nfl/2", "Hint: think NFC", "left", -4, "*"],
    [3, "text", "ignored title", "Halftime! Grab a drink.", "", "", ""],
    [4, "teams", "Team Trivia", "Split into teams", "", "", "https://example.com/nfl/4", "Bonus round"],
    [5, "lsit", "Typo Page", "", "", "", ""],
    [6, "list", "Top Rushers", "All-time rushing leaders", "3 items - clues are rank numbers", 3, ""],
]
NFL_MATCHUPS: Rows = [
    [2, "Cowboys", "vs"],
    [2, "Bears", "vs"],
    [0, "Nobody", "vs"],
]


@pytest.fixture()
def workbook_factory(tmp_path: Path) -> Callable[..., Path]:
    def _factory(name: str = "book.xlsx", **kwargs: object) -> Path:
        return build_workbook(tmp_path / name, **kwargs)  # type: ignore[arg-type]

    return _factory


@pytest.fixture()
def nfl_workbook(tmp_path: Path) -> Path:
    return build_workbook(tmp_path / "NFL Barbook Trivia.xlsx", pages=NFL_PAGES, matchups=NFL_MATCHUPS)


@pytest.fixture()
def sync_config(tmp_path: Path, nfl_workbook: Path) -> SyncConfig:
    return SyncConfig.model_validate(
        {
            "books": [
                {"id": "nfl", "file": str(nfl_workbook)},
                {"id": "nba", "file": str(tmp_path / "NBA Barbook Trivia.xlsx")},
            ],
            "output_path": str(tmp_path / "out" / "page_config.py"),
        }
    )


@pytest.fixture()
def isolated_logger(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep CLI logging out of the project workspace and drop handlers afterwards."""

    monkeypatch.setenv(WORK_DIR_ENV, str(tmp_path / "work"))
    reset_logger()
    yield
    reset_logger()
