"""
RESPONSIBILITIES
- Open a book workbook via openpyxl and release the handle when reading ends.
- Read a named sheet below its header block into fixed-shape row records.
PROCESS OVERVIEW
1. open_workbook() verifies the file exists and loads it read-only.
2. read_rows() walks the sheet from the first data row, mapping cells
   positionally onto the caller's column names (absent cells become "").
3. read_page_rows()/read_matchup_rows() wrap the raw mappings into
   PageRow/MatchupRow records so downstream code is statically shaped.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Iterator, Sequence
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from barbook.config import SheetLayout
from barbook.core.errors import SheetNotFound, WorkbookNotFound, WorkbookUnreadable

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PageRow:
    """One authored row of the ``Pages`` sheet."""

    page_num: object = ""
    type: object = ""
    title: object = ""
    description: object = ""
    items_note: object = ""
    columns: object = ""
    answer_key_url: object = ""
    action_note: object = ""
    note_position: object = ""
    note_rotation: object = ""
    note_icon: object = ""
    source_row: int | None = None


@dataclass(frozen=True, slots=True)
class MatchupRow:
    """One authored row of the ``Matchup Items`` sheet."""

    page_num: object = ""
    context: object = ""
    center_text: object = ""
    notes: object = ""
    source_row: int | None = None


PAGE_COLUMNS: tuple[str, ...] = tuple(f.name for f in fields(PageRow) if f.name != "source_row")
MATCHUP_COLUMNS: tuple[str, ...] = tuple(f.name for f in fields(MatchupRow) if f.name != "source_row")


@contextmanager
def open_workbook(path: Path) -> Iterator[Workbook]:
    """Yield a read-only workbook, closing the file handle on exit."""

    if not path.exists():
        raise WorkbookNotFound(path)
    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError, ValueError) as exc:
        raise WorkbookUnreadable(path, str(exc)) from exc
    LOGGER.info("Opened workbook %s (sheets: %s)", path, ", ".join(workbook.sheetnames))
    try:
        yield workbook
    finally:
        workbook.close()


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def read_rows(
    workbook: Workbook,
    sheet_name: str,
    columns: Sequence[str],
    *,
    header_rows: int,
    path: Path | str = "",
    mandatory: bool = True,
) -> list[dict[str, object]]:
    """Return the data rows of *sheet_name* keyed positionally by *columns*.

    Rows are read starting right below the ``header_rows`` header block.
    Entirely blank rows are skipped. Each mapping also carries the
    spreadsheet row number under ``source_row``.
    """

    if sheet_name not in workbook.sheetnames:
        raise SheetNotFound(sheet_name, path, mandatory=mandatory)

    worksheet = workbook[sheet_name]
    first_row = header_rows + 1
    records: list[dict[str, object]] = []
    for offset, raw_values in enumerate(worksheet.iter_rows(min_row=first_row, values_only=True)):
        if raw_values is None or all(_is_blank(cell) for cell in raw_values):
            continue
        record: dict[str, object] = {}
        for idx, column in enumerate(columns):
            value = raw_values[idx] if idx < len(raw_values) else None
            record[column] = "" if value is None else value
        record["source_row"] = first_row + offset
        records.append(record)

    LOGGER.debug("Read %s rows from sheet %r", len(records), sheet_name)
    return records


def read_page_rows(workbook: Workbook, layout: SheetLayout, path: Path | str = "") -> list[PageRow]:
    """Read the mandatory pages sheet."""

    rows = read_rows(
        workbook,
        layout.pages,
        PAGE_COLUMNS,
        header_rows=layout.header_rows,
        path=path,
        mandatory=True,
    )
    return [PageRow(**row) for row in rows]


def read_matchup_rows(workbook: Workbook, layout: SheetLayout, path: Path | str = "") -> list[MatchupRow]:
    """Read the optional matchup items sheet.

    Raises SheetNotFound with ``mandatory=False`` when the sheet is absent.
    """

    rows = read_rows(
        workbook,
        layout.matchups,
        MATCHUP_COLUMNS,
        header_rows=layout.header_rows,
        path=path,
        mandatory=False,
    )
    return [MatchupRow(**row) for row in rows]
