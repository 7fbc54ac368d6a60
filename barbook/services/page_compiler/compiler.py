"""
RESPONSIBILITIES
- Compile every configured book workbook into a BookCatalog.
- Isolate failures per book: a missing workbook or pages sheet skips that
  book only, and the run carries on with the next one.
PROCESS OVERVIEW
1. compile_book() opens the workbook, reads pages and (optional) matchups,
   groups matchups per page and normalizes each page row.
2. compile_registry() runs compile_book() for each book in configured order
   and assembles the CatalogRegistry; all warnings land in one WarningLog.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from barbook.config import BookSource, SyncConfig
from barbook.core.errors import (
    DuplicatePageWarning,
    MissingSheetWarning,
    MissingWorkbookWarning,
    SheetNotFound,
    WorkbookNotFound,
    WorkbookUnreadable,
)

from .catalog import BookCatalog, CatalogRegistry
from .diagnostics import WarningLog
from .joiner import group_matchups
from .models import PageVariant
from .normalizer import normalize_page_row
from .reader import MatchupRow, open_workbook, read_matchup_rows, read_page_rows

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CompileResult:
    """Outcome of compiling all configured books."""

    registry: CatalogRegistry
    warnings: WarningLog
    skipped_books: List[str] = field(default_factory=list)

    def page_counts(self) -> Dict[str, int]:
        return {book_id: catalog.authored_pages for book_id, catalog in self.registry.books.items()}


def compile_book(book: BookSource, config: SyncConfig, warnings: WarningLog) -> Optional[BookCatalog]:
    """Compile one book, or return None when its workbook or pages sheet is unusable."""

    layout = config.sheets
    try:
        with open_workbook(book.file) as workbook:
            try:
                page_rows = read_page_rows(workbook, layout, path=book.file)
            except SheetNotFound as exc:
                warnings.add(MissingSheetWarning, book.id, f"{exc}. Skipping.")
                return None
            try:
                matchup_rows: List[MatchupRow] = read_matchup_rows(workbook, layout, path=book.file)
            except SheetNotFound as exc:
                warnings.add(MissingSheetWarning, book.id, str(exc))
                matchup_rows = []
    except (WorkbookNotFound, WorkbookUnreadable) as exc:
        warnings.add(MissingWorkbookWarning, book.id, f"{exc}. Skipping.")
        return None

    matchups = group_matchups(matchup_rows)
    pages: Dict[int, PageVariant] = {}
    for row in page_rows:
        normalized = normalize_page_row(row, matchups, book_id=book.id, warnings=warnings)
        if normalized is None:
            continue
        page_num, page = normalized
        if page_num in pages:
            warnings.add(
                DuplicatePageWarning,
                book.id,
                f"Page number authored more than once (sheet row {row.source_row}); keeping the first.",
                page_num=page_num,
            )
            continue
        pages[page_num] = page

    LOGGER.info("Compiled %s pages for [%s] from %s", len(pages), book.id, book.file)
    return BookCatalog(
        book_id=book.id,
        total_pages=config.total_pages,
        fallback=config.fallback,
        pages=pages,
    )


def compile_registry(config: SyncConfig, warnings: Optional[WarningLog] = None) -> CompileResult:
    """Compile all configured books sequentially into a registry."""

    warnings = warnings if warnings is not None else WarningLog()
    books: Dict[str, BookCatalog] = {}
    skipped: List[str] = []

    for book in config.books:
        catalog = compile_book(book, config, warnings)
        if catalog is None:
            skipped.append(book.id)
            continue
        books[book.id] = catalog

    if not books:
        LOGGER.warning("No books were compiled; the registry is empty")

    registry = CatalogRegistry(books=books, default_book=config.default_book)
    return CompileResult(registry=registry, warnings=warnings, skipped_books=skipped)
