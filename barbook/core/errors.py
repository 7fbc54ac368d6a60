"""Custom exceptions and warning categories used across Barbook."""

from __future__ import annotations

from pathlib import Path


class BarbookError(Exception):
    """Base error for the application."""


class ConfigError(BarbookError):
    """Configuration related error."""


class WorkbookNotFound(BarbookError):
    """Raised when a book's source workbook does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Source workbook not found: {self.path}")


class WorkbookUnreadable(BarbookError):
    """Raised when a workbook exists but cannot be parsed as a spreadsheet."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Could not read workbook {self.path}: {reason}")


class SheetNotFound(BarbookError):
    """Raised when a named worksheet is absent from a workbook."""

    def __init__(self, sheet: str, path: Path | str, mandatory: bool = True) -> None:
        self.sheet = sheet
        self.path = Path(path)
        self.mandatory = mandatory
        super().__init__(f'Could not find sheet "{sheet}" in {self.path}')


class ArtifactError(BarbookError):
    """Raised when a generated page configuration artifact cannot be loaded."""


class UnknownBookError(BarbookError, KeyError):
    """Raised when a query names a book that is not in the registry."""

    def __init__(self, book_id: str) -> None:
        self.book_id = book_id
        super().__init__(f"Unknown book: {book_id!r}")

    def __str__(self) -> str:
        return self.args[0]


class CompileWarning(UserWarning):
    """Base category for recoverable compilation problems."""


class PatternWarning(CompileWarning):
    """An items note could not be turned into a clue sequence."""


class EmptyMatchupWarning(CompileWarning):
    """A matchup page has no matchup rows."""


class UnknownPageTypeWarning(CompileWarning):
    """A page row declares a type outside list/matchup/text/teams."""


class DuplicatePageWarning(CompileWarning):
    """A page number was authored more than once in the same book."""


class MissingSheetWarning(CompileWarning):
    """A workbook lacks a sheet; the book or sheet was skipped."""


class MissingWorkbookWarning(CompileWarning):
    """A configured workbook file does not exist; the book was skipped."""
