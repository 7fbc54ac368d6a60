"""Configuration helpers for Barbook sync runs.

Loads the YAML run configuration (books to compile, sheet layout, fallback
templates) into validated pydantic models. Relative paths inside a user
supplied file are resolved against the directory that contains it; the
packaged defaults resolve against the working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from barbook.core.errors import ConfigError


CONFIG_DIR = Path(__file__).resolve().parent
DEFAULT_CONFIG_PATH = CONFIG_DIR / "books.yaml"

DEFAULT_TOTAL_PAGES = 100
DEFAULT_FALLBACK_CONTENT = (
    "This is page {page_num} of our {book_label} book. The content for this page is dynamically generated."
)
DEFAULT_FALLBACK_URL = "https://example.com/page-{page_num}-answers"


class BookSource(BaseModel):
    """One book to compile: identifier plus workbook location."""

    model_config = ConfigDict(frozen=True)

    id: str
    file: Path

    @field_validator("id")
    @classmethod
    def _strip_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("book id must not be blank")
        return value


class SheetLayout(BaseModel):
    """Worksheet names and the size of the header block above the data."""

    model_config = ConfigDict(frozen=True)

    pages: str = "Pages"
    matchups: str = "Matchup Items"
    header_rows: int = Field(default=4, ge=0)


def _template_fields(book_id: str, page_num: int) -> dict[str, Any]:
    return {"page_num": page_num, "book_id": book_id, "book_label": book_id.upper()}


class FallbackRule(BaseModel):
    """Templates used to synthesize a text page for unauthored page numbers.

    Both templates accept ``{page_num}``, ``{book_id}`` and ``{book_label}``
    (the upper-cased book id).
    """

    model_config = ConfigDict(frozen=True)

    content: str = DEFAULT_FALLBACK_CONTENT
    answer_key_url: str = DEFAULT_FALLBACK_URL

    def render_content(self, book_id: str, page_num: int) -> str:
        return self.content.format(**_template_fields(book_id, page_num))

    def render_answer_key_url(self, book_id: str, page_num: int) -> str:
        return self.answer_key_url.format(**_template_fields(book_id, page_num))


class SyncConfig(BaseModel):
    """Complete run configuration model."""

    model_config = ConfigDict(extra="forbid")

    books: List[BookSource] = Field(default_factory=list)
    default_book: str = "nfl"
    total_pages: int = Field(default=DEFAULT_TOTAL_PAGES, ge=1)
    output_path: Path = Path("page_config.py")
    sheets: SheetLayout = Field(default_factory=SheetLayout)
    fallback: FallbackRule = Field(default_factory=FallbackRule)

    @model_validator(mode="after")
    def _unique_book_ids(self) -> "SyncConfig":
        seen: set[str] = set()
        for book in self.books:
            if book.id in seen:
                raise ValueError(f"duplicate book id: {book.id}")
            seen.add(book.id)
        return self

    def resolve_paths(self, base_dir: Path) -> "SyncConfig":
        """Return a copy with relative workbook/output paths anchored at *base_dir*."""

        def _anchor(path: Path) -> Path:
            return path if path.is_absolute() else base_dir / path

        return self.model_copy(
            update={
                "books": [BookSource(id=b.id, file=_anchor(b.file)) for b in self.books],
                "output_path": _anchor(self.output_path),
            }
        )


def load_sync_config(path: str | Path | None = None) -> SyncConfig:
    """Load the run configuration from YAML.

    Falls back to the packaged ``books.yaml`` when *path* is not given; its
    relative paths then resolve against the working directory rather than
    the installed package.
    """

    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise ConfigError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {cfg_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config structure in {cfg_path} (expected mapping)")
    try:
        config = SyncConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {cfg_path}: {exc}") from exc
    base_dir = cfg_path.resolve().parent if path else Path.cwd()
    return config.resolve_paths(base_dir)


__all__ = [
    "BookSource",
    "DEFAULT_CONFIG_PATH",
    "FallbackRule",
    "SheetLayout",
    "SyncConfig",
    "load_sync_config",
]
