"""Compiled page catalogs and the lookups the renderer relies on."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from barbook.config import DEFAULT_TOTAL_PAGES, FallbackRule
from barbook.core.errors import UnknownBookError

from .models import PageVariant, TextPage


class BookCatalog(BaseModel):
    """Authored pages of one book, keyed by page number.

    ``total_pages`` is a configured ceiling, independent of how many pages
    were authored. Unauthored page numbers are answered by ``fallback``.
    """

    model_config = ConfigDict(frozen=True)

    book_id: str
    total_pages: PositiveInt = DEFAULT_TOTAL_PAGES
    fallback: FallbackRule = Field(default_factory=FallbackRule)
    pages: Dict[int, PageVariant] = Field(default_factory=dict)

    def fallback_page(self, page_num: int) -> TextPage:
        return TextPage(
            content=self.fallback.render_content(self.book_id, page_num),
            answer_key_url=self.fallback.render_answer_key_url(self.book_id, page_num),
        )

    def get_page_configuration(self, page_num: int) -> PageVariant:
        page = self.pages.get(page_num)
        if page is not None:
            return page
        return self.fallback_page(page_num)

    def get_answer_key_url(self, page_num: int) -> str:
        page = self.get_page_configuration(page_num)
        return page.answer_key_url or self.fallback.render_answer_key_url(self.book_id, page_num)

    def page_exists(self, page_num: int) -> bool:
        return 1 <= page_num <= self.total_pages

    @property
    def authored_pages(self) -> int:
        return len(self.pages)


class CatalogRegistry(BaseModel):
    """All compiled books plus the id of the default book."""

    model_config = ConfigDict(frozen=True)

    books: Dict[str, BookCatalog] = Field(default_factory=dict)
    default_book: Optional[str] = None

    def get(self, book_id: str) -> Optional[BookCatalog]:
        return self.books.get(book_id)

    def book(self, book_id: str) -> BookCatalog:
        catalog = self.books.get(book_id)
        if catalog is None:
            raise UnknownBookError(book_id)
        return catalog

    @property
    def default(self) -> Optional[BookCatalog]:
        if self.default_book is None:
            return None
        return self.books.get(self.default_book)

    def get_page_configuration(self, book_id: str, page_num: int) -> PageVariant:
        return self.book(book_id).get_page_configuration(page_num)

    def is_empty(self) -> bool:
        return not self.books

    def book_ids(self) -> list[str]:
        return list(self.books)
