"""Tests for page lookups on compiled catalogs."""

from __future__ import annotations

from pathlib import Path

import pytest

from barbook.config import FallbackRule, SyncConfig
from barbook.core.errors import UnknownBookError
from barbook.services.page_compiler import PageQueryService, compile_registry
from barbook.services.page_compiler.catalog import BookCatalog, CatalogRegistry
from barbook.services.page_compiler.models import ListPage, TeamsPage, TextPage
from barbook.services.page_compiler.serializer import render_artifact, write_artifact


@pytest.fixture()
def catalog() -> BookCatalog:
    return BookCatalog(
        book_id="nba",
        total_pages=100,
        pages={
            1: ListPage(title="MVPs", answer_key_url="https://example.com/nba/1"),
            3: TeamsPage(title="Teams"),
        },
    )


@pytest.mark.parametrize("page_num,expected", [(0, False), (1, True), (2, True), (100, True), (101, False), (-1, False)])
def test_page_exists_is_bounded_by_total_pages(catalog: BookCatalog, page_num: int, expected: bool) -> None:
    assert catalog.page_exists(page_num) is expected


def test_authored_page_is_returned_as_is(catalog: BookCatalog) -> None:
    assert catalog.get_page_configuration(1) is catalog.pages[1]


def test_unauthored_page_synthesizes_text(catalog: BookCatalog) -> None:
    page = catalog.get_page_configuration(42)

    assert page == TextPage(
        content="This is page 42 of our NBA book. The content for this page is dynamically generated.",
        answer_key_url="https://example.com/page-42-answers",
    )


def test_answer_key_url_falls_back_when_blank(catalog: BookCatalog) -> None:
    assert catalog.get_answer_key_url(1) == "https://example.com/nba/1"
    assert catalog.get_answer_key_url(3) == "https://example.com/page-3-answers"
    assert catalog.get_answer_key_url(50) == "https://example.com/page-50-answers"


def test_custom_fallback_templates() -> None:
    catalog = BookCatalog(
        book_id="mlb",
        fallback=FallbackRule(content="{book_id}:{page_num}", answer_key_url="https://keys/{book_label}/{page_num}"),
    )

    assert catalog.get_page_configuration(7) == TextPage(content="mlb:7", answer_key_url="https://keys/MLB/7")


def test_registry_lookup_and_unknown_book(catalog: BookCatalog) -> None:
    registry = CatalogRegistry(books={"nba": catalog}, default_book="nfl")

    assert registry.get_page_configuration("nba", 3) == TeamsPage(title="Teams")
    assert registry.default is None
    with pytest.raises(UnknownBookError):
        registry.get_page_configuration("nhl", 1)


def test_query_service_over_generated_artifact(tmp_path: Path, sync_config: SyncConfig) -> None:
    registry = compile_registry(sync_config).registry
    artifact = write_artifact(render_artifact(registry), tmp_path / "page_config.py")

    service = PageQueryService.from_artifact(artifact)

    assert service.has_content
    assert service.default_book is not None and service.default_book.book_id == "nfl"
    assert service.get_page_configuration("nfl", 3) == TextPage(content="Halftime! Grab a drink.")
    assert service.get_answer_key_url("nfl", 1) == "https://example.com/nfl/1"
    assert service.page_exists("nfl", 100)
    assert not service.page_exists("nfl", 101)
    fallback = service.get_page_configuration("nfl", 77)
    assert isinstance(fallback, TextPage)
    assert "page 77" in fallback.content and "NFL" in fallback.content
    with pytest.raises(UnknownBookError):
        service.page_exists("nba", 1)


def test_query_service_over_empty_registry() -> None:
    service = PageQueryService(CatalogRegistry())

    assert not service.has_content
    assert service.default_book is None
