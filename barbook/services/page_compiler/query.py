"""Read-only page lookups over a generated page configuration artifact."""

from __future__ import annotations

import logging
import runpy
from pathlib import Path
from typing import Optional

from barbook.core.errors import ArtifactError

from .catalog import BookCatalog, CatalogRegistry
from .models import PageVariant

LOGGER = logging.getLogger(__name__)


def load_registry(path: str | Path) -> CatalogRegistry:
    """Execute a generated artifact and return its ``books_config`` registry."""

    artifact = Path(path)
    if not artifact.exists():
        raise ArtifactError(f"Page configuration artifact not found: {artifact}")
    try:
        namespace = runpy.run_path(str(artifact))
    except SyntaxError as exc:
        raise ArtifactError(f"Artifact {artifact} is not valid Python: {exc}") from exc
    registry = namespace.get("books_config")
    if not isinstance(registry, CatalogRegistry):
        raise ArtifactError(f"Artifact {artifact} does not define a books_config registry")
    LOGGER.info("Loaded %s book(s) from %s", len(registry.books), artifact)
    return registry


class PageQueryService:
    """Answers renderer queries against an immutable registry."""

    def __init__(self, registry: CatalogRegistry) -> None:
        self.registry = registry

    @classmethod
    def from_artifact(cls, path: str | Path) -> "PageQueryService":
        return cls(load_registry(path))

    @property
    def has_content(self) -> bool:
        return not self.registry.is_empty()

    @property
    def default_book(self) -> Optional[BookCatalog]:
        return self.registry.default

    def get_page_configuration(self, book_id: str, page_num: int) -> PageVariant:
        return self.registry.book(book_id).get_page_configuration(page_num)

    def get_answer_key_url(self, book_id: str, page_num: int) -> str:
        return self.registry.book(book_id).get_answer_key_url(page_num)

    def page_exists(self, book_id: str, page_num: int) -> bool:
        return self.registry.book(book_id).page_exists(page_num)
