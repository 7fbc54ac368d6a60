"""Page compiler service package."""

from .api import SyncResult, sync_books
from .catalog import BookCatalog, CatalogRegistry
from .compiler import CompileResult, compile_book, compile_registry
from .query import PageQueryService, load_registry

__all__ = [
    "BookCatalog",
    "CatalogRegistry",
    "CompileResult",
    "PageQueryService",
    "SyncResult",
    "compile_book",
    "compile_registry",
    "load_registry",
    "sync_books",
]
