"""
RESPONSIBILITIES
- Render a CatalogRegistry as a Python module that rebuilds it on import.
- Keep the output byte-stable for identical input (apart from the
  generation timestamp) so regenerated artifacts diff cleanly.
- Write the artifact as a whole file in one step.
PROCESS OVERVIEW
1. render_artifact() emits the header, imports, and one BookCatalog per book.
2. Pages are emitted in authored order with a fixed field order per variant.
3. Year countdowns and rank labels become comprehensions; other clue lists
   are enumerated literally.
4. write_artifact() writes to a temporary sibling file and swaps it in.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence

from barbook.config import FallbackRule

from .catalog import BookCatalog, CatalogRegistry
from .models import ActionContent, ListItem, ListPage, MatchupItem, MatchupPage, PageVariant, TeamsPage, TextPage

INDENT = "    "

HEADER = """\
# ---------------------------------------------------------------------------
# AUTO-GENERATED by `barbook sync`
# Generated: {generated_at}
#
# DO NOT EDIT BY HAND
# ---------------------------------------------------------------------------
\"\"\"Page configuration consumed by the Barbook renderer.\"\"\"

from barbook.config import FallbackRule
from barbook.services.page_compiler.catalog import BookCatalog, CatalogRegistry
from barbook.services.page_compiler.models import (
    ActionContent,
    ListItem,
    ListPage,
    MatchupItem,
    MatchupPage,
    TeamsPage,
    TextPage,
)
"""


def _call(name: str, arguments: Sequence[tuple[str, str]]) -> str:
    """Render ``name(key=value, ...)`` with one argument per line."""

    lines = [f"{name}("]
    for key, value in arguments:
        rendered = value.replace("\n", "\n" + INDENT)
        lines.append(f"{INDENT}{key}={rendered},")
    lines.append(")")
    return "\n".join(lines)


def _is_descending_run(clues: Sequence[object]) -> bool:
    first = clues[0]
    if type(first) is not int:
        return False
    return all(type(clue) is int and clue == first - i for i, clue in enumerate(clues))


def _is_rank_run(clues: Sequence[object]) -> bool:
    return all(clue == f"#{i + 1}" for i, clue in enumerate(clues))


def serialize_list_items(items: Sequence[ListItem]) -> str:
    """Render list items, using a comprehension for year countdowns and rank labels."""

    clues = [item.clue for item in items]
    count = len(clues)
    if count == 0:
        return "[]"
    if _is_descending_run(clues):
        return f"[ListItem(clue={clues[0]} - i) for i in range({count})]"
    if _is_rank_run(clues):
        return f'[ListItem(clue=f"#{{i + 1}}") for i in range({count})]'
    lines = ["["]
    lines.extend(f"{INDENT}ListItem(clue={repr(clue)})," for clue in clues)
    lines.append("]")
    return "\n".join(lines)


def serialize_matchup_items(items: Sequence[MatchupItem]) -> str:
    if not items:
        return "[]"
    lines = ["["]
    lines.extend(
        f"{INDENT}MatchupItem(center_text={repr(item.center_text)}, context={repr(item.context)}),"
        for item in items
    )
    lines.append("]")
    return "\n".join(lines)


def serialize_action_content(action: ActionContent) -> str:
    return _call(
        "ActionContent",
        [
            ("content", repr(action.content)),
            ("position", repr(action.position)),
            ("rotation", repr(action.rotation)),
            ("icon", repr(action.icon)),
        ],
    )


def serialize_page(page: PageVariant) -> str:
    """Render one page.

    Field order is fixed: type, title, description, items, columns,
    answer_key_url, action_content (fields a variant lacks are left out).
    """

    if isinstance(page, TextPage):
        return _call(
            "TextPage",
            [
                ("type", repr(page.type)),
                ("content", repr(page.content)),
                ("answer_key_url", repr(page.answer_key_url)),
            ],
        )

    arguments: List[tuple[str, str]] = [
        ("type", repr(page.type)),
        ("title", repr(page.title)),
        ("description", repr(page.description)),
    ]
    if isinstance(page, ListPage):
        arguments.append(("items", serialize_list_items(page.items)))
        arguments.append(("columns", repr(page.columns)))
    elif isinstance(page, MatchupPage):
        arguments.append(("items", serialize_matchup_items(page.items)))
        arguments.append(("columns", repr(page.columns)))
    elif not isinstance(page, TeamsPage):
        raise TypeError(f"unsupported page variant: {type(page).__name__}")
    arguments.append(("answer_key_url", repr(page.answer_key_url)))
    if page.action_content is not None:
        arguments.append(("action_content", serialize_action_content(page.action_content)))
    return _call(type(page).__name__, arguments)


def serialize_fallback(rule: FallbackRule) -> str:
    return _call(
        "FallbackRule",
        [
            ("content", repr(rule.content)),
            ("answer_key_url", repr(rule.answer_key_url)),
        ],
    )


def serialize_book(catalog: BookCatalog) -> str:
    if catalog.pages:
        lines = ["{"]
        for page_num, page in catalog.pages.items():
            rendered = serialize_page(page).replace("\n", "\n" + INDENT)
            lines.append(f"{INDENT}{page_num}: {rendered},")
        lines.append("}")
        pages = "\n".join(lines)
    else:
        pages = "{}"
    return _call(
        "BookCatalog",
        [
            ("book_id", repr(catalog.book_id)),
            ("total_pages", repr(catalog.total_pages)),
            ("fallback", serialize_fallback(catalog.fallback)),
            ("pages", pages),
        ],
    )


def render_artifact(registry: CatalogRegistry, generated_at: Optional[datetime] = None) -> str:
    """Return the source text of the generated page configuration module.

    The module exports ``books_config`` (the registry) and ``page_config``
    (the default book's catalog, or None when that book was not compiled).
    """

    stamp = (generated_at or datetime.now(timezone.utc)).isoformat()
    if registry.books:
        lines = ["{"]
        for book_id, catalog in registry.books.items():
            rendered = serialize_book(catalog).replace("\n", "\n" + INDENT)
            lines.append(f"{INDENT}{repr(book_id)}: {rendered},")
        lines.append("}")
        books = "\n".join(lines)
    else:
        books = "{}"

    body = _call(
        "CatalogRegistry",
        [
            ("default_book", repr(registry.default_book)),
            ("books", books),
        ],
    )
    alias = (
        "# Alias for the default book (None when it was not compiled).\n"
        f"page_config = books_config.get({repr(registry.default_book)})"
        if registry.default_book is not None
        else "page_config = None"
    )
    return f"{HEADER.format(generated_at=stamp)}\nbooks_config = {body}\n\n{alias}\n"


def write_artifact(source: str, path: Path) -> Path:
    """Write the artifact in one step via a temporary file swap."""

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_text(source, encoding="utf-8")
    os.replace(tmp_path, path)
    return path
