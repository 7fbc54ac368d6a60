"""Turn one authored page row into a typed page variant."""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional, Sequence, Tuple

from barbook.core.errors import EmptyMatchupWarning, PatternWarning, UnknownPageTypeWarning

from .cells import cell_text, page_number, positive_int, signed_int
from .clues import ClueInference, infer_clues
from .diagnostics import WarningLog
from .models import (
    DEFAULT_NOTE_ICON,
    ActionContent,
    ListPage,
    MatchupItem,
    MatchupPage,
    PageVariant,
    TeamsPage,
    TextPage,
)
from .reader import PageRow

LOGGER = logging.getLogger(__name__)

ClueInferencer = Callable[[str], ClueInference]


def parse_action_content(row: PageRow) -> Optional[ActionContent]:
    """Build the sticky-note decoration, or None when the note cell is blank."""

    content = cell_text(row.action_note)
    if not content:
        return None
    position = "left" if cell_text(row.note_position).lower() == "left" else "right"
    return ActionContent(
        content=content,
        position=position,
        rotation=signed_int(row.note_rotation, default=0),
        icon=cell_text(row.note_icon) or DEFAULT_NOTE_ICON,
    )


def normalize_page_row(
    row: PageRow,
    matchups: Mapping[int, Sequence[MatchupItem]],
    *,
    book_id: str,
    warnings: WarningLog,
    infer: ClueInferencer = infer_clues,
) -> Optional[Tuple[int, PageVariant]]:
    """Return ``(page_num, page)`` for *row*, or None when the row is skipped.

    Rows without a usable page number are skipped silently; rows with an
    unknown type are skipped with an UnknownPageTypeWarning.
    """

    page_num = page_number(row.page_num)
    if page_num is None:
        LOGGER.debug("[%s] Skipping row %s without a page number", book_id, row.source_row)
        return None

    page_type = cell_text(row.type).lower()
    title = cell_text(row.title)
    description = cell_text(row.description)
    answer_key_url = cell_text(row.answer_key_url)

    if page_type == "list":
        inference = infer(cell_text(row.items_note))
        if inference.warning:
            warnings.add(PatternWarning, book_id, inference.warning, page_num=page_num)
        return page_num, ListPage(
            title=title,
            description=description,
            items=inference.items,
            columns=positive_int(row.columns, default=1),
            answer_key_url=answer_key_url,
            action_content=parse_action_content(row),
        )

    if page_type == "matchup":
        items = tuple(matchups.get(page_num, ()))
        if not items:
            warnings.add(EmptyMatchupWarning, book_id, "Page is matchup but has no rows.", page_num=page_num)
        return page_num, MatchupPage(
            title=title,
            description=description,
            items=items,
            columns=positive_int(row.columns, default=1),
            answer_key_url=answer_key_url,
            action_content=parse_action_content(row),
        )

    if page_type == "text":
        return page_num, TextPage(content=description, answer_key_url=answer_key_url)

    if page_type == "teams":
        return page_num, TeamsPage(
            title=title,
            description=description,
            answer_key_url=answer_key_url,
            action_content=parse_action_content(row),
        )

    warnings.add(UnknownPageTypeWarning, book_id, f'Page has unknown type "{page_type}".', page_num=page_num)
    return None
