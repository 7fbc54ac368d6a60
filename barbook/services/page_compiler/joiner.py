"""Group matchup rows by the page they belong to."""

from __future__ import annotations

from typing import Dict, Iterable, List

from .cells import cell_text, page_number
from .models import MatchupItem
from .reader import MatchupRow


def group_matchups(rows: Iterable[MatchupRow]) -> Dict[int, List[MatchupItem]]:
    """Return matchup items per page number, keeping sheet order within each page.

    Rows whose page number is blank, non-numeric or not positive cannot be
    attributed to a page and are dropped.
    """

    grouped: Dict[int, List[MatchupItem]] = {}
    for row in rows:
        page_num = page_number(row.page_num)
        if page_num is None:
            continue
        grouped.setdefault(page_num, []).append(
            MatchupItem(center_text=cell_text(row.center_text), context=cell_text(row.context))
        )
    return grouped
