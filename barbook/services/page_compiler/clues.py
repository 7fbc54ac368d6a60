"""Clue inference for list pages.

The ``itemsNote`` column describes a list page in free text, for example
``"10 items - clues are years descending from 2024"``. The note must start
with the item count; the clue style is then recognised by the first matching
pattern, tried in this order:

1. ``years descending from <YYYY>``: numeric clues counting down by one.
2. ``rank number(s)``: text clues ``#1`` .. ``#N``.

Anything else yields empty clues and a warning message. Counts above
MAX_ITEM_COUNT are truncated to it, also with a warning.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .models import ListItem

COUNT_PATTERN = re.compile(r"^(\d+)\s+items", re.IGNORECASE)
YEARS_PATTERN = re.compile(r"years\s+descending\s+from\s+(\d{4})", re.IGNORECASE)
RANKS_PATTERN = re.compile(r"rank\s+numbers?", re.IGNORECASE)

FALLBACK_ITEM_COUNT = 10
MAX_ITEM_COUNT = 100


@dataclass(frozen=True, slots=True)
class ClueInference:
    """Items inferred from one note; ``warning`` is set when the note was not understood."""

    items: Tuple[ListItem, ...]
    style: str
    warning: Optional[str] = None


def descending_years(start_year: int, count: int) -> Tuple[ListItem, ...]:
    return tuple(ListItem(clue=start_year - i) for i in range(count))


def rank_labels(count: int) -> Tuple[ListItem, ...]:
    return tuple(ListItem(clue=f"#{i + 1}") for i in range(count))


def empty_clues(count: int) -> Tuple[ListItem, ...]:
    return tuple(ListItem(clue="") for _ in range(count))


def infer_clues(note: str) -> ClueInference:
    """Turn an items note into an ordered clue sequence."""

    note = note.strip()
    count_match = COUNT_PATTERN.match(note)
    if not count_match:
        return ClueInference(
            items=empty_clues(FALLBACK_ITEM_COUNT),
            style="uncounted",
            warning=(
                f'Could not parse item count from: "{note}" - '
                f"defaulting to {FALLBACK_ITEM_COUNT} items with empty clues."
            ),
        )
    count = int(count_match.group(1))
    cap_warning: Optional[str] = None
    if count > MAX_ITEM_COUNT:
        cap_warning = (
            f'Item count {count} in "{note}" exceeds {MAX_ITEM_COUNT} - '
            f"truncated to {MAX_ITEM_COUNT} items."
        )
        count = MAX_ITEM_COUNT

    year_match = YEARS_PATTERN.search(note)
    if year_match:
        return ClueInference(
            items=descending_years(int(year_match.group(1)), count), style="years", warning=cap_warning
        )

    if RANKS_PATTERN.search(note):
        return ClueInference(items=rank_labels(count), style="ranks", warning=cap_warning)

    warning = f'Unrecognised clue style in: "{note}" - items will have empty clues.'
    if cap_warning:
        warning = f"{cap_warning} {warning}"
    return ClueInference(items=empty_clues(count), style="unrecognised", warning=warning)
