"""Data models for compiled trivia pages.

A page is one of four variants (list, matchup, text, teams) discriminated by
its ``type`` field. Every variant forbids extra fields, so a text page can
never carry a title and a teams page can never carry items.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, StrictInt, StrictStr

DEFAULT_NOTE_ICON = "\U0001F4CC"

ClueValue = Union[StrictInt, StrictStr]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ListItem(_Frozen):
    """One numbered entry of a list page; ``clue`` is a year, a rank label or free text."""

    clue: ClueValue = ""


class MatchupItem(_Frozen):
    center_text: str = ""
    context: str = ""


class ActionContent(_Frozen):
    """Sticky-note decoration rendered beside a page."""

    content: str
    position: Literal["left", "right"] = "right"
    rotation: int = 0
    icon: str = DEFAULT_NOTE_ICON


class ListPage(_Frozen):
    type: Literal["list"] = "list"
    title: str = ""
    description: str = ""
    items: Tuple[ListItem, ...] = ()
    columns: PositiveInt = 1
    answer_key_url: str = ""
    action_content: Optional[ActionContent] = None


class MatchupPage(_Frozen):
    type: Literal["matchup"] = "matchup"
    title: str = ""
    description: str = ""
    items: Tuple[MatchupItem, ...] = ()
    columns: PositiveInt = 1
    answer_key_url: str = ""
    action_content: Optional[ActionContent] = None


class TextPage(_Frozen):
    type: Literal["text"] = "text"
    content: str = ""
    answer_key_url: str = ""


class TeamsPage(_Frozen):
    type: Literal["teams"] = "teams"
    title: str = ""
    description: str = ""
    answer_key_url: str = ""
    action_content: Optional[ActionContent] = None


PageVariant = Annotated[
    Union[ListPage, MatchupPage, TextPage, TeamsPage],
    Field(discriminator="type"),
]

PAGE_TYPES: Tuple[str, ...] = ("list", "matchup", "text", "teams")


__all__ = [
    "ActionContent",
    "ClueValue",
    "DEFAULT_NOTE_ICON",
    "ListItem",
    "ListPage",
    "MatchupItem",
    "MatchupPage",
    "PAGE_TYPES",
    "PageVariant",
    "TeamsPage",
    "TextPage",
]
