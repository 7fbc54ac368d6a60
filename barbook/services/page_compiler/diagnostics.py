"""Warning accumulation for a compilation run."""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Type

from pydantic import BaseModel, ConfigDict

from barbook.core.errors import CompileWarning

LOGGER = logging.getLogger(__name__)


class WarningRecord(BaseModel):
    """A recoverable problem located by book and page."""

    model_config = ConfigDict(frozen=True)

    category: Type[CompileWarning]
    book_id: str
    message: str
    page_num: Optional[int] = None

    @property
    def kind(self) -> str:
        return self.category.__name__

    def location(self) -> str:
        if self.page_num is None:
            return f"[{self.book_id}]"
        return f"[{self.book_id}] Page {self.page_num}"

    def as_row(self) -> dict[str, object]:
        return {
            "kind": self.kind,
            "book_id": self.book_id,
            "page_num": self.page_num if self.page_num is not None else "",
            "message": self.message,
        }


class WarningLog:
    """Ordered collection of warnings raised during one run; doubles as the run's warning counter."""

    def __init__(self) -> None:
        self._records: list[WarningRecord] = []

    def add(
        self,
        category: Type[CompileWarning],
        book_id: str,
        message: str,
        page_num: Optional[int] = None,
    ) -> WarningRecord:
        record = WarningRecord(category=category, book_id=book_id, message=message, page_num=page_num)
        self._records.append(record)
        LOGGER.warning("%s %s", record.location(), message)
        return record

    def count(self, category: Optional[Type[CompileWarning]] = None, book_id: Optional[str] = None) -> int:
        return sum(
            1
            for record in self._records
            if (category is None or issubclass(record.category, category))
            and (book_id is None or record.book_id == book_id)
        )

    def records(self) -> list[WarningRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WarningRecord]:
        return iter(self._records)
