"""Coercion helpers for untyped spreadsheet cells."""

from __future__ import annotations

import math
from datetime import date, datetime


def cell_text(value: object) -> str:
    """Return the trimmed text of a cell; blank cells become ``""``."""

    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value).strip()


def cell_number(value: object) -> float | None:
    """Parse a numeric cell, returning None for blank or non-numeric values."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def page_number(value: object) -> int | None:
    """Return a positive whole page number, or None when the cell cannot name a page."""

    number = cell_number(value)
    if number is None or number <= 0 or not number.is_integer():
        return None
    return int(number)


def positive_int(value: object, default: int = 1) -> int:
    number = cell_number(value)
    if number is None or number < 1:
        return default
    return int(number)


def signed_int(value: object, default: int = 0) -> int:
    number = cell_number(value)
    if number is None:
        return default
    return int(round(number))
