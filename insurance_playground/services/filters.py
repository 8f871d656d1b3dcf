"""Composable WHERE clauses for the filtered list and quick-search endpoints.

Each list endpoint accepts a fixed set of optional query parameters. A
``FilterSet`` turns every parameter that is actually present into exactly one
predicate and ANDs them together at the end, so absent or blank parameters
never produce ``= NULL`` or ``LIKE '%%'`` clauses.

Substring matches are case-insensitive and treat ``%`` and ``_`` in the
user's value literally.
"""

import math
from datetime import date
from typing import Optional

from sqlalchemy import or_

from insurance_playground.services.errors import ValidationError

LIKE_ESCAPE = "\\"


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_float(name: str, value) -> Optional[float]:
    """Parse a numeric parameter, or None when it was not supplied."""
    if is_blank(value):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be a number", error=f"Invalid value: {value!r}")
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"{name} must be a number", error=f"Invalid value: {value!r}")
    return number


def parse_int(name: str, value) -> Optional[int]:
    """Parse an integer parameter (ids, ages, scores)."""
    if is_blank(value):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{name} must be an integer", error=f"Invalid value: {value!r}")


def parse_date(name: str, value) -> Optional[date]:
    """Parse a YYYY-MM-DD parameter."""
    if is_blank(value):
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(f"{name} must be a date (YYYY-MM-DD)", error=f"Invalid value: {value!r}")


def escape_like(value: str) -> str:
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def substring_match(column, value: str):
    return column.ilike(f"%{escape_like(value.strip())}%", escape=LIKE_ESCAPE)


class FilterSet:
    """Ordered conjunction of optional predicates."""

    def __init__(self):
        self.conditions = []

    def __len__(self):
        return len(self.conditions)

    def add(self, condition):
        self.conditions.append(condition)
        return self

    def contains(self, column, value):
        if not is_blank(value):
            self.add(substring_match(column, value))
        return self

    def contains_any(self, columns, value):
        if not is_blank(value):
            self.add(or_(*(substring_match(column, value) for column in columns)))
        return self

    def equals(self, column, value):
        if not is_blank(value):
            self.add(column == (value.strip() if isinstance(value, str) else value))
        return self

    def at_least(self, column, value):
        if value is not None:
            self.add(column >= value)
        return self

    def at_most(self, column, value):
        if value is not None:
            self.add(column <= value)
        return self

    def apply(self, statement):
        if self.conditions:
            return statement.where(*self.conditions)
        return statement
