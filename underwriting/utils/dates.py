from __future__ import annotations

import re
from datetime import date

from dateutil import parser
from dateutil.relativedelta import relativedelta

from underwriting.models import UnderwritingError

# YYYY-MM-DDTHH:MM[:SS[.fraction]] followed by Z or +HH:MM / -HH:MM, hour 00-23
OFFSET_DATE_TIME_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T(?:[01]\d|2[0-3]):\d{2}(?::\d{2}(?:\.\d{1,9})?)?(?:Z|[+-]\d{2}:\d{2})$"
)


class MalformedDate(UnderwritingError):
    """Raised when a date field is not an ISO 8601 offset date-time."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Некорректная дата: {value!r}")
        self.value = value


def resolve_date(text: object) -> date:
    """Return the calendar date of an offset date-time such as
    ``1995-05-20T00:00:00+03:00``.

    The local date is kept as written, the offset is not applied.
    """

    if not isinstance(text, str) or not OFFSET_DATE_TIME_RE.match(text):
        raise MalformedDate(text)
    try:
        parsed = parser.isoparse(text)
    except (ValueError, OverflowError) as exc:
        raise MalformedDate(text) from exc
    if parsed.tzinfo is None:
        raise MalformedDate(text)
    return parsed.date()


def add_years(value: date, years: int) -> date:
    return value + relativedelta(years=years)


def full_years_between(start: date, end: date) -> int:
    return relativedelta(end, start).years


__all__ = ["MalformedDate", "add_years", "full_years_between", "resolve_date"]
