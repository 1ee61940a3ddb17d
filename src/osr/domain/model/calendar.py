"""Calendar-day normalisation.

Orders, statement bounds and report dates are all compared as plain
calendar days in UTC.  Whatever form a date arrives in, it passes
through ``to_utc_day`` first so that local-timezone skew can never
shift a record into the neighbouring day.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from osr.domain.exceptions import InvalidInputError


def to_utc_day(value: date | datetime | str) -> date:
    """Return the UTC calendar day for *value*.

    Accepts ``date``, ``datetime`` (naive values are taken to be UTC)
    and ISO-8601 strings, either a bare ``YYYY-MM-DD`` day or a full
    timestamp with an optional offset.

    Raises InvalidInputError for anything that cannot be parsed.
    """
    if isinstance(value, datetime):
        return _datetime_day(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"Invalid date: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return _datetime_day(datetime.fromisoformat(text))
    except ValueError as exc:
        raise InvalidInputError(f"Invalid date: {value!r}") from exc


def _datetime_day(moment: datetime) -> date:
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(timezone.utc).date()
