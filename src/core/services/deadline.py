"""Deadline resolution and total-duration computation.

The CLI hands raw `--date`/`--time` strings to `resolve_deadline`; the result
is validated once against the wall clock and turned into a fixed number of
seconds by `compute_total_seconds`. After that the wall clock is never read
again: elapsed time comes from the monotonic clock.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time

from core.domain.errors import InputValidationError, PastDeadlineError
from core.domain.models import Deadline

logger = logging.getLogger(__name__)

_DATE_FORMAT = "%Y-%m-%d"
_TIME_PART_ERRORS = ("Invalid hour", "Invalid minute", "Invalid second")


def parse_date(text: str) -> date:
    """Parse a `YYYY-MM-DD` date."""

    try:
        return datetime.strptime(text.strip(), _DATE_FORMAT).date()
    except ValueError as exc:
        raise InputValidationError("Invalid date format, use YYYY-MM-DD") from exc


def parse_time(text: str) -> time:
    """Parse `HH`, `HH:MM` or `HH:MM:SS` (missing parts default to 0)."""

    parts = text.split(":")
    if not text or len(parts) > 3:
        raise InputValidationError("Invalid time format, use HH[:MM[:SS]]")

    values: list[int] = []
    for part, error in zip(parts, _TIME_PART_ERRORS):
        # Solo dígitos ASCII: int() aceptaría signos, espacios y "_".
        if not (part.isascii() and part.isdigit()):
            raise InputValidationError(error)
        values.append(int(part))
    values.extend([0] * (3 - len(values)))

    hours, minutes, seconds = values
    try:
        return time(hours, minutes, seconds)
    except ValueError as exc:
        raise InputValidationError("Invalid time") from exc


def resolve_deadline(date_text: str | None, time_text: str | None, *, now: datetime) -> Deadline:
    """Combine optional date/time strings into a `Deadline`.

    - no date: today (taken from `now`)
    - no time: `now` itself (without microseconds), whatever the date; the
      date is still parsed so a malformed one is reported

    Only parsing happens here; call `compute_total_seconds` to validate that the
    deadline is in the future.
    """

    day = parse_date(date_text) if date_text is not None else now.date()
    if time_text is None:
        # Sin hora la cuenta atrás tiene longitud 0 y la validación la rechaza.
        deadline = Deadline(target=now.replace(microsecond=0))
    else:
        deadline = Deadline(target=datetime.combine(day, parse_time(time_text)))
    logger.debug("Resolved deadline %s (date=%r, time=%r)", deadline, date_text, time_text)
    return deadline


def compute_total_seconds(deadline: Deadline, now: datetime) -> float:
    """Seconds from `now` to the deadline; the deadline must be strictly later."""

    if deadline.target <= now:
        raise PastDeadlineError()
    return (deadline.target - now).total_seconds()
