"""Calendar helpers: date composition and weekday labels."""

from __future__ import annotations

from datetime import date
import logging

log = logging.getLogger(__name__)

__all__ = ["compose_date", "weekday_abbreviation"]

_WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_WIDTHS = {"narrow": 1, "abbreviated": 3, "wide": None}


def compose_date(year: int, month: int, day: int = 1) -> date:
    """Return the calendar date for the given components.

    Invalid components (month 13, 30 February, non-integers) do not raise;
    today's date is returned instead and a warning is logged.
    """
    try:
        return date(year, month, day)
    except (TypeError, ValueError, OverflowError) as e:
        fallback = date.today()
        log.warning(
            "invalid calendar components %r-%r-%r (%s); using %s",
            year,
            month,
            day,
            e,
            fallback.isoformat(),
        )
        return fallback


def weekday_abbreviation(value: date, width: str = "narrow") -> str:
    """Locale-independent weekday label (``narrow`` -> 'T', ``abbreviated`` -> 'Thu')."""
    if width not in _WIDTHS:
        raise ValueError(f"Unsupported weekday width: {width!r}")
    name = _WEEKDAY_NAMES[value.weekday()]
    size = _WIDTHS[width]
    return name if size is None else name[:size]
