"""Period color table for mood charts.

Colors are keyed by period identity, not by series position: ``current``
is blue and ``previous`` is gray even though the dataset lists the
previous week first. There is no fallback color; a period missing from the
table is a configuration error.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Tuple

from config import settings
from domain.models import Period, UnmappedSeriesColorError, validate_color_mapping
from .types import Legend, LegendEntry

__all__ = ["color_for_period", "legend_for"]


def color_for_period(period: Period | str, table: Mapping[str, str] | None = None) -> str:
    table = settings.PERIOD_COLORS if table is None else table
    key = period.value if isinstance(period, Period) else str(period)
    try:
        return table[key]
    except KeyError:
        raise UnmappedSeriesColorError(f"No color mapped for period {key!r}") from None


def legend_for(periods: Iterable[Period | str]) -> Legend:
    """Legend entries in color table order for exactly the given periods."""
    periods = list(periods)
    validate_color_mapping(periods)
    entries: Tuple[LegendEntry, ...] = tuple(
        LegendEntry(label=key, color=color) for key, color in settings.PERIOD_COLORS.items()
    )
    return Legend(
        entries=entries,
        position=settings.LEGEND_POSITION,
        alignment=settings.LEGEND_ALIGNMENT,
    )
