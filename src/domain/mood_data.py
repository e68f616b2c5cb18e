"""Sample mood data for the weekly comparison chart.

Two fixed weeks of mood values (Mon..Sun) are paired with calendar dates:
the previous week covers 1-7 Aug 2022 and the current week 8-14 Aug 2022.
Window contiguity is checked but only logged, because ``compose_date``
falls back to today's date on invalid input and that fallback must not
fail the whole pipeline.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Callable, Iterable, List, Sequence, TypeVar
import logging

from config import settings
from .calendar import compose_date
from .models import Dataset, DatasetValidationError, Period, Sample, Series

log = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "PREVIOUS_WEEK_MOODS",
    "CURRENT_WEEK_MOODS",
    "week_series",
    "build_dataset",
    "sample_dataset",
    "sorted_by",
]

PREVIOUS_WEEK_MOODS: tuple[float, ...] = (2.5, 0.5, 1, 1.5, 2, 2.5, 3)
CURRENT_WEEK_MOODS: tuple[float, ...] = (2.5, 2, 2.5, 3.5, 2.5, 1.5, 3.0)


def sorted_by(items: Iterable[T], key: Callable[[T], object], ascending: bool = True) -> List[T]:
    """Sort by a key accessor (stable), ascending unless told otherwise."""
    return sorted(items, key=key, reverse=not ascending)  # type: ignore[arg-type]


def week_series(
    period: Period | str, year: int, month: int, first_day: int, moods: Sequence[float]
) -> Series:
    """Pair ``moods[i]`` with day ``first_day + i`` of the given month.

    Days are counted forward from the first composed date, so a window may
    run past the end of the month and a fallback start date still yields
    seven distinct consecutive days.
    """
    if len(moods) != settings.WEEK_LENGTH:
        raise DatasetValidationError(
            f"Expected {settings.WEEK_LENGTH} mood values for {Period.coerce(period).value} week, got {len(moods)}"
        )
    start = compose_date(year, month, first_day)
    samples = tuple(
        Sample(day=start + timedelta(days=index), value=float(mood))
        for index, mood in enumerate(moods)
    )
    return Series(period=period, samples=samples)


def build_dataset(
    year: int = settings.SAMPLE_YEAR,
    month: int = settings.SAMPLE_MONTH,
    *,
    previous: Sequence[float] = PREVIOUS_WEEK_MOODS,
    current: Sequence[float] = CURRENT_WEEK_MOODS,
) -> Dataset:
    """Build the previous/current week dataset (previous first)."""
    previous_series = week_series(Period.PREVIOUS, year, month, 1, previous)
    current_series = week_series(Period.CURRENT, year, month, 1 + settings.WEEK_LENGTH, current)
    if previous_series.days[-1] + timedelta(days=1) != current_series.days[0]:
        log.warning(
            "previous week ends %s but current week starts %s; windows are not contiguous",
            previous_series.days[-1].isoformat(),
            current_series.days[0].isoformat(),
        )
    dataset = Dataset(series=(previous_series, current_series))
    log.debug("built dataset %s..%s", previous_series.days[0], current_series.days[-1])
    return dataset


def sample_dataset() -> Dataset:
    return build_dataset()
