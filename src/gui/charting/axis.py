"""X-axis tick binning and weekday labels."""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Tuple

from config import settings
from domain.calendar import weekday_abbreviation
from domain.models import Dataset
from .errors import UnsupportedBinningUnitError
from .types import BinningUnit, GridLine, TickLabel


def day_offsets(days: Iterable[date]) -> List[int]:
    """Day index of each date relative to the earliest one."""
    seq = list(days)
    if not seq:
        return []
    start = min(seq)
    return [(d - start).days for d in seq]


def bin_days(dataset: Dataset, unit: BinningUnit | str = BinningUnit.DAY) -> Dict[int, date]:
    """Map each distinct day offset to the reference date labeling it.

    Weeks are overlaid by day offset within their own window, so two
    Monday-start weeks share seven bins. The first series (previous week)
    supplies the reference dates.
    """
    try:
        unit = BinningUnit(unit)
    except ValueError:
        raise UnsupportedBinningUnitError(str(unit)) from None
    if unit is not BinningUnit.DAY:
        raise UnsupportedBinningUnitError(unit.value)
    bins: Dict[int, date] = {}
    for series in dataset:
        for offset, day in zip(day_offsets(series.days), series.days):
            bins.setdefault(offset, day)
    return dict(sorted(bins.items()))


def build_ticks(
    dataset: Dataset, unit: BinningUnit | str = BinningUnit.DAY
) -> Tuple[Tuple[GridLine, ...], Tuple[TickLabel, ...]]:
    """One grid line and one centered narrow-weekday label per day bin.

    The tick at ``HIGHLIGHT_TICK_INDEX`` is drawn in the highlight color.
    """
    bins = bin_days(dataset, unit)
    grid: List[GridLine] = []
    labels: List[TickLabel] = []
    for index, (offset, day) in enumerate(bins.items()):
        highlighted = index == settings.HIGHLIGHT_TICK_INDEX
        grid.append(GridLine(x=float(offset)))
        labels.append(
            TickLabel(
                index=index,
                x=float(offset),
                text=weekday_abbreviation(day, "narrow"),
                color=settings.HIGHLIGHT_COLOR if highlighted else settings.LABEL_COLOR,
                highlighted=highlighted,
            )
        )
    return tuple(grid), tuple(labels)
