"""Pure rendering of a mood Dataset into draw commands.

``render`` is a function of its inputs only: rendering the same dataset
twice yields equal ``DrawCommands``. Validation happens up front so a bad
color mapping or binning unit fails before anything is drawn.
"""

from __future__ import annotations

from typing import List, Optional
import logging

from config import settings
from domain.models import Dataset, Sample
from domain.mood_data import sorted_by
from .axis import build_ticks, day_offsets
from .interpolation import catmull_rom
from .palette import color_for_period, legend_for
from .types import BinningUnit, DrawCommands, LinePath

log = logging.getLogger(__name__)

__all__ = ["render"]


def render(
    dataset: Dataset,
    *,
    unit: BinningUnit | str = BinningUnit.DAY,
    title: Optional[str] = None,
) -> DrawCommands:
    if not isinstance(dataset, Dataset):
        raise TypeError(f"render expects a Dataset, got {type(dataset).__name__}")
    legend = legend_for(s.period for s in dataset)
    grid_lines, ticks = build_ticks(dataset, unit)

    lines: List[LinePath] = []
    for series in dataset:
        samples: List[Sample] = sorted_by(series.samples, key=lambda s: s.day)
        offsets = day_offsets(s.day for s in samples)
        anchors = tuple((float(x), float(s.value)) for x, s in zip(offsets, samples))
        lines.append(
            LinePath(
                label=series.period.value,
                color=color_for_period(series.period),
                width=float(settings.LINE_WIDTH),
                anchors=anchors,
                points=catmull_rom(anchors),
            )
        )

    first, last = grid_lines[0].x, grid_lines[-1].x
    commands = DrawCommands(
        width=settings.CHART_WIDTH,
        height=settings.CHART_HEIGHT,
        x_domain=(first - 0.5, last + 0.5),
        y_domain=settings.Y_DOMAIN,
        lines=tuple(lines),
        grid_lines=grid_lines,
        ticks=ticks,
        legend=legend,
        title=title,
    )
    log.debug("rendered %d lines, %d ticks", len(commands.lines), len(commands.ticks))
    return commands
