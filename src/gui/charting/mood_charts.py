"""Weekly mood comparison chart (current week vs previous week)."""

from __future__ import annotations

from domain.models import Dataset
from domain.mood_data import sample_dataset
from .backends import MatplotlibChartBackend
from .registry import register_chart_type
from .render import render
from .types import BinningUnit, ChartRequest, ChartResult

CHART_TYPE = "mood.week_comparison"


def _mood_week_comparison_builder(req: ChartRequest, backend: MatplotlibChartBackend) -> ChartResult:
    dataset = sample_dataset() if req.data is None else req.data
    if not isinstance(dataset, Dataset):
        raise TypeError("Mood comparison chart expects a Dataset (or None for sample data)")
    options = req.options or {}
    commands = render(
        dataset,
        unit=options.get("unit", BinningUnit.DAY),
        title=options.get("title"),
    )
    widget = backend.draw(commands)
    highlighted = [t.index for t in commands.highlighted_ticks]
    return ChartResult(
        widget=widget,
        meta={
            "series_count": len(commands.lines),
            "tick_count": len(commands.ticks),
            "highlighted_tick": highlighted[0] if highlighted else None,
            "colors": {e.label: e.color for e in commands.legend.entries},
            "commands": commands,
        },
    )


register_chart_type(
    CHART_TYPE,
    _mood_week_comparison_builder,
    "Mood over time: current week vs previous week",
)
