"""Charting layer.

``render`` turns a mood Dataset into backend-neutral draw commands; the
matplotlib backend draws them into a Figure. Chart types are looked up by
name through ``chart_registry`` so the hosting shell never touches the
backend directly.
"""

from .backends import MatplotlibChartBackend  # noqa: F401
from .errors import UnsupportedBinningUnitError  # noqa: F401
from .registry import chart_registry, register_chart_type  # noqa: F401
from .render import render  # noqa: F401
from .types import BinningUnit, ChartRequest, ChartResult, DrawCommands  # noqa: F401
from . import mood_charts  # noqa: F401  # registers mood.week_comparison
