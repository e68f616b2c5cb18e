"""Core charting types: requests, results and draw commands.

``render`` produces a ``DrawCommands`` value (plain frozen dataclasses and
tuples, no matplotlib objects) so chart output can be compared and tested
without a GUI; backends turn it into something drawable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Tuple

Point = Tuple[float, float]


class BinningUnit(str, Enum):
    """Calendar unit used to place x-axis ticks."""

    DAY = "day"
    WEEKDAY = "weekday"


@dataclass(frozen=True)
class ChartRequest:
    """Represents a logical chart request.

    Attributes:
        chart_type: Identifier registered in the chart registry (e.g. 'mood.week_comparison').
        data: Payload understood by the chart builder (a Dataset for mood charts).
        options: Optional rendering hints (title, binning unit).
    """

    chart_type: str
    data: Any = None
    options: Optional[Dict[str, Any]] = None


@dataclass
class ChartResult:
    """Outcome of building a chart.

    ``widget`` is a matplotlib Figure; the hosting shell wraps it in a Qt canvas.
    """

    widget: Any
    meta: Dict[str, Any]


@dataclass(frozen=True)
class LinePath:
    label: str
    color: str
    width: float
    anchors: Tuple[Point, ...]
    points: Tuple[Point, ...]
    interpolation: str = "catmullRom"


@dataclass(frozen=True)
class GridLine:
    x: float


@dataclass(frozen=True)
class TickLabel:
    index: int
    x: float
    text: str
    color: str
    highlighted: bool = False
    centered: bool = True


@dataclass(frozen=True)
class LegendEntry:
    label: str
    color: str


@dataclass(frozen=True)
class Legend:
    entries: Tuple[LegendEntry, ...]
    position: str = "bottom"
    alignment: str = "center"


@dataclass(frozen=True)
class DrawCommands:
    """Everything a backend needs to draw one chart frame."""

    width: int
    height: int
    x_domain: Tuple[float, float]
    y_domain: Tuple[float, float]
    lines: Tuple[LinePath, ...]
    grid_lines: Tuple[GridLine, ...]
    ticks: Tuple[TickLabel, ...]
    legend: Legend
    title: Optional[str] = None

    @property
    def highlighted_ticks(self) -> Tuple[TickLabel, ...]:
        return tuple(t for t in self.ticks if t.highlighted)


class ChartBackendProtocol(Protocol):  # pragma: no cover - structural only
    """Protocol all chart backends must implement."""

    def draw(self, commands: DrawCommands) -> Any:  # matplotlib Figure
        ...

    def export_widget(self, widget: Any, path: str, *, format: str = "png", dpi: int = 120) -> None:
        ...
