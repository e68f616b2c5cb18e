"""Chart backend implementations.

Only a matplotlib backend is provided. It builds a bare ``Figure`` (no
pyplot state, no Qt import) so it works headless; the hosting shell wraps
the figure in a ``FigureCanvasQTAgg`` when showing it.
"""

from __future__ import annotations

from typing import Any

from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from config import settings
from .types import ChartBackendProtocol, DrawCommands

_LEGEND_LOC = {
    ("bottom", "center"): ("upper center", (0.5, -0.08)),
    ("bottom", "leading"): ("upper left", (0.0, -0.08)),
    ("bottom", "trailing"): ("upper right", (1.0, -0.08)),
    ("top", "center"): ("lower center", (0.5, 1.02)),
}


class MatplotlibChartBackend(ChartBackendProtocol):
    def __init__(self, dpi: int = settings.FIGURE_DPI) -> None:
        self.dpi = dpi

    def draw(self, commands: DrawCommands) -> Figure:
        fig = Figure(figsize=(commands.width / self.dpi, commands.height / self.dpi), dpi=self.dpi)
        ax = fig.add_subplot(111)
        for line in commands.lines:
            xs = [p[0] for p in line.points]
            ys = [p[1] for p in line.points]
            ax.plot(
                xs,
                ys,
                color=line.color,
                linewidth=line.width,
                label=line.label,
                solid_capstyle="round",
                solid_joinstyle="round",
            )
        for grid in commands.grid_lines:
            ax.axvline(grid.x, color=settings.GRID_COLOR, linewidth=0.8, zorder=0)
        ax.set_xlim(*commands.x_domain)
        ax.set_ylim(*commands.y_domain)
        ax.set_xticks([t.x for t in commands.ticks])
        ax.set_xticklabels([t.text for t in commands.ticks])
        for label, tick in zip(ax.get_xticklabels(), commands.ticks):
            label.set_color(tick.color)
            label.set_horizontalalignment("center" if tick.centered else "left")
        ax.tick_params(axis="x", length=0)
        for side in ("top", "right"):
            ax.spines[side].set_visible(False)
        if commands.title:
            ax.set_title(commands.title)
        self._draw_legend(ax, commands)
        fig.subplots_adjust(bottom=0.2)
        return fig

    def _draw_legend(self, ax, commands: DrawCommands) -> None:
        legend = commands.legend
        if not legend.entries:
            return
        loc, anchor = _LEGEND_LOC.get(
            (legend.position, legend.alignment), _LEGEND_LOC[("bottom", "center")]
        )
        handles = [
            Line2D([0], [0], marker="o", linestyle="", color=e.color, label=e.label)
            for e in legend.entries
        ]
        ax.legend(
            handles=handles,
            loc=loc,
            bbox_to_anchor=anchor,
            ncol=len(handles),
            frameon=False,
        )

    def export_widget(self, widget: Any, path: str, *, format: str = "png", dpi: int = settings.EXPORT_DPI) -> None:
        fig = widget if isinstance(widget, Figure) else getattr(widget, "figure", None)
        if not isinstance(fig, Figure):
            raise ValueError("Unsupported widget type for export")
        if format.lower() not in {"png", "svg"}:
            raise ValueError("format must be 'png' or 'svg'")
        fig.savefig(path, format=format.lower(), dpi=dpi if format.lower() == "png" else None)
