"""Chart export helper.

Keeps callers decoupled from the concrete backend export API.
"""
from __future__ import annotations

from config import settings
from .registry import chart_registry


def export_chart(chart_widget, path: str, *, format: str = "png", dpi: int = settings.EXPORT_DPI) -> None:
    """Export a chart widget to disk via the backend.

    Args:
        chart_widget: The figure (or Qt canvas) returned in ChartResult.widget.
        path: Destination file path (existing directory required).
        format: 'png' or 'svg'.
        dpi: Raster resolution for PNG.
    """
    chart_registry.backend.export_widget(chart_widget, path, format=format, dpi=dpi)
