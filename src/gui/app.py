"""GUI application entry point: hosts the mood chart in a Qt window."""

from __future__ import annotations

import logging
import sys
from typing import Any

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication, QMainWindow, QVBoxLayout, QWidget

from config import settings
from domain.mood_data import sample_dataset
from gui.charting import ChartRequest, chart_registry
from gui.charting.mood_charts import CHART_TYPE

log = logging.getLogger(__name__)

WINDOW_TITLE = "Mood Charts"


def configure_logging(level: str | int | None = None) -> None:
    level = level if level is not None else settings.LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_qt_app() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    return app  # type: ignore[return-value]


def present(view: Any, *, size: int = settings.HOST_SIZE, title: str = WINDOW_TITLE) -> QMainWindow:
    """Embed a chart figure (or an existing canvas) in a fixed-size host window and show it."""
    _ensure_qt_app()
    if isinstance(view, Figure):
        canvas = FigureCanvasQTAgg(view)
    elif isinstance(view, FigureCanvasQTAgg):
        canvas = view
    else:
        raise TypeError(f"present expects a matplotlib Figure or canvas, got {type(view).__name__}")
    canvas.setFixedSize(settings.CHART_WIDTH, settings.CHART_HEIGHT)

    host = QWidget()
    layout = QVBoxLayout(host)
    layout.addWidget(canvas, alignment=Qt.AlignmentFlag.AlignCenter)

    window = QMainWindow()
    window.setWindowTitle(title)
    window.setCentralWidget(host)
    window.setFixedSize(size, size)
    window.show()
    log.debug("presented chart in %dx%d host window", size, size)
    return window


def main() -> int:  # pragma: no cover - GUI runtime
    configure_logging()
    app = _ensure_qt_app()
    result = chart_registry.build(ChartRequest(chart_type=CHART_TYPE, data=sample_dataset()))
    log.info(
        "mood chart ready: %d series, %d ticks (%.1f ms)",
        result.meta["series_count"],
        result.meta["tick_count"],
        result.meta["build_ms"],
    )
    window = present(result.widget)  # noqa: F841  # keep a reference while the loop runs
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
