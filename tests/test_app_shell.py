"""Tests for the Qt hosting shell (skipped without PyQt6)."""

from __future__ import annotations

import logging

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from gui import app as gui_app  # noqa: E402
from gui.charting import ChartRequest, chart_registry  # noqa: E402
from gui.charting.mood_charts import CHART_TYPE  # noqa: E402


def test_present_embeds_chart_in_host_window(qtbot, dataset):
    result = chart_registry.build(ChartRequest(chart_type=CHART_TYPE, data=dataset))
    window = gui_app.present(result.widget)
    qtbot.addWidget(window)
    assert (window.width(), window.height()) == (600, 600)
    assert window.windowTitle() == gui_app.WINDOW_TITLE
    canvas = window.centralWidget().layout().itemAt(0).widget()
    assert (canvas.width(), canvas.height()) == (500, 400)
    assert canvas.figure is result.widget


def test_present_rejects_non_figure(qtbot):
    with pytest.raises(TypeError):
        gui_app.present("not a chart")


def test_configure_logging_accepts_level_names(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: captured.update(kw))
    gui_app.configure_logging("debug")
    assert captured["level"] == logging.DEBUG
    gui_app.configure_logging("nonsense")
    assert captured["level"] == logging.INFO
