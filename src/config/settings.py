"""Global configuration and constants for the mood chart playground."""

from __future__ import annotations

import os
from typing import Final

# Chart frame (logical units) and the square host window it is embedded in
CHART_WIDTH: Final = 500
CHART_HEIGHT: Final = 400
HOST_SIZE: Final = 600
FIGURE_DPI: Final = 100

LINE_WIDTH: Final = 6
Y_DOMAIN: Final = (-0.5, 4.5)

# Fixed positional highlight on the x axis (Thursday for a Monday-start week)
HIGHLIGHT_TICK_INDEX: Final = 3
HIGHLIGHT_COLOR: Final = "red"
LABEL_COLOR: Final = "#3C3C43"
GRID_COLOR: Final = "#D1D1D6"

# Keyed by Period value; order is legend order
PERIOD_COLORS: Final = {
    "current": "blue",
    "previous": "gray",
}
LEGEND_POSITION: Final = "bottom"
LEGEND_ALIGNMENT: Final = "center"

# Sample data window (Mon 1 Aug 2022 .. Sun 14 Aug 2022)
SAMPLE_YEAR: Final = 2022
SAMPLE_MONTH: Final = 8
WEEK_LENGTH: Final = 7

EXPORT_DPI: Final = 120
LOG_LEVEL: Final = os.environ.get("MOODCHARTS_LOG_LEVEL", "INFO")
