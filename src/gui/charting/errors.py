"""Chart rendering errors."""

from __future__ import annotations

from domain.models import DatasetValidationError, UnmappedSeriesColorError

__all__ = ["DatasetValidationError", "UnmappedSeriesColorError", "UnsupportedBinningUnitError"]


class UnsupportedBinningUnitError(ValueError):
    """Raised when ticks are requested for a calendar unit that cannot be binned.

    Weekday is a repeating component rather than a calendar interval, so
    ticks must be binned by day and only *labeled* with the weekday.
    """

    def __init__(self, unit: str) -> None:
        super().__init__(
            f"Binning x-axis ticks by {unit!r} is not supported; bin by 'day' and format labels as weekdays"
        )
        self.unit = unit
