"""Domain models for the weekly mood comparison chart."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Tuple

from config import settings


class DatasetValidationError(ValueError):
    """Raised when series or dataset invariants are violated."""


class UnmappedSeriesColorError(DatasetValidationError):
    """Raised when a period has no entry in the color table (or vice versa)."""


class Period(str, Enum):
    CURRENT = "current"
    PREVIOUS = "previous"

    @classmethod
    def coerce(cls, value: "Period | str") -> "Period":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnmappedSeriesColorError(f"No color mapped for period {value!r}") from None


@dataclass(frozen=True, slots=True)
class Sample:
    day: date
    value: float

    @property
    def id(self) -> date:
        return self.day


@dataclass(frozen=True, slots=True)
class Series:
    """One labeled sequence of (day, value) samples for a comparison period."""

    period: Period
    samples: Tuple[Sample, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "period", Period.coerce(self.period))
        object.__setattr__(self, "samples", tuple(self.samples))
        if len(self.samples) != settings.WEEK_LENGTH:
            raise DatasetValidationError(
                f"{self.period.value} series needs {settings.WEEK_LENGTH} samples, got {len(self.samples)}"
            )
        days = [s.day for s in self.samples]
        if len(set(days)) != len(days):
            raise DatasetValidationError(f"{self.period.value} series has duplicate days")

    @property
    def id(self) -> Period:
        return self.period

    @property
    def days(self) -> Tuple[date, ...]:
        return tuple(s.day for s in self.samples)

    @property
    def values(self) -> Tuple[float, ...]:
        return tuple(s.value for s in self.samples)


def validate_color_mapping(periods: Iterable["Period | str"]) -> None:
    """Ensure the given periods are exactly the keys of the color table."""
    seen = [p.value if isinstance(p, Period) else str(p) for p in periods]
    mapped = set(settings.PERIOD_COLORS)
    unknown = [p for p in seen if p not in mapped]
    if unknown:
        raise UnmappedSeriesColorError(f"No color mapped for period(s): {', '.join(unknown)}")
    missing = sorted(mapped - set(seen))
    if missing:
        raise UnmappedSeriesColorError(f"Color table entries without a series: {', '.join(missing)}")


@dataclass(frozen=True, slots=True)
class Dataset:
    """Exactly two series, previous week first, then current week."""

    series: Tuple[Series, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))
        if len(self.series) != 2:
            raise DatasetValidationError(f"Dataset needs exactly 2 series, got {len(self.series)}")
        periods = [s.period for s in self.series]
        if len(set(periods)) != len(periods):
            raise DatasetValidationError("Dataset has duplicate periods")
        validate_color_mapping(periods)
        if periods[0] is not Period.PREVIOUS:
            raise DatasetValidationError("Dataset must list the previous week first")

    def __iter__(self):
        return iter(self.series)

    def __len__(self) -> int:
        return len(self.series)

    def by_period(self, period: "Period | str") -> Series:
        key = Period.coerce(period)
        for s in self.series:
            if s.period is key:
                return s
        raise KeyError(key.value)  # pragma: no cover - unreachable after validation

    @property
    def previous(self) -> Series:
        return self.by_period(Period.PREVIOUS)

    @property
    def current(self) -> Series:
        return self.by_period(Period.CURRENT)
