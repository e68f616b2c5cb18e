"""Tests for the weekly mood sample dataset."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from domain.models import Dataset, DatasetValidationError, Period, Sample
from domain.mood_data import (
    CURRENT_WEEK_MOODS,
    PREVIOUS_WEEK_MOODS,
    build_dataset,
    sorted_by,
    week_series,
)


def test_sample_dataset_shape(dataset):
    assert isinstance(dataset, Dataset)
    assert len(dataset) == 2
    assert [s.period for s in dataset] == [Period.PREVIOUS, Period.CURRENT]
    assert all(len(s.samples) == 7 for s in dataset)


def test_sample_dataset_dates(dataset):
    assert dataset.previous.samples[0].day == date(2022, 8, 1)
    assert dataset.previous.samples[-1].day == date(2022, 8, 7)
    assert dataset.current.samples[0].day == date(2022, 8, 8)
    assert dataset.current.samples[-1].day == date(2022, 8, 14)
    # Both weeks start on a Monday
    assert dataset.previous.samples[0].day.weekday() == 0
    assert dataset.current.samples[0].day.weekday() == 0


def test_sample_dataset_values_pair_by_index(dataset):
    assert dataset.previous.values == tuple(float(v) for v in PREVIOUS_WEEK_MOODS)
    assert dataset.current.values == tuple(float(v) for v in CURRENT_WEEK_MOODS)
    assert dataset.previous.values[1] == 0.5
    assert dataset.current.values[3] == 3.5


def test_weeks_are_contiguous(dataset):
    assert dataset.previous.days[-1] + timedelta(days=1) == dataset.current.days[0]
    for series in dataset:
        days = series.days
        assert all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))


def test_week_series_requires_seven_values():
    with pytest.raises(DatasetValidationError):
        week_series(Period.CURRENT, 2022, 8, 8, [1.0, 2.0])
    with pytest.raises(DatasetValidationError):
        build_dataset(previous=[1.0] * 8)


def test_week_series_runs_past_month_end():
    series = week_series("previous", 2022, 8, 29, [1] * 7)
    assert series.days[0] == date(2022, 8, 29)
    assert series.days[-1] == date(2022, 9, 4)


def test_invalid_month_does_not_crash(caplog):
    with caplog.at_level("WARNING"):
        ds = build_dataset(2022, 13)
    assert len(ds) == 2
    assert all(len(s.samples) == 7 for s in ds)
    assert ds.previous.days[0] == date.today()
    assert any("not contiguous" in r.getMessage() for r in caplog.records)


def test_dataset_is_immutable(dataset):
    with pytest.raises(AttributeError):
        dataset.series = ()  # type: ignore[misc]
    with pytest.raises(AttributeError):
        dataset.previous.samples[0].value = 9.0  # type: ignore[misc]


def test_sorted_by_ascending_and_descending():
    samples = [Sample(date(2022, 8, d), float(d)) for d in (3, 1, 2)]
    assert [s.day.day for s in sorted_by(samples, key=lambda s: s.day)] == [1, 2, 3]
    assert [s.day.day for s in sorted_by(samples, key=lambda s: s.day, ascending=False)] == [3, 2, 1]
