"""Tests for Catmull-Rom line smoothing."""

from __future__ import annotations

import pytest

from gui.charting.interpolation import SEGMENT_STEPS, catmull_rom


def test_curve_passes_through_every_anchor():
    anchors = [(0.0, 2.5), (1.0, 0.5), (2.0, 1.0), (3.0, 1.5), (4.0, 2.0)]
    curve = catmull_rom(anchors)
    assert len(curve) == (len(anchors) - 1) * SEGMENT_STEPS + 1
    for i, (x, y) in enumerate(anchors):
        cx, cy = curve[i * SEGMENT_STEPS]
        assert cx == pytest.approx(x)
        assert cy == pytest.approx(y)


def test_curve_is_not_piecewise_linear():
    anchors = [(0.0, 0.0), (1.0, 2.0), (2.0, 0.0), (3.0, 2.0)]
    curve = catmull_rom(anchors, steps=4)
    # Quarter point of the middle segment bulges away from the straight chord (y == 1.5)
    _, y_quarter = curve[4 + 1]
    assert y_quarter == pytest.approx(1.6875)


def test_uniform_x_stays_monotonic():
    anchors = [(float(i), v) for i, v in enumerate([2.5, 2, 2.5, 3.5, 2.5, 1.5, 3.0])]
    xs = [x for x, _ in catmull_rom(anchors)]
    assert xs == sorted(xs)


def test_short_inputs_returned_unchanged():
    assert catmull_rom([(0, 1), (1, 2)]) == ((0.0, 1.0), (1.0, 2.0))
    assert catmull_rom([]) == ()


def test_steps_must_be_positive():
    with pytest.raises(ValueError):
        catmull_rom([(0, 0), (1, 1), (2, 0)], steps=0)
