"""Catmull-Rom curve interpolation for line marks."""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from .types import Point

SEGMENT_STEPS = 16

# Uniform Catmull-Rom basis (tension 0.5), rows are t^0..t^3
_BASIS = 0.5 * np.array(
    [
        [0.0, 2.0, 0.0, 0.0],
        [-1.0, 0.0, 1.0, 0.0],
        [2.0, -5.0, 4.0, -1.0],
        [-1.0, 3.0, -3.0, 1.0],
    ]
)


def catmull_rom(points: Sequence[Point], steps: int = SEGMENT_STEPS) -> Tuple[Point, ...]:
    """Return a smooth curve passing through every input point.

    Each segment between consecutive points is sampled ``steps`` times; the
    end points are duplicated as phantom control points. Fewer than three
    points are returned unchanged (a straight segment is already smooth).
    """
    if steps < 1:
        raise ValueError("steps must be >= 1")
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(pts) < 3:
        return tuple((float(x), float(y)) for x, y in pts)
    padded = np.vstack([pts[:1], pts, pts[-1:]])
    t = np.linspace(0.0, 1.0, steps, endpoint=False)
    powers = np.stack([np.ones_like(t), t, t**2, t**3], axis=1)
    weights = powers @ _BASIS  # (steps, 4)
    curve = []
    for i in range(len(pts) - 1):
        control = padded[i : i + 4]  # P(i-1), P(i), P(i+1), P(i+2)
        curve.append(weights @ control)
    curve.append(pts[-1:])
    out = np.vstack(curve)
    return tuple((float(x), float(y)) for x, y in out)
