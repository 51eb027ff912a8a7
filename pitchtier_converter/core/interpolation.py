"""Conversion between sparse control points and dense frame arrays.

WHY: Praat keeps a pitch contour as a few knots; signal-processing code
wants one value per analysis frame. Both directions are needed: resampling
a parsed contour onto a frame grid, and turning a computed frame track back
into knots that Praat can display and edit.

HOW: frequency_at() does a linear scan for the first knot at or after the
query time and interpolates linearly from the knot before it. to_frames()
samples that on an evenly spaced grid. frames_to_points() is the inverse:
every defined frame becomes a knot.

RULES:
- NaN is the "undefined" value, both as output and as input
- Before the first knot and after the last knot the contour is undefined
- A query within KNOT_TOLERANCE_S of a knot returns that knot's frequency
  unchanged, so sampling exactly on knots never introduces round-off
- Grid positions are computed as xmin + i * step, not by accumulation
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Sequence

from pitchtier_converter.config import KNOT_TOLERANCE_S
from pitchtier_converter.core.ir import ControlPoint

if TYPE_CHECKING:
    from pitchtier_converter.core.ir import PitchTier


def frequency_at(points: Sequence[ControlPoint], time: float) -> float:
    """Return the interpolated frequency at ``time``.

    Args:
        points: Control points in non-decreasing time order.
        time: Query time in seconds.

    Returns:
        The knot frequency on an exact hit, a linearly interpolated value
        between two knots, or NaN outside the knots' range.
    """
    prev = None
    current = None
    for i, point in enumerate(points):
        if time <= point.time:
            current = point
            if i > 0:
                prev = points[i - 1]
            break

    if current is None:
        return math.nan
    if abs(time - current.time) < KNOT_TOLERANCE_S:
        return current.frequency
    if prev is None:
        return math.nan

    delta_t = current.time - prev.time
    delta_f = current.frequency - prev.frequency
    return prev.frequency + (time - prev.time) / delta_t * delta_f


def frame_count(xmin: float, xmax: float, step: float) -> int:
    """Number of frames between xmin and xmax inclusive at ``step``."""
    if not step > 0:
        raise ValueError("step must be positive, got {}".format(step))
    span = xmax - xmin
    if not math.isfinite(span):
        raise ValueError("cannot resample a non-finite span from {} to {}".format(xmin, xmax))
    return max(0, math.floor(span / step) + 1)


def to_frames(tier: PitchTier, step: float) -> List[float]:
    """Sample ``tier`` every ``step`` seconds from xmin to xmax.

    Raises:
        ValueError: If step is not positive or the span is not finite.
    """
    n = frame_count(tier.xmin, tier.xmax, step)
    points = tier.points
    return [frequency_at(points, tier.xmin + i * step) for i in range(n)]


def frames_to_points(xmin: float, frames: Sequence[float], step: float) -> List[ControlPoint]:
    """Turn every non-NaN frame into a ControlPoint at xmin + i * step."""
    points: List[ControlPoint] = []
    for i, value in enumerate(frames):
        value = float(value)
        if math.isnan(value):
            continue
        points.append(ControlPoint(float(xmin + i * step), value))
    return points
