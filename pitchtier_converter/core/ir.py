"""In-memory model for a Praat PitchTier.

WHY: Praat's PitchTier is a sparse pitch contour: a handful of
(time, frequency) control points with straight lines in between. Parsers,
serializers, resamplers, and formatters all need the same well-typed view
of it, independent of which text variant it was read from.

HOW: Two dataclasses:
  ControlPoint: one (time, frequency) knot, frozen
  PitchTier:    the nominal span (xmin, xmax) plus the ordered points

RULES:
- Times are float seconds, frequencies float Hz
- points are stored as a tuple in time order; order is assumed, not checked
- count is always len(points); it is derived, never stored
- Equality is field-wise and exact (no epsilon); the hash uses the same fields
- import_frames() is the only operation that replaces points
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class ControlPoint:
    """A single (time, frequency) knot on a pitch contour.

    Attributes:
        time: Position of the knot in seconds.
        frequency: F0 at that position in Hz.
    """

    time: float
    frequency: float


@dataclass(eq=False)
class PitchTier:
    """A pitch contour: the span it covers and its control points.

    WHY: This is the single object the parser produces, the serializer
    consumes, and the interpolator resamples.

    HOW: Construct directly, via parse_pitch_tier(), or via from_frames().
    Any iterable of ControlPoint is accepted for ``points`` and frozen into
    a tuple.

    RULES:
    - xmin / xmax are the nominal span, not the first / last point time
    - Two tiers are equal iff xmin, xmax, count and every point are equal
    """

    xmin: float
    xmax: float
    points: Tuple[ControlPoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.points = tuple(self.points)

    @property
    def count(self) -> int:
        return len(self.points)

    @classmethod
    def from_frames(cls, xmin: float, frames: Sequence[float], step: float) -> PitchTier:
        """Build a tier from a dense frame array.

        Frame ``i`` sits at ``xmin + i * step``; NaN frames produce no point.
        The span ends at the last frame, defined or not.
        """
        tier = cls(xmin=float(xmin), xmax=float(xmin + (len(frames) - 1) * step))
        tier.import_frames(frames, step)
        return tier

    def import_frames(self, frames: Sequence[float], step: float) -> None:
        """Replace all points with one point per non-NaN frame.

        Keeps ``xmin`` and ``xmax`` as they are; from_frames() sets them.
        """
        from pitchtier_converter.core.interpolation import frames_to_points

        self.points = tuple(frames_to_points(self.xmin, frames, step))

    def frequency_at(self, time: float) -> float:
        """Return the contour's frequency at ``time``, or NaN where undefined."""
        from pitchtier_converter.core.interpolation import frequency_at

        return frequency_at(self.points, time)

    def to_frames(self, step: float) -> List[float]:
        """Resample the contour from xmin to xmax at a fixed ``step``."""
        from pitchtier_converter.core.interpolation import to_frames

        return to_frames(self, step)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PitchTier):
            return NotImplemented
        return (
            self.xmin == other.xmin
            and self.xmax == other.xmax
            and self.count == other.count
            and self.points == other.points
        )

    def __hash__(self) -> int:
        return hash((self.xmin, self.xmax, self.count, self.points))
