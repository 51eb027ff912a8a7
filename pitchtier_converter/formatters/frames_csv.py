"""Dense frame CSV formatter.

WHY: Feature extraction, plotting, and model training code wants one F0
value per analysis frame, not a list of knots. A CSV with a time column is
the lowest-common-denominator way to hand that over.

HOW: Resamples the tier with to_frames(step) and writes one row per frame.
Undefined frames (NaN) are written as an empty frequency cell so that
spreadsheet tools and pandas both read them as missing.

RULES:
- Header row: "time_s,frequency_hz"
- Frame i is at xmin + i * step, same grid as PitchTier.to_frames()
- NaN frequency → empty cell
- Output suffix: "-frames.csv"
- Media type: "text/csv"
"""

from __future__ import annotations

import csv
import io
import math

from pitchtier_converter.core.ir import PitchTier
from pitchtier_converter.formatters.base import BaseFormatter, FormatterOutput


class FramesCSVFormatter(BaseFormatter):
    """Formatter that resamples the contour to a fixed-step CSV."""

    @property
    def name(self) -> str:
        return "Dense frames CSV"

    def format(self, tier: PitchTier, step: float) -> list[FormatterOutput]:
        frames = tier.to_frames(step)

        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(["time_s", "frequency_hz"])
        for i, value in enumerate(frames):
            time = tier.xmin + i * step
            writer.writerow([repr(float(time)), "" if math.isnan(value) else repr(value)])

        return [
            FormatterOutput(
                suffix="-frames.csv",
                content=buf.getvalue(),
                media_type="text/csv",
            )
        ]
