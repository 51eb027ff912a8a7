"""PitchTier Converter: read, write, and resample Praat pitch contours.

WHY: Praat stores hand-corrected or exported F0 contours as "PitchTier"
text files: a sparse list of (time, frequency) control points. Speech
pipelines work on dense, evenly spaced frame arrays instead. This package
bridges the two and re-emits contours that Praat can open again.

HOW: Three-stage pipeline: parse (tolerant reader for both Praat text
variants), model (PitchTier / ControlPoint), output (interpolation to dense
frames plus pluggable formatters). Each stage is independently testable.

RULES:
- All formatters consume the same PitchTier model
- Output PitchTier text is always the short (non-indexed) variant
- NaN means "no pitch here" everywhere frames are involved
"""

from pitchtier_converter.core.errors import FormatError, IoError, PitchTierError
from pitchtier_converter.core.ir import ControlPoint, PitchTier
from pitchtier_converter.core.parser import (
    parse_pitch_tier,
    parse_pitch_tier_text,
    read_pitch_tier,
)
from pitchtier_converter.core.serializer import (
    dump_pitch_tier,
    save_pitch_tier,
    write_pitch_tier,
)

__version__ = "0.1.0"

__all__ = [
    "ControlPoint",
    "FormatError",
    "IoError",
    "PitchTier",
    "PitchTierError",
    "dump_pitch_tier",
    "parse_pitch_tier",
    "parse_pitch_tier_text",
    "read_pitch_tier",
    "save_pitch_tier",
    "write_pitch_tier",
]
