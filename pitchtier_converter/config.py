"""Configuration constants, format literals, and .env loading.

WHY: Centralizes the values that define the PitchTier text format and the
defaults used when resampling, so they are easy to find, update, and
override without digging through parser or CLI logic.

HOW: python-dotenv loads the .env file on import. Format literals are plain
module-level strings. Overridable defaults are read from the environment;
load_frame_step() validates the step and gives a clear error when it is
unusable.

RULES:
- FILE_TYPE_LINE / OBJECT_CLASS_LINE must match input lines exactly
- KNOT_TOLERANCE_S is the exact-hit window for frequency lookups
- The default frame step is in seconds and must be positive
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# PitchTier text format
# ---------------------------------------------------------------------------

FILE_TYPE_LINE = 'File type = "ooTextFile"'
"""First line of every Praat text file."""

OBJECT_CLASS_LINE = 'Object class = "PitchTier"'
"""Second line; identifies the object as a PitchTier."""

KNOT_TOLERANCE_S = 1e-7
"""Queries closer than this to a control point return its frequency as-is."""

PITCHTIER_EXTENSIONS: set[str] = {".pitchtier", ".txt"}
"""Input file extensions accepted by the CLI (lowercase, with dot)."""

# ---------------------------------------------------------------------------
# Resampling / IO defaults
# ---------------------------------------------------------------------------

DEFAULT_ENCODING = os.getenv("PITCHTIER_ENCODING", "utf-8")
DEFAULT_FRAME_STEP_RAW = os.getenv("PITCHTIER_FRAME_STEP", "0.01")


def load_frame_step(raw: str | None = None) -> float:
    """Parse the default frame step (seconds) from the environment.

    WHY: Dense frame output needs a step; a typo in .env should fail with a
    readable message instead of a ZeroDivisionError deep in resampling.

    HOW: Parses ``raw`` (or PITCHTIER_FRAME_STEP) as a float.

    RULES:
    - Raises ValueError if the value is not a number or not positive
    """
    value = DEFAULT_FRAME_STEP_RAW if raw is None else raw
    try:
        step = float(value)
    except ValueError:
        raise ValueError(
            "Frame step must be a number of seconds, got '{}'".format(value)
        ) from None
    if not step > 0:
        raise ValueError("Frame step must be positive, got {}".format(step))
    return step
