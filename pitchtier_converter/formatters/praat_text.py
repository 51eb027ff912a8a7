"""Praat PitchTier text formatter.

WHY: The most common reason to touch a PitchTier is to give it back to
Praat. Long-form files coming in become short-form files going out, so
this formatter doubles as a normalizer.

HOW: Delegates to the core serializer.

RULES:
- Output is always the short (non-indexed) text form
- Output suffix: ".PitchTier"
- Media type: "text/plain"
"""

from __future__ import annotations

from pitchtier_converter.core.ir import PitchTier
from pitchtier_converter.core.serializer import dump_pitch_tier
from pitchtier_converter.formatters.base import BaseFormatter, FormatterOutput


class PraatTextFormatter(BaseFormatter):
    """Formatter that writes the canonical short-form PitchTier text."""

    @property
    def name(self) -> str:
        return "Praat PitchTier"

    def format(self, tier: PitchTier, step: float) -> list[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".PitchTier",
                content=dump_pitch_tier(tier),
                media_type="text/plain",
            )
        ]
