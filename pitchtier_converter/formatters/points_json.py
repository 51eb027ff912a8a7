"""Control-point JSON formatter.

WHY: Web front ends and annotation databases want the contour's knots as
structured data rather than Praat's line-oriented text. JSON keeps the
sparse representation intact; nothing is resampled.

HOW: Builds a dict with xmin, xmax, count and a points array, validates it
against pitchtier_points_schema.json with jsonschema, then serializes it.

RULES:
- points keep their order; count always equals len(points)
- Non-finite numbers (NaN, infinity) are written as null; JSON has neither
- Validate output against the schema before returning; raise on failure
- Output suffix: "-points.json"
- Media type: "application/json"
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

import jsonschema

from pitchtier_converter.core.ir import PitchTier
from pitchtier_converter.formatters.base import BaseFormatter, FormatterOutput

_SCHEMA_PATH = Path(__file__).resolve().parent / "pitchtier_points_schema.json"


def _load_schema() -> dict[str, Any]:
    """Load the points JSON schema from disk.

    Cached at module level after first call to avoid repeated I/O.
    """
    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: dict[str, Any] | None = None


def _get_schema() -> dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def _json_number(value: float) -> float | None:
    return value if math.isfinite(value) else None


def tier_to_dict(tier: PitchTier) -> dict[str, Any]:
    """Build the JSON-ready dict for ``tier``."""
    return {
        "xmin": _json_number(tier.xmin),
        "xmax": _json_number(tier.xmax),
        "count": tier.count,
        "points": [
            {"time": _json_number(p.time), "frequency": _json_number(p.frequency)}
            for p in tier.points
        ],
    }


class PointsJSONFormatter(BaseFormatter):
    """Formatter that writes the control points as schema-checked JSON."""

    @property
    def name(self) -> str:
        return "Control points JSON"

    def format(self, tier: PitchTier, step: float) -> list[FormatterOutput]:
        payload = tier_to_dict(tier)
        jsonschema.validate(instance=payload, schema=_get_schema())

        return [
            FormatterOutput(
                suffix="-points.json",
                content=json.dumps(payload, indent=2, allow_nan=False) + "\n",
                media_type="application/json",
            )
        ]
