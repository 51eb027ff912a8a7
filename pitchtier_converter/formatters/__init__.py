"""Output formatter registry, a pluggable format hub.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new formats: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["frames_csv"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pitchtier_converter.formatters.frames_csv import FramesCSVFormatter
from pitchtier_converter.formatters.points_json import PointsJSONFormatter
from pitchtier_converter.formatters.praat_text import PraatTextFormatter

if TYPE_CHECKING:
    from pitchtier_converter.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "praat_text": PraatTextFormatter,
    "frames_csv": FramesCSVFormatter,
    "points_json": PointsJSONFormatter,
}
