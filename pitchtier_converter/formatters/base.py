"""Abstract base formatter and output container.

WHY: Every output format consumes the same PitchTier model but produces
different file content. This base class enforces a consistent interface
so the CLI can drive any formatter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list, even for single-file formats
- ``suffix`` is appended to the source stem, e.g. ``"-frames.csv"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pitchtier_converter.core.ir import PitchTier


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-frames.csv"`` → ``"utt01-frames.csv"``.
        content: The file content as a string.
        media_type: MIME type for the content, e.g. ``"text/csv"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Dense frames CSV'."""

    @abstractmethod
    def format(self, tier: PitchTier, step: float) -> list[FormatterOutput]:
        """Convert the PitchTier into one or more output files.

        Args:
            tier: The contour to write.
            step: Frame step in seconds, for formats that resample.
                  Formats that write control points directly ignore it.

        Returns:
            List of FormatterOutput objects.
        """
