"""Shared test fixtures for the pitchtier_converter test suite.

WHY: Parser, serializer, interpolation, formatter, and CLI tests all need
the same small contour in both Praat text variants. Centralizing it here
keeps the short and long forms guaranteed to describe the same tier.

HOW: Module-level strings hold the two text variants; fixtures expose them
together with the equivalent directly constructed PitchTier.

RULES:
- SHORT_FORM_TEXT and LONG_FORM_TEXT describe the same tier exactly.
- LONG_FORM_TEXT mirrors Praat's default "Save as text file" output,
  including the trailing space after each value.
"""

import pytest

from pitchtier_converter.core.ir import ControlPoint, PitchTier


SHORT_FORM_TEXT = (
    'File type = "ooTextFile"\n'
    'Object class = "PitchTier"\n'
    "\n"
    "0\n"
    "2.5\n"
    "3\n"
    "0.5\n"
    "120\n"
    "1.5\n"
    "180\n"
    "2\n"
    "150\n"
)

LONG_FORM_TEXT = (
    'File type = "ooTextFile"\n'
    'Object class = "PitchTier"\n'
    "\n"
    "xmin = 0 \n"
    "xmax = 2.5 \n"
    "points: size = 3 \n"
    "points [1]:\n"
    "    number = 0.5 \n"
    "    value = 120 \n"
    "points [2]:\n"
    "    number = 1.5 \n"
    "    value = 180 \n"
    "points [3]:\n"
    "    number = 2 \n"
    "    value = 150 \n"
)


@pytest.fixture
def short_form_text():
    return SHORT_FORM_TEXT


@pytest.fixture
def long_form_text():
    return LONG_FORM_TEXT


@pytest.fixture
def sample_tier():
    """The tier both text fixtures describe."""
    return PitchTier(
        xmin=0.0,
        xmax=2.5,
        points=[
            ControlPoint(0.5, 120.0),
            ControlPoint(1.5, 180.0),
            ControlPoint(2.0, 150.0),
        ],
    )


@pytest.fixture
def two_point_tier():
    """(0, 100 Hz) to (1, 200 Hz) over the span 0..1."""
    return PitchTier(
        xmin=0.0,
        xmax=1.0,
        points=[ControlPoint(0.0, 100.0), ControlPoint(1.0, 200.0)],
    )
