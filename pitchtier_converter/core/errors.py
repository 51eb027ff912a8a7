"""Exception types for PitchTier reading and writing.

WHY: Callers need typed exceptions to tell a malformed file apart from a
failing disk or stream, and to show the offending line to the user.

HOW: PitchTierError is the common base. FormatError also subclasses
ValueError (bad content); IoError also subclasses OSError (bad stream).

RULES:
- No partial PitchTier is ever returned alongside these errors
- IoError always chains the underlying exception
"""

from __future__ import annotations

from typing import Optional


class PitchTierError(Exception):
    """Base class for all errors raised by pitchtier_converter."""


class FormatError(PitchTierError, ValueError):
    """Raised when input text is not a readable PitchTier.

    WHY: Praat writes two text variants; when neither matches, the user
    needs to see which line broke detection.

    HOW: Raised by the parser for header literal mismatches, numeric tokens
    that fail both the bare and trailing-token attempts, and premature end
    of stream.

    RULES:
    - expected / actual are set for header literal mismatches
    - line / line_number are set when a specific input line is at fault
    """

    def __init__(
        self,
        message: str,
        line: Optional[str] = None,
        line_number: Optional[int] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
    ) -> None:
        self.line = line
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        if line_number is not None:
            message = "line {}: {}".format(line_number, message)
        super().__init__(message)


class IoError(PitchTierError, OSError):
    """Raised when the underlying stream cannot be read or written."""
