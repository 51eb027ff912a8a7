"""Tolerant reader for Praat PitchTier text files.

WHY: Praat writes PitchTiers in two text flavours. The "short" form puts a
bare number on each line. The default "long" form labels every number
("xmin = 0", "number = 0.5") and inserts a "points [i]:" line before each
control point. Files from both flavours show up in corpora, often mixed
within one project, and must read into the same PitchTier.

HOW: Two fixed header lines are checked literally, one line is skipped,
then the numeric header (xmin, xmax, count) and each point record are read
with two-phase detection: try every line of the group as a bare literal;
if any fails, fall back to the last whitespace-separated token of each
line. The header triple is detected as a whole; each point record is
detected on its own, and in the long form the first line of the record is
the index line and one extra line is read.

RULES:
- Header literals must match exactly (after removing the line terminator)
- Detection is all-or-nothing per group, never per line
- A number that fails both phases raises FormatError with the line
- Running out of lines before count records are read raises FormatError
- Extra lines after the last record are ignored with a warning
- OSError / decoding failures while reading a record raise IoError
- Trailing lines are never decoded strictly; a read failure there is a warning
"""

from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import List, NamedTuple, Optional, TextIO, Tuple, Union

from pitchtier_converter.config import DEFAULT_ENCODING, FILE_TYPE_LINE, OBJECT_CLASS_LINE
from pitchtier_converter.core.errors import FormatError, IoError
from pitchtier_converter.core.ir import ControlPoint, PitchTier

logger = logging.getLogger(__name__)

SHORT_FORM = "short"
LONG_FORM = "long"

# Bytes that did not decode, as left by errors="surrogateescape".
_UNDECODABLE = re.compile("[\udc80-\udcff]")


class _Detected(NamedTuple):
    """Numbers recovered from one group of lines and the variant that worked."""

    values: Tuple[float, ...]
    variant: str


class _LineReader:
    """Line-at-a-time reader that tracks line numbers and fails on EOF."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.line_number = 0

    def next_line(self, what: str) -> str:
        try:
            raw = self._stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise IoError("Failed to read PitchTier input: {}".format(exc)) from exc
        if raw == "":
            raise FormatError(
                "unexpected end of input while reading {}".format(what),
                line_number=self.line_number + 1,
            )
        self.line_number += 1
        if _UNDECODABLE.search(raw):
            raise IoError("Failed to decode line {} of PitchTier input".format(self.line_number))
        line = raw.rstrip("\r\n")
        if self.line_number == 1:
            line = line.lstrip("\ufeff")
        return line

    def remaining(self) -> List[str]:
        """Collect the non-blank lines left after the last record."""
        lines: List[str] = []
        while True:
            try:
                raw = self._stream.readline()
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning(
                    "Stopped reading trailing data after line %d: %s",
                    self.line_number + len(lines),
                    exc,
                )
                break
            if raw == "":
                break
            if raw.strip():
                lines.append(raw.rstrip("\r\n"))
        return lines


def _expect_literal(reader: _LineReader, expected: str, what: str) -> None:
    actual = reader.next_line(what)
    if actual != expected:
        raise FormatError(
            "{} expected to be '{}' but was '{}'".format(what, expected, actual),
            line=actual,
            line_number=reader.line_number,
            expected=expected,
            actual=actual,
        )


def _trailing_token(line: str, line_number: int) -> str:
    fields = line.split()
    if not fields:
        raise FormatError("expected a number but the line is empty", line=line, line_number=line_number)
    return fields[-1]


def _trailing_float(line: str, line_number: int) -> float:
    token = _trailing_token(line, line_number)
    try:
        return float(token)
    except ValueError:
        raise FormatError(
            "cannot read a number from '{}'".format(line), line=line, line_number=line_number
        ) from None


def _trailing_int(line: str, line_number: int) -> int:
    token = _trailing_token(line, line_number)
    try:
        return int(token)
    except ValueError:
        raise FormatError(
            "cannot read a point count from '{}'".format(line), line=line, line_number=line_number
        ) from None


def _read_header(reader: _LineReader) -> _Detected:
    """Read xmin, xmax and the point count."""
    first = reader.line_number + 1
    lines = [
        reader.next_line("xmin"),
        reader.next_line("xmax"),
        reader.next_line("point count"),
    ]
    try:
        return _Detected((float(lines[0]), float(lines[1]), int(lines[2])), SHORT_FORM)
    except ValueError:
        pass
    return _Detected(
        (
            _trailing_float(lines[0], first),
            _trailing_float(lines[1], first + 1),
            _trailing_int(lines[2], first + 2),
        ),
        LONG_FORM,
    )


def _read_point(reader: _LineReader, index: int) -> Tuple[ControlPoint, str]:
    """Read one control point record (2 lines short form, 3 lines long form)."""
    what = "point {}".format(index + 1)
    time_line = reader.next_line(what)
    freq_line = reader.next_line(what)
    try:
        return ControlPoint(float(time_line), float(freq_line)), SHORT_FORM
    except ValueError:
        pass

    # Long form: what we took for the time line was the "points [i]:" index line.
    time_line = freq_line
    time_line_number = reader.line_number
    freq_line = reader.next_line(what)
    time = _trailing_float(time_line, time_line_number)
    frequency = _trailing_float(freq_line, reader.line_number)
    return ControlPoint(time, frequency), LONG_FORM


def parse_pitch_tier(stream: TextIO) -> PitchTier:
    """Parse a PitchTier from an open text stream.

    The stream is consumed but not closed; the caller owns it.

    Args:
        stream: Text stream positioned at the "File type" line.

    Returns:
        The fully populated PitchTier.

    Raises:
        FormatError: If the content is not a readable PitchTier.
        IoError: If reading from the stream fails.
    """
    reader = _LineReader(stream)
    _expect_literal(reader, FILE_TYPE_LINE, "First line")
    _expect_literal(reader, OBJECT_CLASS_LINE, "Second line")
    reader.next_line("blank line after header")

    header = _read_header(reader)
    xmin, xmax, count = header.values
    logger.debug("PitchTier header in %s form: xmin=%s xmax=%s count=%d", header.variant, xmin, xmax, count)

    points: List[ControlPoint] = []
    long_records = 0
    for i in range(int(count)):
        point, variant = _read_point(reader, i)
        points.append(point)
        if variant == LONG_FORM:
            long_records += 1
    if long_records:
        logger.debug("Read %d of %d points in long form", long_records, len(points))

    extra = reader.remaining()
    if extra:
        logger.warning(
            "Ignoring %d trailing line(s) after %d point(s); first: %r",
            len(extra),
            len(points),
            extra[0],
        )

    return PitchTier(xmin=xmin, xmax=xmax, points=points)


def parse_pitch_tier_text(text: str) -> PitchTier:
    """Parse a PitchTier from a string."""
    return parse_pitch_tier(io.StringIO(text))


def read_pitch_tier(path: Union[str, Path], encoding: Optional[str] = None) -> PitchTier:
    """Open ``path``, parse it, and close it again on every exit path.

    The file is decoded leniently so that junk after the last record cannot
    fail the parse; an undecodable byte inside a record still raises IoError.

    Raises:
        FormatError: If the file is not a readable PitchTier.
        IoError: If the file cannot be opened or read.
    """
    try:
        f = open(path, "r", encoding=encoding or DEFAULT_ENCODING, errors="surrogateescape")
    except OSError as exc:
        raise IoError("Cannot open PitchTier file {}: {}".format(path, exc)) from exc
    with f:
        return parse_pitch_tier(f)
