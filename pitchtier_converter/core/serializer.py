"""Writer for the canonical (short) PitchTier text form.

WHY: Contours computed in Python need to go back into Praat for
inspection and hand correction. Praat reads the short text form, and it is
the only form we emit, so output is identical no matter which variant the
tier was originally read from.

HOW: Two header lines, a blank line, xmin, xmax, count, then time and
frequency of every point, one value per line. Floats use repr(), which is
locale independent and round-trips exactly through float().

RULES:
- Never emit index or label lines
- count is written as an integer
- OSError on the sink, or ValueError from a closed sink, is raised as IoError
- The sink is flushed on every exit path; a sink opened here is also closed
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

from pitchtier_converter.config import DEFAULT_ENCODING, FILE_TYPE_LINE, OBJECT_CLASS_LINE
from pitchtier_converter.core.errors import IoError
from pitchtier_converter.core.ir import PitchTier


def _format_number(value: float) -> str:
    return repr(float(value))


def iter_lines(tier: PitchTier) -> Iterator[str]:
    """Yield the short-form lines of ``tier`` without line terminators."""
    yield FILE_TYPE_LINE
    yield OBJECT_CLASS_LINE
    yield ""
    yield _format_number(tier.xmin)
    yield _format_number(tier.xmax)
    yield str(tier.count)
    for point in tier.points:
        yield _format_number(point.time)
        yield _format_number(point.frequency)


def write_pitch_tier(tier: PitchTier, sink: TextIO) -> None:
    """Write ``tier`` to an open text sink.

    The sink is flushed but not closed; the caller owns it.

    Raises:
        IoError: If writing or flushing fails.
    """
    try:
        try:
            for line in iter_lines(tier):
                sink.write(line)
                sink.write("\n")
        finally:
            sink.flush()
    except (OSError, ValueError) as exc:
        raise IoError("Failed to write PitchTier: {}".format(exc)) from exc


def dump_pitch_tier(tier: PitchTier) -> str:
    """Return the short-form text of ``tier`` as a string."""
    buf = io.StringIO()
    write_pitch_tier(tier, buf)
    return buf.getvalue()


def save_pitch_tier(
    tier: PitchTier,
    path: Union[str, Path],
    encoding: Optional[str] = None,
) -> Path:
    """Write ``tier`` to ``path``, closing the file on every exit path.

    Returns:
        The path written, as a Path.

    Raises:
        IoError: If the file cannot be opened or written.
    """
    path = Path(path)
    try:
        f = open(path, "w", encoding=encoding or DEFAULT_ENCODING, newline="\n")
    except OSError as exc:
        raise IoError("Cannot open {} for writing: {}".format(path, exc)) from exc
    try:
        with f:
            write_pitch_tier(tier, f)
    except OSError as exc:
        if isinstance(exc, IoError):
            raise
        raise IoError("Failed to close {}: {}".format(path, exc)) from exc
    return path
