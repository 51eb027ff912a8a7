"""Command-line interface for the PitchTier Converter.

WHY: Users need a quick way to normalize Praat PitchTier files, resample
them to dense frames, or turn a frame track computed elsewhere into a
PitchTier, without writing Python.

HOW: Uses argparse to accept an input file, output format selection, frame
step, and output directory. The input is either a PitchTier text file
(either Praat variant) or, with --from-frames, a plain list of frame
values. The resulting PitchTier goes through every selected formatter and
each output is saved next to the source (or to --output-dir).

RULES:
- Positional argument: input file path
- --formats: comma-separated formatter keys (default: all registered)
- --step defaults to PITCHTIER_FRAME_STEP from the environment
- --from-frames: one value per line; blank, "nan", "NaN" = undefined
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-frames-2.csv)
- Status output goes to stderr (not stdout)
- --verbose turns on library logging at DEBUG level
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional

from pitchtier_converter.config import DEFAULT_ENCODING, PITCHTIER_EXTENSIONS, load_frame_step
from pitchtier_converter.core.errors import FormatError, IoError, PitchTierError
from pitchtier_converter.core.ir import PitchTier
from pitchtier_converter.core.parser import read_pitch_tier
from pitchtier_converter.formatters import FORMATTERS
from pitchtier_converter.formatters.base import FormatterOutput


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _error(msg: str) -> int:
    print("Error: {}".format(msg), file=sys.stderr)
    return 1


def read_frames(path: Path) -> List[float]:
    """Read a frame track: one value per line, blank or NaN for unvoiced.

    Raises:
        FormatError: If a line is neither blank nor a number.
        IoError: If the file cannot be read.
    """
    try:
        text = path.read_text(encoding=DEFAULT_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise IoError("Cannot read frames file {}: {}".format(path, exc)) from exc

    frames: List[float] = []
    for number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            frames.append(math.nan)
            continue
        try:
            frames.append(float(stripped))
        except ValueError:
            raise FormatError(
                "frame value '{}' is not a number".format(stripped),
                line=line,
                line_number=number,
            ) from None
    return frames


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. utt01-frames.csv)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. utt01-frames-2.csv)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx >= 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to disk, never overwriting."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    try:
        path.write_text(output.content, encoding=DEFAULT_ENCODING)
    except OSError as exc:
        raise IoError("Cannot write {}: {}".format(path, exc)) from exc
    return path


def _load_tier(args: argparse.Namespace, input_path: Path, step: float) -> PitchTier:
    if args.from_frames:
        frames = read_frames(input_path)
        tier = PitchTier.from_frames(args.xmin, frames, step)
        _status("  {} frames, {} voiced".format(len(frames), tier.count))
        return tier
    return read_pitch_tier(input_path)


def run(args: argparse.Namespace) -> int:
    """Execute the conversion and return the process exit code."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    input_path = Path(args.input_file).resolve()
    if not input_path.is_file():
        return _error("File not found: {}".format(input_path))

    ext = input_path.suffix.lower()
    if not args.from_frames and ext not in PITCHTIER_EXTENSIONS:
        _status("Warning: unexpected extension '{}', trying to read it anyway".format(ext))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not output_dir.is_dir():
        return _error("Output directory does not exist: {}".format(output_dir))

    if args.formats:
        format_keys = [f.strip() for f in args.formats.split(",") if f.strip()]
        for key in format_keys:
            if key not in FORMATTERS:
                available = ", ".join(sorted(FORMATTERS.keys()))
                return _error("Unknown format '{}'. Available formats: {}".format(key, available))
    else:
        format_keys = list(FORMATTERS.keys())

    try:
        step = load_frame_step(None if args.step is None else str(args.step))
    except ValueError as e:
        return _error(str(e))

    try:
        _status("Reading {}...".format(input_path.name))
        tier = _load_tier(args, input_path, step)
        _status("  xmin={} xmax={} points={}".format(tier.xmin, tier.xmax, tier.count))

        stem = input_path.stem
        saved_files: List[Path] = []
        for key in format_keys:
            formatter = FORMATTERS[key]()
            _status("  Running {} formatter...".format(formatter.name))
            for output in formatter.format(tier, step):
                saved_path = _save_output(output, stem, output_dir)
                saved_files.append(saved_path)
                _status("  Saved: {}".format(saved_path.name))
    except (PitchTierError, ValueError) as e:
        return _error(str(e))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect the parser without running
    a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="pitchtier_converter",
        description="Read Praat PitchTier files (short or long text form), resample "
                    "them to dense frames, and write PitchTier, CSV, or JSON output.",
    )

    parser.add_argument(
        "input_file",
        help="Path to a PitchTier text file (or a frames file with --from-frames).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--step",
        type=float,
        default=None,
        help="Frame step in seconds (default: PITCHTIER_FRAME_STEP or 0.01).",
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--from-frames",
        action="store_true",
        help="Treat the input as a frame track, one value per line (blank/NaN = unvoiced).",
    )

    parser.add_argument(
        "--xmin",
        type=float,
        default=0.0,
        help="Time of the first frame in seconds, with --from-frames (default: %(default)s).",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parser details to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
