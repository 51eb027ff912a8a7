"""Unit tests for the short-form PitchTier writer.

WHY: Whatever we write has to open in Praat and read back to the same
tier; a stray index line or a locale-formatted number breaks both.

HOW: Compares dump_pitch_tier() output line by line and round-trips it
through the parser. File tests use tmp_path.
"""

import io
import math

import pytest

from pitchtier_converter.core.errors import IoError
from pitchtier_converter.core.ir import ControlPoint, PitchTier
from pitchtier_converter.core.parser import parse_pitch_tier_text, read_pitch_tier
from pitchtier_converter.core.serializer import (
    dump_pitch_tier,
    save_pitch_tier,
    write_pitch_tier,
)


class TestDump:
    def test_exact_output(self, sample_tier):
        assert dump_pitch_tier(sample_tier).splitlines() == [
            'File type = "ooTextFile"',
            'Object class = "PitchTier"',
            "",
            "0.0",
            "2.5",
            "3",
            "0.5",
            "120.0",
            "1.5",
            "180.0",
            "2.0",
            "150.0",
        ]

    def test_empty_tier(self):
        text = dump_pitch_tier(PitchTier(0.0, 1.0))
        assert text.splitlines()[3:] == ["0.0", "1.0", "0"]
        assert text.endswith("\n")

    def test_long_form_input_is_normalized(self, long_form_text, short_form_text):
        tier = parse_pitch_tier_text(long_form_text)
        text = dump_pitch_tier(tier)
        assert "points [" not in text
        assert "=" not in text.splitlines()[3]
        assert parse_pitch_tier_text(text) == parse_pitch_tier_text(short_form_text)

    def test_small_values_round_trip(self):
        tier = PitchTier(0.0, 1e-5, [ControlPoint(1e-6, 87.123456789012)])
        assert parse_pitch_tier_text(dump_pitch_tier(tier)) == tier


class TestRoundTrip:
    def test_from_frames_round_trip(self):
        frames = [math.nan, 101.5, 102.25, math.nan, 99.0, 98.75, math.nan]
        tier = PitchTier.from_frames(0.013, frames, 0.01)
        assert parse_pitch_tier_text(dump_pitch_tier(tier)) == tier

    def test_save_and_read(self, tmp_path, sample_tier):
        path = save_pitch_tier(sample_tier, tmp_path / "out.PitchTier")
        assert path.read_text(encoding="utf-8") == dump_pitch_tier(sample_tier)
        assert read_pitch_tier(path) == sample_tier


class TestSinkHandling:
    def test_sink_flushed_not_closed(self, sample_tier):
        sink = io.StringIO()
        write_pitch_tier(sample_tier, sink)
        assert not sink.closed
        assert sink.getvalue().startswith('File type = "ooTextFile"\n')

    def test_write_failure_raises_io_error(self, sample_tier):
        class FullDisk(io.StringIO):
            def write(self, s):
                raise OSError("No space left on device")

        with pytest.raises(IoError) as exc_info:
            write_pitch_tier(sample_tier, FullDisk())
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_flush_runs_on_error(self, sample_tier):
        flushed = []

        class FailingSink(io.StringIO):
            def write(self, s):
                raise OSError("broken pipe")

            def flush(self):
                flushed.append(True)

        with pytest.raises(IoError):
            write_pitch_tier(sample_tier, FailingSink())
        assert flushed

    def test_closed_sink_raises_io_error(self, sample_tier):
        sink = io.StringIO()
        sink.close()
        with pytest.raises(IoError) as exc_info:
            write_pitch_tier(sample_tier, sink)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unwritable_path(self, tmp_path, sample_tier):
        with pytest.raises(IoError):
            save_pitch_tier(sample_tier, tmp_path / "missing-dir" / "out.PitchTier")
