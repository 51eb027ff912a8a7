"""Unit tests for configuration helpers."""

import pytest

from pitchtier_converter.config import (
    FILE_TYPE_LINE,
    KNOT_TOLERANCE_S,
    OBJECT_CLASS_LINE,
    load_frame_step,
)


class TestFormatConstants:
    def test_header_literals(self):
        assert FILE_TYPE_LINE == 'File type = "ooTextFile"'
        assert OBJECT_CLASS_LINE == 'Object class = "PitchTier"'

    def test_knot_tolerance(self):
        assert KNOT_TOLERANCE_S == 1e-7


class TestLoadFrameStep:
    def test_parses_value(self):
        assert load_frame_step("0.005") == 0.005

    @pytest.mark.parametrize("raw", ["0", "-0.01", "nan"])
    def test_rejects_non_positive(self, raw):
        with pytest.raises(ValueError):
            load_frame_step(raw)

    def test_rejects_garbage(self):
        with pytest.raises(ValueError) as exc_info:
            load_frame_step("ten ms")
        assert "ten ms" in str(exc_info.value)
