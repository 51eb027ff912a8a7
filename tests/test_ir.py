"""Unit tests for the PitchTier model.

WHY: Equality and hashing are what the round-trip and regression tests
rely on; count drifting from the real number of points would corrupt every
file we write.

HOW: Builds tiers directly and via from_frames() and compares them.
"""

import dataclasses
import math

import pytest

from pitchtier_converter.core.ir import ControlPoint, PitchTier


class TestControlPoint:
    def test_equal_when_fields_equal(self):
        assert ControlPoint(0.5, 120.0) == ControlPoint(0.5, 120.0)

    def test_no_epsilon(self):
        assert ControlPoint(0.5, 120.0) != ControlPoint(0.5, 120.0 + 1e-12)

    def test_is_immutable(self):
        point = ControlPoint(0.5, 120.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.time = 1.0

    def test_hashable(self):
        assert len({ControlPoint(0.5, 120.0), ControlPoint(0.5, 120.0)}) == 1


class TestPitchTierModel:
    def test_count_follows_points(self, sample_tier):
        assert sample_tier.count == 3
        assert sample_tier.count == len(sample_tier.points)

    def test_points_stored_as_tuple(self):
        tier = PitchTier(0.0, 1.0, [ControlPoint(0.5, 100.0)])
        assert isinstance(tier.points, tuple)

    def test_empty_tier(self):
        tier = PitchTier(0.0, 1.0)
        assert tier.count == 0
        assert tier.points == ()


class TestPitchTierEquality:
    def test_equal_tiers(self, sample_tier):
        other = PitchTier(0.0, 2.5, [ControlPoint(0.5, 120.0), ControlPoint(1.5, 180.0), ControlPoint(2.0, 150.0)])
        assert sample_tier == other
        assert hash(sample_tier) == hash(other)

    def test_different_span(self, sample_tier):
        other = PitchTier(0.0, 3.0, sample_tier.points)
        assert sample_tier != other

    def test_different_point_order(self, sample_tier):
        other = PitchTier(0.0, 2.5, tuple(reversed(sample_tier.points)))
        assert sample_tier != other

    def test_different_point_count(self, sample_tier):
        other = PitchTier(0.0, 2.5, sample_tier.points[:2])
        assert sample_tier != other

    def test_not_equal_to_other_types(self, sample_tier):
        assert sample_tier != "PitchTier"

    def test_fractional_span_hashes(self):
        # 0.25 + 0.5 is not an integer; hashing must not depend on that.
        tier = PitchTier(0.25, 0.5, [ControlPoint(0.3, 110.0)])
        assert hash(tier) == hash(PitchTier(0.25, 0.5, [ControlPoint(0.3, 110.0)]))

    def test_from_frames_equals_direct_construction(self):
        tier = PitchTier.from_frames(0.0, [math.nan, 5.0, math.nan, 7.0], 1.0)
        direct = PitchTier(0.0, 3.0, [ControlPoint(1.0, 5.0), ControlPoint(3.0, 7.0)])
        assert tier == direct


class TestImportFrames:
    def test_skips_nan(self):
        tier = PitchTier.from_frames(0.0, [math.nan, 5.0, math.nan, 7.0], 1.0)
        assert tier.points == (ControlPoint(1.0, 5.0), ControlPoint(3.0, 7.0))
        assert tier.xmax == 3.0
        assert tier.count == 2

    def test_all_nan_gives_empty_tier(self):
        tier = PitchTier.from_frames(0.5, [math.nan, math.nan], 0.25)
        assert tier.count == 0
        assert tier.xmin == 0.5
        assert tier.xmax == 0.75

    def test_import_replaces_points(self, sample_tier):
        sample_tier.import_frames([200.0, math.nan, 210.0], 0.5)
        assert sample_tier.points == (ControlPoint(0.0, 200.0), ControlPoint(1.0, 210.0))
        assert sample_tier.count == 2
        assert sample_tier.xmax == 2.5

    def test_times_use_xmin_offset(self):
        tier = PitchTier.from_frames(1.0, [100.0, 110.0], 0.25)
        assert [p.time for p in tier.points] == [1.0, 1.25]
        assert tier.xmax == 1.25
