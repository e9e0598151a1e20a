"""
Unit tests for the interpolation helpers
"""
import pytest

from tidemath import clamp, inverse_lerp, lerp, normalize, round_half_away


class TestNormalize:
    """Tests for height normalization against the water marks."""

    @pytest.mark.parametrize("height", [-5.0, -1.2, 0.0, 0.3, 1.7, 2.5, 40.0])
    def test_result_in_unit_range(self, height):
        """Any height should normalize into [0, 1]."""
        assert 0.0 <= normalize(height, -1.2, 2.5) <= 1.0

    def test_low_water_is_zero(self):
        assert normalize(-1.2, -1.2, 2.5) == 0.0

    def test_high_water_is_one(self):
        assert normalize(2.5, -1.2, 2.5) == 1.0

    def test_midpoint(self):
        assert normalize(1.0, 0.0, 2.0) == pytest.approx(0.5)

    def test_out_of_range_saturates(self):
        """Heights outside the marks saturate instead of extrapolating."""
        assert normalize(10.0, 0.0, 2.0) == 1.0
        assert normalize(-10.0, 0.0, 2.0) == 0.0

    def test_equal_marks(self):
        """A single distinct height should not divide by zero."""
        assert normalize(1.5, 1.5, 1.5) == 0.0

    def test_reversed_marks_fail(self):
        with pytest.raises(ValueError):
            inverse_lerp(1.0, 2.0, 1.0)


class TestLerp:
    """Tests for pixel interpolation."""

    def test_endpoints(self):
        assert lerp(0.0, 0, 22) == 0
        assert lerp(1.0, 0, 22) == 22

    def test_clamps_t(self):
        assert lerp(-10.0, 0, 22) == 0
        assert lerp(3.0, 0, 22) == 22

    def test_rounds_half_away_from_zero(self):
        """0.5 * 5 = 2.5 rounds up, not to even."""
        assert lerp(0.5, 0, 5) == 3
        assert round_half_away(-2.5) == -3
        assert round_half_away(2.4) == 2

    def test_reversed_range(self):
        """Gauge interpolates from the bottom row up to the top row."""
        assert lerp(0.0, 31, 10) == 31
        assert lerp(1.0, 31, 10) == 10
        assert lerp(0.5, 31, 10) == 21

    def test_clamp(self):
        assert clamp(5, 0, 3) == 3
        assert clamp(-1, 0, 3) == 0
        with pytest.raises(ValueError):
            clamp(1, 3, 0)
