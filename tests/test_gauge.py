"""
Unit tests for the water level gauge
"""
from datetime import timedelta

from canvas import is_foreground, new_canvas
from conftest import T0
from gauge import GAUGE_REGION, WaterMarkGauge
from tide_model import Sample, TideModel

STEP = timedelta(minutes=15)


def model_with(heights):
    return TideModel.build([Sample(T0 + i * STEP, h) for i, h in enumerate(heights)], [])


class TestWaterMarkGauge:
    """Tests for the bar, notches and level mark."""

    def test_bar_and_notches(self):
        img = new_canvas()
        WaterMarkGauge(model_with([0.0, 0.5, 1.0]), GAUGE_REGION).paint(img, T0 + STEP)
        assert all(is_foreground(img, 18, y) for y in range(10, 32))
        assert is_foreground(img, 17, 10)
        assert is_foreground(img, 17, 31)
        assert not is_foreground(img, 18, 9)

    def test_mid_level_mark(self):
        gauge = WaterMarkGauge(model_with([0.0, 0.5, 1.0]))
        assert gauge.mark_position(T0 + STEP) == (17, 21)

    def test_high_water_mark_steps_off_top_notch(self):
        gauge = WaterMarkGauge(model_with([0.0, 0.5, 1.0]))
        assert gauge.mark_position(T0 + 2 * STEP) == (16, 10)

    def test_low_water_mark_steps_off_bottom_notch(self):
        gauge = WaterMarkGauge(model_with([0.0, 0.5, 1.0]))
        assert gauge.mark_position(T0) == (16, 31)

    def test_empty_model(self):
        """No data parks the mark beside the bottom notch."""
        img = new_canvas()
        gauge = WaterMarkGauge(TideModel.empty())
        gauge.paint(img, T0)
        assert gauge.mark_position(T0) == (16, 31)
        assert is_foreground(img, 16, 31)
