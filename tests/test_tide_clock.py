"""
Unit tests for the refresh / render loop
"""
from datetime import timedelta

import pytest
import requests

from conftest import T0
from fetcher import TideResponse
from tide_clock import MAX_RETRIES, RefreshError, TideClock
from tide_model import Sample, TideModel

STEP = timedelta(minutes=15)
NOW = T0 + timedelta(hours=10)


class RecordingDevice:
    def __init__(self):
        self.frames = []

    def render(self, buffer):
        self.frames.append(buffer)


def fresh_response(count=300):
    return TideResponse("Test", [Sample(T0 + i * STEP, float(i % 9)) for i in range(count)], [])


def make_clock(font, fetch, model=None):
    return TideClock(RecordingDevice(), font, model, fetch=fetch, clock=lambda: NOW, sleep=lambda s: None)


class TestTideClock:
    """Tests for refreshing and rendering frames."""

    def test_fresh_model_no_fetch(self, font):
        calls = []
        response = fresh_response()
        model = TideModel.build(response.samples, response.extremes)
        clock = make_clock(font, lambda: calls.append(1), model)
        clock.run(frames=3)
        assert calls == []
        assert len(clock.device.frames) == 3
        assert clock.retries == 0

    def test_empty_model_refreshes_then_renders(self, font):
        calls = []

        def fetch():
            calls.append(1)
            return fresh_response()

        clock = make_clock(font, fetch)
        clock.tick()
        assert calls == [1]
        assert len(clock.model) == 300
        assert len(clock.device.frames) == 1
        clock.tick()
        assert calls == [1]
        assert clock.retries == 0

    def test_failed_fetch_keeps_old_model(self, font):
        def fetch():
            raise requests.ConnectionError("down")

        clock = make_clock(font, fetch)
        clock.tick()
        assert len(clock.model) == 0
        assert clock.retries == 1
        assert len(clock.device.frames) == 1

    def test_gives_up_after_max_retries(self, font):
        def fetch():
            raise requests.ConnectionError("down")

        clock = make_clock(font, fetch)
        for _ in range(MAX_RETRIES):
            clock.tick()
        with pytest.raises(RefreshError):
            clock.tick()

    def test_stale_refresh_counts_as_retry(self, font):
        """Fetched data that still cannot fill the graph keeps counting."""
        clock = make_clock(font, lambda: fresh_response(count=20))
        for _ in range(MAX_RETRIES):
            clock.tick()
        with pytest.raises(RefreshError):
            clock.tick()

    def test_splash(self, font):
        clock = make_clock(font, fresh_response)
        clock.splash([("HI", 1), ("THERE", 1)])
        assert len(clock.device.frames) == 2
