"""
Shared fixtures for the tide clock tests.
"""
from datetime import datetime, timedelta, timezone

import pytest

from font5 import Font5
from tide_model import ExtremeEvent, Sample

T0 = datetime(2020, 9, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def font():
    return Font5.builtin()


@pytest.fixture
def make_samples():
    """Build evenly spaced samples from a list of heights."""
    def _make(heights, start=T0, step=timedelta(minutes=15)):
        return [Sample(start + i * step, h) for i, h in enumerate(heights)]
    return _make


@pytest.fixture
def make_extreme():
    def _make(when, kind="High", height=1.0):
        return ExtremeEvent(when, kind, height)
    return _make
