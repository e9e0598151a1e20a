#!/usr/bin/env python3
"""
Tide data model.

Details:
- TideModel turns raw height samples into a 0..1 curve against the session's
  high/low water marks and pins each high/low extreme to its nearest sample.
- TideWindow is the per-frame view starting 8 hours before "now".
- A model is rebuilt wholesale on every refresh and never edited afterwards.
"""

import enum
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from tidemath import normalize

logger = logging.getLogger(__name__)

# 107 columns of graph + 5 frames of lookahead
MIN_WINDOW_SAMPLES = 112
HISTORY = timedelta(hours=8)

# Below the 0..1 range so the gauge mark sits on the bottom notch
OFF_SCALE_HEIGHT = -10.0


@dataclass(frozen=True)
class Sample:
    timestamp: datetime
    height: float


@dataclass(frozen=True)
class ExtremeEvent:
    timestamp: datetime
    kind: str
    height: float


@dataclass(frozen=True)
class WaterMarks:
    high_water: float
    low_water: float


@dataclass(frozen=True)
class ExtremeMarker:
    """A high/low tide pinned to the index of its closest height sample."""
    series_index: int
    timestamp: datetime


class Freshness(enum.Enum):
    FRESH = "fresh"
    NEEDS_UPDATE = "needs_update"


def _as_utc(moment):
    if moment.tzinfo is None:
        # naive wall-clock time from the local zone
        moment = moment.astimezone()
    return moment.astimezone(timezone.utc)


def nearest_index(timestamps, target):
    """Index of the timestamp closest to target, or None for an empty series.

    Ties resolve to the earliest index. Naive times are read as local time.
    """
    if not timestamps:
        return None
    target = _as_utc(target)
    best_index = None
    best_delta = None
    for index, stamp in enumerate(timestamps):
        delta = abs((target - _as_utc(stamp)).total_seconds())
        if best_delta is None or delta < best_delta:
            best_index, best_delta = index, delta
    return best_index


def water_marks_for(samples):
    if not samples:
        return WaterMarks(high_water=0.0, low_water=0.0)
    heights = [s.height for s in samples]
    return WaterMarks(high_water=max(heights), low_water=min(heights))


class TideModel:
    def __init__(self, normalized_heights, timestamps, extremes, water_marks):
        if len(normalized_heights) != len(timestamps):
            raise ValueError("heights and timestamps must be index aligned")
        self.normalized_heights = tuple(normalized_heights)
        self.timestamps = tuple(timestamps)
        self.extremes = tuple(extremes)
        self.water_marks = water_marks

    @classmethod
    def build(cls, samples, extreme_events):
        samples = list(samples)
        marks = water_marks_for(samples)

        normalized = [normalize(s.height, marks.low_water, marks.high_water) for s in samples]
        timestamps = [_as_utc(s.timestamp) for s in samples]

        extremes = []
        for event in extreme_events:
            index = nearest_index(timestamps, event.timestamp)
            if index is not None:
                extremes.append(ExtremeMarker(series_index=index, timestamp=_as_utc(event.timestamp)))

        return cls(normalized, timestamps, extremes, marks)

    @classmethod
    def empty(cls):
        return cls.build([], [])

    def __len__(self):
        return len(self.normalized_heights)

    def date_range(self):
        if not self.timestamps:
            return None
        return self.timestamps[0], self.timestamps[-1]

    def current_normalized_height(self, now):
        index = nearest_index(self.timestamps, now)
        if index is None:
            return OFF_SCALE_HEIGHT
        return self.normalized_heights[index]

    def window(self, now):
        """Frame view anchored 8 hours before now, plus whether the data still covers it."""
        anchor = _as_utc(now) - HISTORY

        start = nearest_index(self.timestamps, anchor)
        if start is None:
            return TideWindow(self, 0), Freshness.NEEDS_UPDATE

        freshness = Freshness.FRESH
        if len(self) - start < MIN_WINDOW_SAMPLES:
            freshness = Freshness.NEEDS_UPDATE
        return TideWindow(self, start), freshness


class TideWindow:
    """Read-only view of a model from start_index to the end of the series."""

    def __init__(self, model, start_index):
        self._model = model
        self.start_index = start_index

    @property
    def normalized_heights(self):
        return self._model.normalized_heights[self.start_index:]

    @property
    def timestamps(self):
        return self._model.timestamps[self.start_index:]

    @property
    def water_marks(self):
        return self._model.water_marks

    def __len__(self):
        return len(self._model) - self.start_index

    def extremes(self):
        # absolute indices are kept; use index_in_window() for columns
        return [e for e in self._model.extremes if e.series_index >= self.start_index]

    def index_in_window(self, marker):
        return marker.series_index - self.start_index
