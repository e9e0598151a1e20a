#!/usr/bin/env python3
#
# module: tide_clock.py
# dependencies: Pillow, requests
#
# Main loop: one frame a second, refreshing the tide model whenever the
# current window runs out of samples.

import logging
import os
import sys
import time
from datetime import datetime

import requests

from config import ConfigError
from devices import open_device
from fetcher import fetch_tides, load_cached_tides
from font5 import Font5
from frame import paint_frame, render_message
from tide_model import Freshness, TideModel

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
FRAME_INTERVAL = 1.0
SPLASH_MESSAGES = [("HELLO!", 4), ("TIDE CLOCK", 5)]


class RefreshError(Exception):
    pass


def log_range(prefix, model, now):
    date_range = model.date_range()
    if date_range is None:
        logger.info(f"{prefix}: no tide samples (at {now:%Y-%m-%d %H:%M})")
    else:
        first, last = date_range
        logger.info(f"{prefix}: {first:%Y-%m-%d %H:%M} to {last:%Y-%m-%d %H:%M} (at {now:%Y-%m-%d %H:%M})")


class TideClock:
    def __init__(self, device, font, model=None, fetch=fetch_tides, clock=None, sleep=time.sleep):
        self.device = device
        self.font = font
        self.model = model if model is not None else TideModel.empty()
        self.fetch = fetch
        self.clock = clock or (lambda: datetime.now().astimezone())
        self.sleep = sleep
        self.retries = 0

    def splash(self, messages=SPLASH_MESSAGES):
        for text, seconds in messages:
            logger.info(text)
            self.device.render(render_message(text, self.font))
            self.sleep(seconds)

    def refresh(self, now):
        """Blocking fetch; the model is swapped only when it succeeds."""
        self.retries += 1
        if self.retries > MAX_RETRIES:
            raise RefreshError(f"Could not refresh tide data after {MAX_RETRIES} attempts")

        logger.info(f"Data needs update, loading api (attempt {self.retries})")
        try:
            response = self.fetch()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"!! Refresh failed: {e}")
            return False

        self.model = TideModel.build(response.samples, response.extremes)
        log_range("++ Loaded date range", self.model, now)
        return True

    def tick(self):
        now = self.clock()
        window, freshness = self.model.window(now)

        if freshness is Freshness.FRESH:
            self.retries = 0
        else:
            self.refresh(now)
            window, _ = self.model.window(now)

        self.device.render(paint_frame(self.font, self.model, window, now))

    def run(self, frames=None):
        count = 0
        while frames is None or count < frames:
            self.tick()
            count += 1
            self.sleep(FRAME_INTERVAL)


def main():
    logging.basicConfig(
        level=os.environ.get("TIDE_CLOCK_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cached = load_cached_tides()
    model = TideModel.build(cached.samples, cached.extremes)
    log_range("Found date range on disk", model, datetime.now().astimezone())

    clock = TideClock(open_device(), Font5.load(), model)
    clock.splash()
    try:
        clock.run()
    except (RefreshError, ConfigError) as e:
        logger.error(f"!! {e}. Shutting down")
        return 1
    except KeyboardInterrupt:
        logger.info("Stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
