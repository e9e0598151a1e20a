#!/usr/bin/env python3
#
# module: gauge.py
# dependencies: Pillow (via canvas)

from canvas import PIXEL_WHITE, Region, put_pixel
from tidemath import lerp

GAUGE_REGION = Region(x=17, y=10, w=2, h=22)


class WaterMarkGauge:
    """Vertical bar left of the graph with a mark at the current water level."""

    def __init__(self, model, region=GAUGE_REGION):
        self.model = model
        self.region = region

    @property
    def top_row(self):
        return self.region.y

    @property
    def bottom_row(self):
        return self.region.y + self.region.h - 1

    def mark_position(self, now):
        r = self.region
        t = self.model.current_normalized_height(now)
        mark_y = lerp(t, self.bottom_row, self.top_row)
        # step off the notch so the mark stays visible
        if mark_y in (self.top_row, self.bottom_row):
            return r.x - 1, mark_y
        return r.x, mark_y

    def paint(self, img, now):
        r = self.region
        put_pixel(img, r.x, self.top_row, PIXEL_WHITE)
        put_pixel(img, r.x, self.bottom_row, PIXEL_WHITE)

        for row in range(r.h):
            put_pixel(img, r.x + 1, r.y + row, PIXEL_WHITE)

        mark_x, mark_y = self.mark_position(now)
        put_pixel(img, mark_x, mark_y, PIXEL_WHITE)
