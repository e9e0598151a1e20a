#!/usr/bin/env python3
"""
Tide waveform renderer.

Details:
- Draws the window's normalized heights as a solid silhouette (filled below
  the curve) inside a region of the canvas.
- Draws a dashed play head at the sample nearest to "now".
- Erodes the silhouette left of the play head with a fixed 3x3 mask so the
  past looks worn away. This is a purely local per-pixel test, not a fill.
"""

from canvas import HEIGHT, PIXEL_BLACK, PIXEL_WHITE, Region, WIDTH, put_pixel
from tide_model import nearest_index
from tidemath import lerp

GRAPH_REGION = Region(x=21, y=10, w=107, h=22)

# 0 | 1 | 0
# 1 | 1 | 1
# 1 | 1 | 1
EROSION_MASK = (0, 1, 0, 1, 1, 1, 1, 1, 1)


def is_filled(heights, region_height, x, y):
    """True when (x, y) of the region lies on or under the curve.

    Columns outside the series count as filled so the series edges never erode.
    """
    if x < 0 or x >= len(heights):
        return True
    wave_row = region_height - lerp(heights[x], 0, region_height)
    return y >= wave_row


def kernel_at(heights, region_height, x, y):
    return tuple(
        int(is_filled(heights, region_height, x + dx, y + dy))
        for dy in (-1, 0, 1)
        for dx in (-1, 0, 1)
    )


def should_erase(kernel, mask=EROSION_MASK):
    """Erase unless every lit position of the mask is lit in the kernel too."""
    for k, m in zip(kernel, mask):
        if m and not k:
            return True
    return False


class GraphRenderer:
    def __init__(self, window, region=GRAPH_REGION):
        self.window = window
        self.region = region

    def paint(self, img, now):
        heights = self.window.normalized_heights
        self.paint_waveform(img, heights)
        play_head = self.paint_play_head(img, now)
        if play_head is not None:
            self.erase_past(img, heights, play_head)
        return play_head

    def paint_waveform(self, img, heights):
        r = self.region
        for col in range(r.w):
            for row in range(r.h):
                color = PIXEL_WHITE if is_filled(heights, r.h, col, row) else PIXEL_BLACK
                put_pixel(img, r.x + col, r.y + row, color)

    def paint_play_head(self, img, now):
        """Dashed line over the whole canvas height; returns the column in the window."""
        index = nearest_index(self.window.timestamps, now)
        if index is None:
            return None
        x = self.region.x + index
        if x < WIDTH:
            for y in range(HEIGHT):
                put_pixel(img, x, y, PIXEL_WHITE if y % 2 == 0 else PIXEL_BLACK)
        return index

    def erase_past(self, img, heights, play_head):
        r = self.region
        for col in range(min(play_head, r.w)):
            for row in range(r.h):
                if not should_erase(kernel_at(heights, r.h, col, row)):
                    continue
                put_pixel(img, r.x + col, r.y + row, PIXEL_BLACK)
