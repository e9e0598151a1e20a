#!/usr/bin/env python3
#
# module: labels.py
# dependencies: Pillow (via canvas)
#
# High/low time labels above the graph. Each label gets an underline and a
# descender dropping towards the waveform, so this has to run after the
# waveform has been drawn: the descender length is read back from the canvas.

from canvas import HEIGHT, PIXEL_WHITE, WIDTH, TextField, is_foreground, put_pixel
from graph import GRAPH_REGION

LABEL_FORMAT = "%H:%M"
LABEL_ROW = 0


def highest_foreground_row(img, x):
    """Top of the lit run starting at the bottom row of column x (HEIGHT if unlit)."""
    top = HEIGHT
    for y in range(HEIGHT - 1, -1, -1):
        if not is_foreground(img, x, y):
            break
        top = y
    return top


class ExtremeLabel:
    def __init__(self, font, marker, column, tz=None):
        local_time = marker.timestamp.astimezone(tz)
        self.text_field = TextField(local_time.strftime(LABEL_FORMAT), font, column, LABEL_ROW)

    @property
    def underline_row(self):
        tf = self.text_field
        return tf.y + tf.height + 2

    def paint(self, img):
        tf = self.text_field
        tf.paint(img)

        baseline = self.underline_row
        for i in range(tf.width - 1):
            put_pixel(img, tf.x + i, baseline, PIXEL_WHITE)

        x = tf.x
        if not 0 <= x < WIDTH:
            return
        # two blank rows above the wave; an empty range draws nothing
        top = highest_foreground_row(img, x)
        for y in range(baseline, top - 2):
            put_pixel(img, x, y, PIXEL_WHITE)


class LabelPlacer:
    def __init__(self, window, font, region=GRAPH_REGION, tz=None):
        self.window = window
        self.font = font
        self.region = region
        self.tz = tz

    def labels(self):
        return [
            ExtremeLabel(self.font, marker, self.region.x + self.window.index_in_window(marker), self.tz)
            for marker in self.window.extremes()
        ]

    def paint(self, img):
        for label in self.labels():
            label.paint(img)
