#!/usr/bin/env python3
"""
Frame composition.

Required files:
- canvas.py, graph.py, labels.py, gauge.py
- font5.py (glyphs for every text on screen)

Details:
- paint_frame() lays out one full 128x32 frame: clock, high/low water
  marks, the tide graph with its labels and the water level gauge.
- render_message() draws a centred one-line message (startup splash).
"""

from datetime import datetime

from canvas import WIDTH, TextField, new_canvas
from gauge import GAUGE_REGION, WaterMarkGauge
from graph import GRAPH_REGION, GraphRenderer
from labels import LabelPlacer

MESSAGE_ROW = 13


def clock_text(local_time):
    # '_' is a 1px space, so the separator blinks every other second
    fmt = "%H:%M" if int(local_time.timestamp()) % 2 == 0 else "%H_%M"
    return local_time.strftime(fmt)


def paint_frame(font, model, window, now=None, tz=None):
    """Render one frame and return the finished canvas."""
    if now is None:
        now = datetime.now().astimezone()
    local_time = now.astimezone(tz)
    img = new_canvas()

    marks = window.water_marks
    TextField(clock_text(local_time), font, 0, 0).paint(img)
    TextField(f"{marks.high_water:.1f}m", font, 0, 8).paint(img)
    TextField(f"{marks.low_water:.1f}m", font, 0, 27).paint(img)

    # labels read the drawn waveform, keep this order
    GraphRenderer(window, GRAPH_REGION).paint(img, now)
    LabelPlacer(window, font, GRAPH_REGION, tz).paint(img)
    WaterMarkGauge(model, GAUGE_REGION).paint(img, now)
    return img


def render_message(text, font, img=None):
    if img is None:
        img = new_canvas()
    field = TextField(text, font, 0, MESSAGE_ROW)
    field.x = WIDTH // 2 - field.width // 2
    field.paint(img)
    return img
