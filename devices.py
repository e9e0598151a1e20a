#!/usr/bin/env python3
#
# module: devices.py
# dependencies: Pillow; adafruit-circuitpython-ssd1305 + adafruit-blinka on the Pi
#
# Render sinks. Anything with render(buffer) can take a finished frame.

import logging
import os
from abc import ABC, abstractmethod

from canvas import HEIGHT, WIDTH

logger = logging.getLogger(__name__)

OUTPUT_FILE = "resources/display.bmp"


class RenderDevice(ABC):
    @abstractmethod
    def render(self, buffer):
        """Take one finished 128x32 frame."""


class ImageWriter(RenderDevice):
    """Saves every frame to disk, handy when running away from the hardware."""

    def __init__(self, path=OUTPUT_FILE):
        self.path = path

    def render(self, buffer):
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        buffer.save(self.path)


def to_monochrome(buffer):
    # any lit red channel is an "on" pixel
    return buffer.getchannel("R").point(lambda v: 255 if v else 0, mode="1")


class Ssd1305Display(RenderDevice):
    """128x32 SSD1305 OLED on SPI0 (DC on BCM 24, reset on BCM 25)."""

    def __init__(self):
        # hardware libraries only exist on the Pi
        import board
        import digitalio
        import adafruit_ssd1305

        dc = digitalio.DigitalInOut(board.D24)
        rst = digitalio.DigitalInOut(board.D25)
        cs = digitalio.DigitalInOut(board.CE0)
        self.oled = adafruit_ssd1305.SSD1305_SPI(WIDTH, HEIGHT, board.SPI(), dc, rst, cs)
        self.oled.fill(0)
        self.oled.show()
        logger.info("Initialized SSD1305 display")

    def render(self, buffer):
        self.oled.image(to_monochrome(buffer))
        self.oled.show()


def open_device(kind=None, output=None):
    kind = kind or os.environ.get("TIDE_CLOCK_DEVICE", "file")
    if kind == "ssd1305":
        return Ssd1305Display()
    if kind == "file":
        return ImageWriter(output or os.environ.get("TIDE_CLOCK_OUTPUT", OUTPUT_FILE))
    raise ValueError(f"Unknown render device: {kind}")
