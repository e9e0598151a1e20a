#!/usr/bin/env python3
#
# module: canvas.py
# dependencies: Pillow
#
# The 128x32 back buffer. Monochrome intent, stored as RGB so it can be
# saved as an image or pushed to the OLED unchanged.

from collections import namedtuple

from PIL import Image

WIDTH = 128
HEIGHT = 32

PIXEL_WHITE = (255, 255, 255)
PIXEL_BLACK = (0, 0, 0)

Region = namedtuple("Region", ["x", "y", "w", "h"])


def new_canvas():
    return Image.new("RGB", (WIDTH, HEIGHT), PIXEL_BLACK)


def in_bounds(x, y):
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def put_pixel(img, x, y, color):
    """Write one pixel; anything off the canvas is dropped."""
    if in_bounds(x, y):
        img.putpixel((x, y), color)


def is_foreground(img, x, y):
    # red channel carries the on/off intent
    return in_bounds(x, y) and img.getpixel((x, y))[0] != 0


class TextField:
    def __init__(self, text, font, x, y):
        self.font = font
        self.x = x
        self.y = y
        self.set_text(text)

    def set_text(self, text):
        self.text = text
        self.width, self.height = self.font.text_size(text)

    def paint(self, img):
        caret = 0
        for c in self.text:
            face = self.font.glyph(c)
            if face is None:
                continue
            # paste clips at the canvas edge
            img.paste(face, (self.x + caret, self.y))
            caret += face.width + 1
