#!/usr/bin/env python3
#
# module: font5.py
# dependencies: Pillow
#
# 5px bitmap font. Glyphs are small RGB images, white on black, pasted
# straight into the 128x32 canvas.

import logging

from PIL import Image

logger = logging.getLogger(__name__)

FONT_HEIGHT = 5
FONT_SHEET = "resources/Font-5px.png"

# char -> (x, y, w, h) in the sprite sheet
SHEET_LAYOUT = {
    ' ': (124, 0, 2, 5),
    '_': (124, 0, 1, 5),  # 1px space, used for the blinking clock separator
    '1': (0, 0, 1, 5),
    '2': (2, 0, 3, 5),
    '3': (6, 0, 3, 5),
    '4': (10, 0, 3, 5),
    '5': (14, 0, 3, 5),
    '6': (18, 0, 3, 5),
    '7': (22, 0, 3, 5),
    '8': (26, 0, 3, 5),
    '9': (30, 0, 3, 5),
    '0': (34, 0, 3, 5),
    ':': (38, 0, 1, 5),
    '.': (40, 0, 1, 5),
    'm': (42, 0, 5, 5),
    'f': (48, 0, 2, 5),
    't': (51, 0, 2, 5),
    '!': (54, 0, 1, 5),
    '?': (56, 0, 3, 5),
    'A': (0, 6, 3, 5),
    'B': (4, 6, 3, 5),
    'C': (8, 6, 3, 5),
    'D': (12, 6, 3, 5),
    'E': (16, 6, 3, 5),
    'F': (20, 6, 3, 5),
    'G': (24, 6, 3, 5),
    'H': (28, 6, 3, 5),
    'I': (32, 6, 1, 5),
    'J': (34, 6, 3, 5),
    'K': (38, 6, 3, 5),
    'L': (42, 6, 3, 5),
    'M': (46, 6, 5, 5),
    'N': (52, 6, 3, 5),
    'O': (56, 6, 3, 5),
    'P': (60, 6, 3, 5),
    'Q': (64, 6, 4, 5),
    'R': (69, 6, 3, 5),
    'S': (73, 6, 3, 5),
    'T': (77, 6, 3, 5),
    'U': (81, 6, 3, 5),
    'V': (85, 6, 3, 5),
    'W': (89, 6, 5, 5),
    'X': (95, 6, 3, 5),
    'Y': (99, 6, 3, 5),
    'Z': (103, 6, 3, 5),
    '(': (0, 12, 6, 6),
    ')': (7, 12, 6, 6),
    '[': (14, 12, 6, 6),
    ']': (21, 12, 6, 6),
}

# Same glyph widths as the sheet, drawn row by row ('#' = lit)
PATTERNS = {
    ' ': ["..", "..", "..", "..", ".."],
    '_': [".", ".", ".", ".", "."],
    '0': ["###", "#.#", "#.#", "#.#", "###"],
    '1': ["#", "#", "#", "#", "#"],
    '2': ["###", "..#", "###", "#..", "###"],
    '3': ["###", "..#", "###", "..#", "###"],
    '4': ["#.#", "#.#", "###", "..#", "..#"],
    '5': ["###", "#..", "###", "..#", "###"],
    '6': ["###", "#..", "###", "#.#", "###"],
    '7': ["###", "..#", "..#", "..#", "..#"],
    '8': ["###", "#.#", "###", "#.#", "###"],
    '9': ["###", "#.#", "###", "..#", "###"],
    ':': [".", "#", ".", "#", "."],
    '.': [".", ".", ".", ".", "#"],
    'm': [".....", "##.#.", "#.#.#", "#.#.#", "#.#.#"],
    'f': [".#", "#.", "##", "#.", "#."],
    't': ["#.", "##", "#.", "#.", ".#"],
    '!': ["#", "#", "#", ".", "#"],
    '?': ["###", "..#", ".##", "...", ".#."],
    'A': [".#.", "#.#", "###", "#.#", "#.#"],
    'B': ["##.", "#.#", "##.", "#.#", "##."],
    'C': [".##", "#..", "#..", "#..", ".##"],
    'D': ["##.", "#.#", "#.#", "#.#", "##."],
    'E': ["###", "#..", "##.", "#..", "###"],
    'F': ["###", "#..", "##.", "#..", "#.."],
    'G': [".##", "#..", "#.#", "#.#", ".##"],
    'H': ["#.#", "#.#", "###", "#.#", "#.#"],
    'I': ["#", "#", "#", "#", "#"],
    'J': ["..#", "..#", "..#", "#.#", ".#."],
    'K': ["#.#", "#.#", "##.", "#.#", "#.#"],
    'L': ["#..", "#..", "#..", "#..", "###"],
    'M': ["#...#", "##.##", "#.#.#", "#...#", "#...#"],
    'N': ["##.", "#.#", "#.#", "#.#", "#.#"],
    'O': [".#.", "#.#", "#.#", "#.#", ".#."],
    'P': ["##.", "#.#", "##.", "#..", "#.."],
    'Q': [".##.", "#..#", "#..#", "#.##", ".###"],
    'R': ["##.", "#.#", "##.", "#.#", "#.#"],
    'S': [".##", "#..", ".#.", "..#", "##."],
    'T': ["###", ".#.", ".#.", ".#.", ".#."],
    'U': ["#.#", "#.#", "#.#", "#.#", "###"],
    'V': ["#.#", "#.#", "#.#", "#.#", ".#."],
    'W': ["#...#", "#...#", "#.#.#", "##.##", "#...#"],
    'X': ["#.#", "#.#", ".#.", "#.#", "#.#"],
    'Y': ["#.#", "#.#", ".#.", ".#.", ".#."],
    'Z': ["###", "..#", ".#.", "#..", "###"],
}


def glyph_from_pattern(rows):
    width = len(rows[0])
    img = Image.new("RGB", (width, len(rows)), (0, 0, 0))
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell == "#":
                img.putpixel((x, y), (255, 255, 255))
    return img


class Font5:
    def __init__(self, faces):
        self.faces = dict(faces)

    @classmethod
    def builtin(cls):
        return cls({c: glyph_from_pattern(rows) for c, rows in PATTERNS.items()})

    @classmethod
    def from_sheet(cls, path=FONT_SHEET):
        """Cut glyphs out of the Font-5px.png sprite sheet."""
        with Image.open(path) as sheet:
            sheet = sheet.convert("RGB")
            faces = {c: sheet.crop((x, y, x + w, y + h)) for c, (x, y, w, h) in SHEET_LAYOUT.items()}
        return cls(faces)

    @classmethod
    def load(cls, path=FONT_SHEET):
        try:
            return cls.from_sheet(path)
        except OSError as e:
            logger.info(f"Font sheet {path} unavailable ({e}), using built-in glyphs")
            return cls.builtin()

    def glyph(self, char):
        return self.faces.get(char)

    def text_size(self, text):
        """(width, height) of text: every known glyph plus 1px spacing."""
        width = 0
        height = 0
        for c in text:
            face = self.glyph(c)
            if face is None:
                continue
            width += face.width + 1
            height = max(height, face.height)
        return width, height
