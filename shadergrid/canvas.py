"""RGB pixel buffer, one pixel per grid cell, that sampled frames are painted into."""

import numpy as np

from shadergrid.color import Color, shade
from shadergrid.sampler import Grid

# 3x5 bitmap font for the effect-name overlay: digits, uppercase letters, '#'
# Each char is 3 pixels wide, 5 pixels tall, stored as 5 rows of 3-bit bitmaps
_FONT_3X5 = {
    ' ': [0b000, 0b000, 0b000, 0b000, 0b000],
    '#': [0b101, 0b111, 0b101, 0b111, 0b101],
    '0': [0b111, 0b101, 0b101, 0b101, 0b111],
    '1': [0b010, 0b110, 0b010, 0b010, 0b111],
    '2': [0b111, 0b001, 0b111, 0b100, 0b111],
    '3': [0b111, 0b001, 0b111, 0b001, 0b111],
    '4': [0b101, 0b101, 0b111, 0b001, 0b001],
    '5': [0b111, 0b100, 0b111, 0b001, 0b111],
    '6': [0b111, 0b100, 0b111, 0b101, 0b111],
    '7': [0b111, 0b001, 0b010, 0b010, 0b010],
    '8': [0b111, 0b101, 0b111, 0b101, 0b111],
    '9': [0b111, 0b101, 0b111, 0b001, 0b111],
    'A': [0b010, 0b101, 0b111, 0b101, 0b101],
    'B': [0b110, 0b101, 0b110, 0b101, 0b110],
    'C': [0b011, 0b100, 0b100, 0b100, 0b011],
    'D': [0b110, 0b101, 0b101, 0b101, 0b110],
    'E': [0b111, 0b100, 0b110, 0b100, 0b111],
    'F': [0b111, 0b100, 0b110, 0b100, 0b100],
    'G': [0b011, 0b100, 0b101, 0b101, 0b011],
    'H': [0b101, 0b101, 0b111, 0b101, 0b101],
    'I': [0b111, 0b010, 0b010, 0b010, 0b111],
    'J': [0b001, 0b001, 0b001, 0b101, 0b010],
    'K': [0b101, 0b110, 0b100, 0b110, 0b101],
    'L': [0b100, 0b100, 0b100, 0b100, 0b111],
    'M': [0b101, 0b111, 0b111, 0b101, 0b101],
    'N': [0b101, 0b111, 0b111, 0b111, 0b101],
    'O': [0b010, 0b101, 0b101, 0b101, 0b010],
    'P': [0b110, 0b101, 0b110, 0b100, 0b100],
    'Q': [0b010, 0b101, 0b101, 0b111, 0b011],
    'R': [0b110, 0b101, 0b110, 0b101, 0b101],
    'S': [0b011, 0b100, 0b010, 0b001, 0b110],
    'T': [0b111, 0b010, 0b010, 0b010, 0b010],
    'U': [0b101, 0b101, 0b101, 0b101, 0b111],
    'V': [0b101, 0b101, 0b101, 0b101, 0b010],
    'W': [0b101, 0b101, 0b111, 0b111, 0b101],
    'X': [0b101, 0b101, 0b010, 0b101, 0b101],
    'Y': [0b101, 0b101, 0b010, 0b010, 0b010],
    'Z': [0b111, 0b001, 0b010, 0b100, 0b111],
}

GLYPH_WIDTH = 3
GLYPH_HEIGHT = 5


def text_width(string: str, spacing: int = 1) -> int:
    return max(0, len(string) * (GLYPH_WIDTH + spacing) - spacing)


class Canvas:
    """RGB pixel buffer sized to the shader grid.

    Pixels are stored as a flat bytearray in RGB order: [R0,G0,B0, R1,G1,B1, ...]
    Row-major: pixel (x, y) is at index (y * width + x) * 3.
    """

    def __init__(self, width: int, height: int):
        self.width = 0
        self.height = 0
        self.buffer = bytearray()
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Reallocate for new grid dimensions. Contents are cleared."""
        if width < 0 or height < 0:
            raise ValueError(f"canvas dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.buffer = bytearray(width * height * 3)

    def set(self, x: int, y: int, color: Color) -> None:
        """Set a single pixel. Out-of-bounds writes are silently ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            idx = (y * self.width + x) * 3
            self.buffer[idx:idx + 3] = bytes(color)

    def get(self, x: int, y: int) -> Color:
        """Get a pixel's color. Returns (0,0,0) for out-of-bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            idx = (y * self.width + x) * 3
            return (self.buffer[idx], self.buffer[idx + 1], self.buffer[idx + 2])
        return (0, 0, 0)

    def paint(self, grid: Grid) -> None:
        """Paint a sampled frame. Each cell becomes its color scaled by its activation."""
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                self.set(x, y, shade(cell.color, cell.activation))

    def rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """Fill a rectangle, clipped to the canvas."""
        for py in range(y, y + h):
            for px in range(x, x + w):
                self.set(px, py, color)

    def text(self, x: int, y: int, string: str, color: Color, spacing: int = 1) -> None:
        """Draw text using built-in 3x5 pixel font. Uppercase only."""
        cursor_x = x
        for ch in string.upper():
            glyph = _FONT_3X5.get(ch)
            if glyph is None:
                cursor_x += GLYPH_WIDTH + spacing
                continue
            for row_idx, row_bits in enumerate(glyph):
                for col in range(GLYPH_WIDTH):
                    if row_bits & (1 << (GLYPH_WIDTH - 1 - col)):
                        self.set(cursor_x + col, y + row_idx, color)
            cursor_x += GLYPH_WIDTH + spacing

    def label(self, string: str, color: Color, background: Color = (0, 0, 0)) -> None:
        """Draw a centered one-line banner, as shown when the effect changes."""
        y = (self.height - GLYPH_HEIGHT) // 2
        self.rect(0, y - 2, self.width, GLYPH_HEIGHT + 4, background)
        x = max(0, (self.width - text_width(string)) // 2)
        self.text(x, y, string, color)

    def to_array(self) -> np.ndarray:
        """Pixels as a (height, width, 3) uint8 array. Shares memory with the buffer."""
        return np.frombuffer(self.buffer, dtype=np.uint8).reshape(self.height, self.width, 3)
