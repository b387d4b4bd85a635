"""Color values produced by effects: RGB tuples, HSL triples, and shading."""

import colorsys
from typing import NamedTuple

# Type alias for RGB tuples
Color = tuple[int, int, int]


class Hsl(NamedTuple):
    """HSL triple. h is in degrees (wraps at 360), s and l are 0-1."""

    h: float
    s: float
    l: float

    def to_rgb(self) -> Color:
        r, g, b = colorsys.hls_to_rgb((self.h / 360.0) % 1.0, self.l, self.s)
        return (round(r * 255), round(g * 255), round(b * 255))


def hex_color(color: int) -> Color:
    """Convert 0xRRGGBB integer to (R, G, B) tuple."""
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def to_rgb(color: Color | Hsl) -> Color:
    if isinstance(color, Hsl):
        return color.to_rgb()
    return color


def lerp(a: Color, b: Color, k: float) -> Color:
    """Per-channel linear interpolation. k is not clamped, so channels can leave 0-255."""
    return (
        round(a[0] + (b[0] - a[0]) * k),
        round(a[1] + (b[1] - a[1]) * k),
        round(a[2] + (b[2] - a[2]) * k),
    )


def clamp_channel(v: float) -> int:
    return max(0, min(255, int(v)))


def shade(color: Color | Hsl, activation: float | None = None) -> Color:
    """Final on-screen RGB for a cell: color scaled by activation, clamped to 0-255.

    A missing activation means fully lit.
    """
    r, g, b = to_rgb(color)
    if activation is None:
        return (clamp_channel(r), clamp_channel(g), clamp_channel(b))
    return (clamp_channel(r * activation), clamp_channel(g * activation), clamp_channel(b * activation))
