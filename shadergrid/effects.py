"""The effect set - per-cell shader functions of (x, y, t) and their registry.

Each effect maps a cell position and the elapsed time in seconds to a
RenderSample. Activation is a brightness multiplier; None means fully lit.
Values outside 0-1 are intentional (under/over-driven cells).
"""

import math
import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, NamedTuple

from shadergrid.color import Color, Hsl, hex_color, lerp

# --- Colors ---
WHITE = hex_color(0xFFFFFF)
BACKGROUND = hex_color(0x333333)
PURPLE = hex_color(0x8D1BD2)
SKY = hex_color(0x3FBFF6)
ROSE = hex_color(0xF63F9C)
DEEP_BLUE = hex_color(0x1B2FD2)
RED = 0xFF0000

# Square outline: origin (1, 1), 12 x 5 cells
SQUARE_ORIGIN = (1, 1)
SQUARE_EXTENT = (12, 5)


class RenderSample(NamedTuple):
    color: Color | Hsl
    activation: float | None = None


ShaderFn = Callable[[int, int, float], RenderSample]


@dataclass(frozen=True)
class Effect:
    """A registered shader. Stochastic effects may return different output for the same input."""

    key: str
    name: str
    fn: ShaderFn
    stochastic: bool = False

    def __call__(self, x: int, y: int, t: float) -> RenderSample:
        return self.fn(x, y, t)


def clamp(v: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, v))


def _on_rect_edge(x: int, y: int, origin: tuple[int, int], extent: tuple[int, int]) -> bool:
    ox, oy = origin
    right = ox + extent[0] - 1
    bottom = oy + extent[1] - 1
    if not (ox <= x <= right and oy <= y <= bottom):
        return False
    return x in (ox, right) or y in (oy, bottom)


def _checker(x: int, y: int, offset: float) -> bool:
    h = (x + offset) % 10 >= 5
    v = (y + offset) % 10 >= 5
    return h != v


def gradient(x: int, y: int, t: float) -> RenderSample:
    return RenderSample(Hsl(((x + y + t * 10) / 53) % 1.0 * 360, 1.0, 0.5))


def gradient_fast(x: int, y: int, t: float) -> RenderSample:
    return RenderSample(Hsl(((x + y + t * 100) / 100) % 1.0 * 360, 1.0, 0.5))


def gradient_monochrome(x: int, y: int, t: float) -> RenderSample:
    return RenderSample(WHITE, ((x - y + t * 10) / 53) % 1.0)


def gradient_monochrome2(x: int, y: int, t: float) -> RenderSample:
    # Triangle wave: 0 -> 100 -> 0 across a 200 unit period
    position = ((x - y + t * 10) / 53 * 100) % 200
    luminance = 200 - position if position > 100 else position
    return RenderSample(WHITE, luminance / 100)


def pink(x: int, y: int, t: float) -> RenderSample:
    position = ((x + y + t * 10) / 53 * 100) % 100
    luminance = 100 - position if position > 50 else position
    return RenderSample(Hsl(309, 1.0, (luminance + 20) / 100))


def square(x: int, y: int, t: float) -> RenderSample:
    return RenderSample(PURPLE if _on_rect_edge(x, y, SQUARE_ORIGIN, SQUARE_EXTENT) else BACKGROUND)


def checkered(x: int, y: int, t: float) -> RenderSample:
    return RenderSample(WHITE if _checker(x, y, t) else BACKGROUND)


def checkered_fast(x: int, y: int, t: float) -> RenderSample:
    return RenderSample(WHITE if _checker(x, y, t * 20) else BACKGROUND)


def checkered_rainbow_fast(x: int, y: int, t: float) -> RenderSample:
    color = Hsl(((x - y + t * 10) / 100) % 1.0 * 360, 0.9, 0.7)
    # Dim rather than off between squares
    return RenderSample(color, 1.0 if _checker(x, y, t * 10) else 0.3)


def sweep(x: int, y: int, t: float) -> RenderSample:
    h = (x + y) % 20
    tm = (t * 12) % 20
    # Same band seen from the left: tm near 19 is tm2 near -1, one cell away from h = 0
    tm2 = tm - 20
    tm_activation = clamp(1 - abs(h - tm))
    tm2_activation = clamp(1 - abs(h - tm2))
    return RenderSample(SKY, 0.5 + max(tm_activation, tm2_activation))


def sin(x: int, y: int, t: float) -> RenderSample:
    target = (math.sin((x + t * 6) / 6) + 1) * 8 + 8
    return RenderSample(lerp(SKY, ROSE, x / 40), 0.5 + clamp(1 - abs(y - target)))


def rain(x: int, y: int, t: float) -> RenderSample:
    # tan() spikes near its asymptotes; the flashes are part of the look
    activation = 0.5 + math.tan(2 * (0.7529592 * x + 0.458018 * y) - t)
    return RenderSample(lerp(SKY, DEEP_BLUE, y / 20), activation)


def waves(x: int, y: int, t: float) -> RenderSample:
    activation = 0.5 + math.tan((0.7529592 * x + 0.458018 * y) / 5 - t)
    return RenderSample(lerp(SKY, PURPLE, x / 40), activation)


def rgb(x: int, y: int, t: float) -> RenderSample:
    return RenderSample(hex_color(RED >> (8 * (x % 3))), 0.9 + random.random() * 0.5)


DEFAULT_KEY = "d"

_EFFECTS = (
    Effect("q", "gradient", gradient),
    Effect("w", "gradient fast", gradient_fast),
    Effect("e", "gradient monochrome", gradient_monochrome),
    Effect("r", "gradient monochrome 2", gradient_monochrome2),
    Effect("t", "pink", pink),
    Effect("y", "square", square),
    Effect("u", "checkered", checkered),
    Effect("i", "checkered fast", checkered_fast),
    Effect("o", "checkered rainbow fast", checkered_rainbow_fast),
    Effect("p", "sweep", sweep),
    Effect("a", "sin", sin),
    Effect("s", "rain", rain),
    Effect("d", "waves", waves),
    Effect("f", "rgb", rgb, stochastic=True),
)

EFFECTS = MappingProxyType({effect.key: effect for effect in _EFFECTS})


def get_effect(key: str) -> Effect | None:
    return EFFECTS.get(key)


def default_effect() -> Effect:
    return EFFECTS[DEFAULT_KEY]
