import math

import pytest

from shadergrid import effects
from shadergrid.color import Hsl
from shadergrid.effects import (
    BACKGROUND, EFFECTS, PURPLE, ROSE, SKY, DEEP_BLUE, WHITE, RenderSample,
    checkered, checkered_rainbow_fast, get_effect, gradient, gradient_monochrome,
    gradient_monochrome2, pink, rain, rgb, sin, square, sweep, waves,
)

COORDS = [(0, 0), (3, 7), (26, 27), (39, 1), (12, 5)]
TIMES = [0.0, 0.25, 1.0, 7.3]


@pytest.mark.parametrize("key", [k for k, e in EFFECTS.items() if not e.stochastic])
def test_deterministic_effects_repeat(key):
    effect = EFFECTS[key]
    for x, y in COORDS:
        for t in TIMES:
            assert effect(x, y, t) == effect(x, y, t)


@pytest.mark.parametrize("key", list(EFFECTS))
def test_effects_are_total(key):
    effect = EFFECTS[key]
    for x, y in [(-3, -7), (-1, 0), (1000, 2000)]:
        result = effect(x, y, 123.456)
        assert isinstance(result, RenderSample)


def test_registry_has_fourteen_single_char_keys():
    assert len(EFFECTS) == 14
    assert all(len(k) == 1 and k == k.lower() for k in EFFECTS)
    assert all(e.key == k for k, e in EFFECTS.items())


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        EFFECTS["z"] = EFFECTS["q"]


def test_registry_lookup():
    assert get_effect("q").fn is gradient
    assert get_effect("d").fn is waves
    assert get_effect("z") is None
    assert effects.default_effect().name == "waves"


def test_only_rgb_is_stochastic():
    assert [e.name for e in EFFECTS.values() if e.stochastic] == ["rgb"]


def test_gradient_hue():
    assert gradient(0, 0, 0).color.h == 0
    # 53 / 53 wraps back to 0
    assert gradient(26, 27, 0).color.h == 0
    assert gradient(10, 0, 0).color.h == pytest.approx(360 * 10 / 53)
    assert gradient(0, 0, 0).color == Hsl(0, 1.0, 0.5)
    assert gradient(0, 0, 0).activation is None


def test_gradient_monochrome_sawtooth():
    assert gradient_monochrome(0, 0, 0) == RenderSample(WHITE, 0.0)
    # x - y negative still lands in [0, 1)
    value = gradient_monochrome(0, 10, 0).activation
    assert 0 <= value < 1
    assert value == pytest.approx(1 - 10 / 53)


def test_gradient_monochrome2_triangle():
    assert gradient_monochrome2(0, 0, 0).activation == 0
    assert gradient_monochrome2(53, 0, 0).activation == pytest.approx(1.0)
    assert gradient_monochrome2(106, 0, 0).activation == pytest.approx(0.0)
    rising = gradient_monochrome2(20, 0, 0).activation
    falling = gradient_monochrome2(86, 0, 0).activation
    assert rising == pytest.approx(falling)


def test_pink_lightness_range():
    assert pink(0, 0, 0).color == Hsl(309, 1.0, 0.2)
    for x in range(60):
        color = pink(x, 3, 0.7).color
        assert color.h == 309
        assert 0.2 <= color.l <= 0.7 + 1e-9


@pytest.mark.parametrize("t", [0.0, 3.7, 100.0])
def test_square_outline(t):
    for x, y in [(1, 1), (12, 1), (1, 5), (12, 5), (6, 1), (6, 5), (1, 3), (12, 3)]:
        assert square(x, y, t).color == PURPLE
    for x, y in [(6, 3), (0, 0), (13, 3), (6, 6), (2, 2)]:
        assert square(x, y, t).color == BACKGROUND


def test_checkered_period():
    assert checkered(0, 0, 0) == checkered(0, 0, 10)
    for x, y in COORDS:
        assert checkered(x, y, 2.5) == checkered(x, y, 12.5)


def test_checkered_xor():
    assert checkered(0, 0, 0).color == BACKGROUND
    assert checkered(5, 0, 0).color == WHITE
    assert checkered(0, 5, 0).color == WHITE
    assert checkered(5, 5, 0).color == BACKGROUND


def test_checkered_rainbow_fast_dims_instead_of_off():
    assert checkered_rainbow_fast(0, 0, 0).activation == 0.3
    assert checkered_rainbow_fast(5, 0, 0).activation == 1.0
    assert checkered_rainbow_fast(0, 0, 0).color == Hsl(0, 0.9, 0.7)


def test_sweep_wraps_around():
    # 12 * 3.25 = 39 -> tm = 19, tm2 = -1: exactly one cell from h = 0
    assert sweep(0, 0, 3.25) == RenderSample(SKY, 0.5)
    # 12 * 1.625 = 19.5 -> tm2 = -0.5 is half a cell from h = 0
    assert sweep(0, 0, 1.625).activation == pytest.approx(1.0)
    assert sweep(19, 0, 1.625).activation == pytest.approx(1.0)
    assert sweep(10, 0, 1.625).activation == 0.5


def test_sweep_peak_on_band():
    assert sweep(3, 3, 0.5).activation == 1.5
    assert sweep(3, 4, 0.5).activation == 0.5


def test_sin_follows_wave_row():
    # x = 0, t = 0: target row 16
    assert sin(0, 16, 0).activation == 1.5
    assert sin(0, 0, 0).activation == 0.5
    assert sin(0, 0, 0).color == SKY
    assert sin(40, 0, 0).color == ROSE


def test_sin_color_extrapolates():
    r, g, b = sin(80, 0, 0).color
    assert r == SKY[0] + 2 * (ROSE[0] - SKY[0])
    assert r > 255


def test_rain_and_waves_tangent():
    assert rain(0, 0, 0).activation == 0.5
    assert waves(0, 0, 0).activation == 0.5
    assert rain(0, 0, 0).color == SKY
    assert rain(0, 20, 0).color == DEEP_BLUE
    assert waves(40, 0, 0).color == PURPLE
    expected = 0.5 + math.tan((0.7529592 * 3 + 0.458018 * 4) / 5 - 1.5)
    assert waves(3, 4, 1.5).activation == pytest.approx(expected)
    expected = 0.5 + math.tan(2 * (0.7529592 * 3 + 0.458018 * 4) - 1.5)
    assert rain(3, 4, 1.5).activation == pytest.approx(expected)


def test_rgb_cycles_channels():
    assert rgb(0, 0, 0).color == (255, 0, 0)
    assert rgb(1, 0, 0).color == (0, 255, 0)
    assert rgb(2, 0, 0).color == (0, 0, 255)
    assert rgb(3, 9, 0).color == (255, 0, 0)


def test_rgb_activation_range():
    for _ in range(500):
        assert 0.9 <= rgb(0, 0, 0).activation < 1.4
