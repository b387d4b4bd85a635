"""Animated grid of colored cells driven by selectable shader functions of (x, y, t)."""

from shadergrid.canvas import Canvas
from shadergrid.effects import EFFECTS, Effect, RenderSample, get_effect
from shadergrid.run import run

__all__ = ["Canvas", "EFFECTS", "Effect", "RenderSample", "get_effect", "run"]
