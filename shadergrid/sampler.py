"""Evaluate an effect over every cell of a grid for one point in time."""

from concurrent.futures import Executor

from shadergrid.effects import Effect, RenderSample

Grid = list[list[RenderSample]]


def sample_row(effect: Effect, width: int, y: int, t: float) -> list[RenderSample]:
    return [effect(x, y, t) for x in range(width)]


def sample(width: int, height: int, effect: Effect, t: float,
           executor: Executor | None = None) -> Grid:
    """Return a row-major grid where grid[y][x] == effect(x, y, t).

    Negative dimensions raise ValueError. With an executor, rows are evaluated
    in parallel; every row sees the same (effect, t) pair.
    """
    if width < 0 or height < 0:
        raise ValueError(f"grid dimensions must be non-negative, got {width}x{height}")
    if executor is None:
        return [sample_row(effect, width, y, t) for y in range(height)]
    rows = executor.map(sample_row, [effect] * height, [width] * height, range(height), [t] * height)
    return list(rows)
