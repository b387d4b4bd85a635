"""Main run loop - ties together Selector, AnimationDriver, sampler, Canvas, and Simulator."""

import itertools
import time
from typing import Callable

from shadergrid import config
from shadergrid.canvas import Canvas
from shadergrid.driver import AnimationDriver
from shadergrid.effects import EFFECTS
from shadergrid.sampler import sample
from shadergrid.selector import Selector
from shadergrid.simulator import Simulator, grid_size

OVERLAY_COLOR = (255, 255, 255)


class FrameScheduler:
    """Display-refresh callback queue, like requestAnimationFrame.

    Callbacks requested while a flush is running wait for the next flush.
    """

    def __init__(self):
        self._pending: dict[int, Callable[[], None]] = {}
        self._ids = itertools.count(1)

    def request(self, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def flush(self) -> int:
        """Run everything requested before this call. Returns the number of callbacks run."""
        pending, self._pending = self._pending, {}
        for callback in pending.values():
            callback()
        return len(pending)

    def __len__(self) -> int:
        return len(self._pending)


class Overlay:
    """Effect name banner that stays up for a fixed time after a switch."""

    def __init__(self, duration: float = config.OVERLAY_DURATION, clock: Callable[[], float] = time.monotonic):
        self.duration = duration
        self.clock = clock
        self.text = ""
        self.until = 0.0

    def show(self, text: str) -> None:
        self.text = text
        self.until = self.clock() + self.duration

    def draw(self, canvas: Canvas) -> None:
        if self.clock() < self.until:
            canvas.label(self.text, OVERLAY_COLOR)


def window_title(title: str, key: str) -> str:
    return f"{title} #{key}"


def run(hint: str | None = None, fps: int = config.FPS, title: str = config.TITLE,
        cell_size: int = config.CELL_SIZE, width: int = config.WINDOW_WIDTH,
        height: int = config.WINDOW_HEIGHT) -> None:
    """Open the simulator window and animate the selected effect until it is closed.

    Args:
        hint: Startup effect identifier ("q" or "#q"). Unknown or missing selects waves.
        fps: Target frames per second.
        title: Window title; the active identifier is appended as "#<key>".
        cell_size: Window pixels per grid cell.
        width: Initial window width in pixels.
        height: Initial window height in pixels.
    """
    selector = Selector()
    selector.init_from_hint(hint)
    overlay = Overlay()

    canvas = Canvas(*grid_size(width, height, cell_size))

    def on_key(key: str) -> None:
        if selector.select_by_key(key):
            effect = selector.current()
            print(f"[shadergrid] {effect.key}: {effect.name}")
            sim.set_title(window_title(title, effect.key))
            overlay.show(f"#{effect.key} {effect.name}")

    sim = Simulator(canvas, scale=cell_size, title=window_title(title, selector.key), on_key=on_key)

    def on_frame(t: float, frame: int) -> None:
        # One effect per frame, read before sampling
        effect = selector.current()
        canvas.paint(sample(canvas.width, canvas.height, effect, t))
        overlay.draw(canvas)

    scheduler = FrameScheduler()
    driver = AnimationDriver(scheduler, on_frame)

    print(f"[shadergrid] {canvas.width}x{canvas.height} cells, {len(EFFECTS)} effects, "
          f"starting with {selector.key}: {selector.current().name}")
    try:
        while sim.poll():
            scheduler.flush()
            sim.update()
            sim.tick(fps)
    except KeyboardInterrupt:
        pass
    finally:
        driver.stop()
        sim.close()
