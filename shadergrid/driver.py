"""Animation driver - publishes elapsed time once per display refresh."""

import time
from typing import Callable, Protocol

RUNNING = "running"
STOPPED = "stopped"

# Callback type: fn(elapsed_seconds, frame_number) -> None
FrameFn = Callable[[float, int], None]


class Scheduler(Protocol):
    def request(self, callback: Callable[[], None]) -> int: ...

    def cancel(self, handle: int) -> None: ...


class AnimationDriver:
    """Two-state (running/stopped) clock that re-arms itself on every tick.

    Time is always measured from the start instant captured at construction,
    so dropped ticks lower the sample rate but never cause drift. Stopping is
    terminal; build a new driver to animate again.
    """

    def __init__(self, scheduler: Scheduler, on_frame: FrameFn | None = None,
                 clock: Callable[[], float] = time.monotonic):
        self.scheduler = scheduler
        self.on_frame = on_frame
        self.clock = clock
        self.start = clock()
        self.t = 0.0
        self.frame = 0
        self.state = RUNNING
        self._pending: int | None = scheduler.request(self._on_refresh)

    @property
    def running(self) -> bool:
        return self.state == RUNNING

    def tick(self) -> None:
        """Advance now instead of waiting for the next refresh. The queued refresh is replaced."""
        if self.state == STOPPED:
            return
        if self._pending is not None:
            self.scheduler.cancel(self._pending)
            self._pending = None
        self._advance()

    def _on_refresh(self) -> None:
        if self.state == STOPPED:
            return
        # This callback was the pending one
        self._pending = None
        self._advance()

    def _advance(self) -> None:
        self.t = max(self.t, self.clock() - self.start)
        self.frame += 1
        if self.on_frame is not None:
            self.on_frame(self.t, self.frame)
        # on_frame may have stopped us
        if self.state == RUNNING:
            self._pending = self.scheduler.request(self._on_refresh)

    def stop(self) -> None:
        """Stop for good. No tick runs after this returns."""
        if self.state == STOPPED:
            return
        self.state = STOPPED
        if self._pending is not None:
            self.scheduler.cancel(self._pending)
            self._pending = None
