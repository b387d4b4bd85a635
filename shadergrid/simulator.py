"""Pygame window that shows the canvas upscaled, one square per grid cell."""

import time
from typing import Callable

import pygame

from shadergrid.canvas import Canvas

DOUBLE_CLICK_S = 0.4


def grid_size(viewport_width: int, viewport_height: int, cell_size: int) -> tuple[int, int]:
    """Number of whole cells that fit the viewport."""
    if cell_size <= 0:
        raise ValueError(f"cell size must be positive, got {cell_size}")
    return (max(0, viewport_width // cell_size), max(0, viewport_height // cell_size))


class Simulator:
    """Opens a resizable window that displays the Canvas contents.

    Key presses are forwarded to on_key as single characters. Resizing the
    window resizes the canvas to the number of cells that fit. A double-click
    toggles fullscreen.
    """

    def __init__(self, canvas: Canvas, scale: int = 16, title: str = "Shader Grid",
                 on_key: Callable[[str], None] | None = None):
        self.canvas = canvas
        self.scale = scale
        self.on_key = on_key
        # A 0x0 mode would open a desktop-sized window
        self.width = max(scale, canvas.width * scale)
        self.height = max(scale, canvas.height * scale)
        self._last_click = 0.0

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

    def set_title(self, title: str) -> None:
        pygame.display.set_caption(title)

    def _resize(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        cols, rows = grid_size(width, height, self.scale)
        if (cols, rows) != (self.canvas.width, self.canvas.height):
            self.canvas.resize(cols, rows)

    def _click(self) -> None:
        now = time.monotonic()
        if now - self._last_click < DOUBLE_CLICK_S:
            pygame.display.toggle_fullscreen()
            self._resize(*self.screen.get_size())
            self._last_click = 0.0
        else:
            self._last_click = now

    def poll(self) -> bool:
        """Handle window events. Returns False if the window was closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.unicode and self.on_key is not None:
                    self.on_key(event.unicode)
            elif event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._click()
        return True

    def update(self) -> None:
        """Blit canvas to screen."""
        self.screen.fill((0, 0, 0))
        if self.canvas.width and self.canvas.height:
            # surfarray wants (width, height, 3)
            surface = pygame.surfarray.make_surface(self.canvas.to_array().swapaxes(0, 1))
            size = (self.canvas.width * self.scale, self.canvas.height * self.scale)
            self.screen.blit(pygame.transform.scale(surface, size), (0, 0))
        pygame.display.flip()

    def tick(self, fps: int = 60) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
