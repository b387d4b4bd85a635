"""Settings from the environment (or a .env file in the project root or working directory)."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).parent.parent / ".env")
load_dotenv(Path.cwd() / ".env")


def _positive_int(name: str, default: str) -> int:
    value = int(os.getenv(name, default))
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return value


# Startup effect identifier, e.g. "q" or "#q". Unknown or empty falls back to waves.
EFFECT_HINT = os.getenv("SHADERGRID_EFFECT", "")

FPS = _positive_int("SHADERGRID_FPS", "60")
CELL_SIZE = _positive_int("SHADERGRID_CELL_SIZE", "16")
WINDOW_WIDTH = int(os.getenv("SHADERGRID_WINDOW_WIDTH", "960"))
WINDOW_HEIGHT = int(os.getenv("SHADERGRID_WINDOW_HEIGHT", "640"))
TITLE = os.getenv("SHADERGRID_TITLE", "Shader Grid")

# Seconds the effect name stays on screen after switching
OVERLAY_DURATION = 2.0
