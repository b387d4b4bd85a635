#!/usr/bin/env python3
"""Record an animated GIF of each effect by rendering frames headlessly.

Usage: python record_gifs.py [keys]
    keys: effect identifiers to record, e.g. "qds" (default: all)
Output: media/effect-<key>-<name>.gif
"""

import sys
from pathlib import Path

from PIL import Image

from shadergrid.canvas import Canvas
from shadergrid.effects import EFFECTS, Effect
from shadergrid.sampler import sample

ROOT = Path(__file__).parent
MEDIA_DIR = ROOT / "media"

# GIF settings
GRID_WIDTH = 40
GRID_HEIGHT = 24
SCALE = 10         # Upscale factor (40*10 = 400px)
DURATION_S = 4.0   # Seconds of animation per GIF
GIF_FPS = 20       # Frames per second in the GIF


def canvas_to_image(canvas: Canvas, scale: int = SCALE) -> Image.Image:
    """Convert a Canvas buffer to a scaled-up PIL Image."""
    img = Image.fromarray(canvas.to_array())
    if scale > 1:
        img = img.resize(
            (canvas.width * scale, canvas.height * scale),
            Image.NEAREST,
        )
    return img


def render_frames(effect: Effect, fps: float = GIF_FPS, duration: float = DURATION_S,
                  width: int = GRID_WIDTH, height: int = GRID_HEIGHT,
                  scale: int = SCALE) -> list[Image.Image]:
    canvas = Canvas(width, height)
    frames = []
    for i in range(int(duration * fps)):
        canvas.paint(sample(width, height, effect, i / fps))
        frames.append(canvas_to_image(canvas, scale))
    return frames


def gif_path(effect: Effect) -> Path:
    return MEDIA_DIR / f"effect-{effect.key}-{effect.name.replace(' ', '-')}.gif"


def record(effect: Effect, fps: float = GIF_FPS, duration: float = DURATION_S) -> Path:
    """Render frames and save as animated GIF."""
    out_path = gif_path(effect)
    frames = render_frames(effect, fps=fps, duration=duration)
    # Save as GIF (duration in ms per frame)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    print(f"  Saved {out_path} ({len(frames)} frames, {duration}s)")
    return out_path


if __name__ == "__main__":
    keys = sys.argv[1] if len(sys.argv) > 1 else "".join(EFFECTS)
    unknown = [k for k in keys if k not in EFFECTS]
    if unknown:
        print(f"[record] Unknown effect keys: {', '.join(unknown)}")
        sys.exit(1)

    MEDIA_DIR.mkdir(exist_ok=True)
    print(f"\nRecording effect GIFs to {MEDIA_DIR}/\n")

    for key in keys:
        effect = EFFECTS[key]
        try:
            print(f"  Recording {key}: {effect.name}...")
            record(effect)
        except Exception as e:
            print(f"  ERROR recording {effect.name}: {e}")
            import traceback
            traceback.print_exc()

    print(f"\nDone! GIFs saved to {MEDIA_DIR}/")
