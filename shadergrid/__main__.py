"""Run the shader grid: python -m shadergrid [effect]"""

import sys

from shadergrid import config
from shadergrid.effects import EFFECTS
from shadergrid.run import run


def main() -> None:
    hint = sys.argv[1] if len(sys.argv) > 1 else config.EFFECT_HINT
    if hint in ("-h", "--help"):
        print("Usage: python -m shadergrid [effect]\n\nEffects (press the key to switch):")
        for effect in EFFECTS.values():
            print(f"  {effect.key}  {effect.name}")
        return
    run(hint)


if __name__ == "__main__":
    main()
