"""Active effect selection from a startup hint or a key press."""

from shadergrid.effects import EFFECTS, Effect, default_effect


class Selector:
    """Holds the currently active effect.

    The active effect is replaced with a single attribute assignment, so a
    frame reading current() sees either the old effect or the new one.
    """

    def __init__(self):
        self._effect = default_effect()

    @property
    def key(self) -> str:
        return self._effect.key

    def init_from_hint(self, hint: str | None) -> None:
        """Select the effect named by a startup hint ("q" or "#q"), else the default."""
        key = (hint or "").removeprefix("#")
        self._effect = EFFECTS.get(key) or default_effect()

    def select_by_key(self, key: str) -> bool:
        """Switch to the effect bound to a key press. Returns False if the key is unbound."""
        key = key.lower()
        effect = EFFECTS.get(key)
        if effect is None:
            return False
        self._effect = effect
        return True

    def current(self) -> Effect:
        return self._effect
