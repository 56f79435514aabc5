"""
input_state.py: Keyboard intent, driven by key-down / key-up events.
"""

import logging

from .data_models import MovementState

logger = logging.getLogger(__name__)

# Key name (lower case, as reported by pygame.key.name) -> MovementState field
KEY_BINDINGS = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "shift": "sprint",
    "left shift": "sprint",
    "right shift": "sprint",
}
DEBUG_TOGGLE_KEY = "`"


class InputState:
    """
    Holds the keyboard-derived movement flags.

    Handlers return True when the key was recognized, meaning the event is
    consumed and should not get default handling.
    """

    def __init__(self, debug_visible: bool = False):
        self.movement = MovementState()
        self.debug_visible = debug_visible
        self._sprint_keys = set()

    def on_key_down(self, key: str) -> bool:
        name = key.lower()
        if name == DEBUG_TOGGLE_KEY:
            self.debug_visible = not self.debug_visible
            logger.debug("Debug overlay %s", "shown" if self.debug_visible else "hidden")
            return True
        return self._set(name, True)

    def on_key_up(self, key: str) -> bool:
        name = key.lower()
        if name == DEBUG_TOGGLE_KEY:
            return True
        return self._set(name, False)

    def _set(self, name: str, pressed: bool) -> bool:
        field_name = KEY_BINDINGS.get(name)
        if field_name is None:
            return False
        if field_name == "sprint":
            # Either shift keeps sprint on while it is held
            if pressed:
                self._sprint_keys.add(name)
            else:
                self._sprint_keys.discard(name)
            pressed = bool(self._sprint_keys)
        setattr(self.movement, field_name, pressed)
        logger.debug("%s -> %s=%s", name, field_name, pressed)
        return True
