"""
gamepad.py: Gamepad polling with dead-zone filtering.

Devices are duck-typed: anything with an ``axes`` sequence of floats in
[-1, 1] and a ``buttons`` sequence of objects with a ``pressed`` flag.
JoystickDevice adapts a pygame joystick to that shape.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .constants import ANALOG_LEFT_X, ANALOG_LEFT_Y, BUTTON_RT, DEAD_ZONE, MAX_GAMEPADS
from .data_models import GamepadSample

logger = logging.getLogger(__name__)


def apply_dead_zone(value: float, dead_zone: float = DEAD_ZONE) -> float:
    """Zero out analog values too small to be deliberate."""
    return 0.0 if abs(value) < dead_zone else value


@dataclass(frozen=True)
class ButtonState:
    pressed: bool = False


class JoystickDevice:
    """Wraps a pygame.joystick.Joystick so it reads like a browser gamepad."""

    def __init__(self, joystick):
        self.joystick = joystick

    @property
    def instance_id(self) -> int:
        return self.joystick.get_instance_id()

    @property
    def name(self) -> str:
        return self.joystick.get_name()

    @property
    def axes(self) -> List[float]:
        return [self.joystick.get_axis(i) for i in range(self.joystick.get_numaxes())]

    @property
    def buttons(self) -> List[ButtonState]:
        return [ButtonState(bool(self.joystick.get_button(i)))
                for i in range(self.joystick.get_numbuttons())]

    def __repr__(self):
        return f"JoystickDevice({self.name!r})"


class GamepadReader:
    """
    Tracks up to MAX_GAMEPADS device slots and samples the first occupied one.

    Slots are scanned in index order on every poll, so the lowest occupied
    slot always wins.
    """

    def __init__(self, dead_zone: float = DEAD_ZONE, slots: int = MAX_GAMEPADS):
        self.dead_zone = dead_zone
        self._slots: List[Optional[object]] = [None] * slots

    @property
    def connected(self) -> bool:
        return any(device is not None for device in self._slots)

    def on_connected(self, device, index: Optional[int] = None) -> Optional[int]:
        """Place a device in a slot. Returns the slot used, or None if all are full."""
        if index is None or not 0 <= index < len(self._slots) or self._slots[index] is not None:
            index = next((i for i, d in enumerate(self._slots) if d is None), None)
        if index is None:
            logger.warning("Gamepad connected but all %d slots are taken: %r", len(self._slots), device)
            return None
        self._slots[index] = device
        logger.info("Gamepad connected in slot %d: %r", index, device)
        return index

    def on_disconnected(self, device) -> Optional[int]:
        """Clear the slot holding the device. Returns the slot cleared, if any."""
        for i, held in enumerate(self._slots):
            if held is device:
                self._slots[i] = None
                logger.info("Gamepad disconnected from slot %d: %r", i, device)
                return i
        return None

    def device_in(self, index: int):
        return self._slots[index]

    def poll(self) -> Optional[GamepadSample]:
        """Sample the first connected device, or None if there is none."""
        for device in self._slots:
            if device is not None:
                return self.sample(device)
        return None

    def sample(self, device) -> GamepadSample:
        axes: Sequence[float] = device.axes
        buttons = device.buttons

        raw_x = axes[ANALOG_LEFT_X] if len(axes) > ANALOG_LEFT_X else 0.0
        raw_y = axes[ANALOG_LEFT_Y] if len(axes) > ANALOG_LEFT_Y else 0.0
        sprint = bool(buttons[BUTTON_RT].pressed) if len(buttons) > BUTTON_RT else False

        return GamepadSample(
            axis_x=apply_dead_zone(raw_x, self.dead_zone),
            axis_y=apply_dead_zone(raw_y, self.dead_zone),
            sprint_pressed=sprint,
        )
