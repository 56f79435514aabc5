from __future__ import annotations

import os

import pytest

# Headless pygame for every test module
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from touchline.data_models import FieldConfig
from touchline.gamepad import ButtonState, GamepadReader
from touchline.input_state import InputState
from touchline.movement_core import MovementCore
from touchline.scheduler import FrameScheduler


class FakeDevice:
    """Gamepad shaped like the browser API: axes list, buttons with .pressed."""

    def __init__(self, axes=(0.0, 0.0), pressed=()):
        self.axes = list(axes)
        self.buttons = [ButtonState(i in pressed) for i in range(8)]

    def press(self, index: int, pressed: bool = True) -> None:
        self.buttons[index] = ButtonState(pressed)


class StubJoystick:
    """Stands in for pygame.joystick.Joystick."""

    def __init__(self, instance_id=3, name="Stub Pad", axes=(0.25, -0.5), pressed=()):
        self.instance_id = instance_id
        self.name = name
        self.axis_values = list(axes)
        self.pressed = set(pressed)

    def get_instance_id(self):
        return self.instance_id

    def get_name(self):
        return self.name

    def get_numaxes(self):
        return len(self.axis_values)

    def get_axis(self, i):
        return self.axis_values[i]

    def get_numbuttons(self):
        return 8

    def get_button(self, i):
        return 1 if i in self.pressed else 0


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, position, stats=None):
        self.frames.append((position, stats))


@pytest.fixture()
def make_device():
    return FakeDevice


@pytest.fixture()
def make_joystick():
    return StubJoystick


@pytest.fixture()
def config() -> FieldConfig:
    return FieldConfig()


@pytest.fixture()
def core(config: FieldConfig) -> MovementCore:
    return MovementCore(config)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture()
def scheduler(core: MovementCore, renderer: RecordingRenderer, clock: FakeClock) -> FrameScheduler:
    return FrameScheduler(core, InputState(), GamepadReader(), renderer, clock=clock)
