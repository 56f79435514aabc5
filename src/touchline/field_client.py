"""
field_client.py: The pygame window, event translation and main loop.
"""

import logging
from typing import Dict

import pygame

from .constants import HOST_FRAME_RATE
from .data_models import FieldConfig
from .field_renderer import FieldRenderer
from .gamepad import GamepadReader, JoystickDevice
from .input_state import InputState
from .movement_core import MovementCore
from .scheduler import (
    FrameScheduler, RenderTargetError, KEYDOWN, KEYUP, GAMEPAD_CONNECTED, GAMEPAD_DISCONNECTED, QUIT
)

logger = logging.getLogger(__name__)


class FieldClient:
    def __init__(self, config: FieldConfig = None, throttled: bool = True, show_debug: bool = False):
        self.config = config or FieldConfig()
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(self.config.canvas_size)
        except pygame.error as e:
            pygame.quit()
            raise RenderTargetError(f"could not open a window: {e}") from e
        pygame.display.set_caption("Touchline")
        logger.info("Window opened at %dx%d", *self.config.canvas_size)

        # --- Game Logic ---
        self.input_state = InputState(debug_visible=show_debug)
        self.gamepad = GamepadReader(dead_zone=self.config.dead_zone)
        self.renderer = FieldRenderer(self.screen, self.config, present=pygame.display.flip)
        self.scheduler = FrameScheduler(
            MovementCore(self.config), self.input_state, self.gamepad, self.renderer,
            throttled=throttled)

        # pygame instance id -> wrapped device
        self.devices: Dict[int, JoystickDevice] = {}

        # Time Management
        self.clock = pygame.time.Clock()

        self._attach_listeners()

    def _attach_listeners(self):
        s = self.scheduler
        s.add_listener(KEYDOWN, self.input_state.on_key_down)
        s.add_listener(KEYUP, self.input_state.on_key_up)
        s.add_listener(GAMEPAD_CONNECTED, self.gamepad.on_connected)
        s.add_listener(GAMEPAD_DISCONNECTED, self.gamepad.on_disconnected)
        s.add_listener(QUIT, s.stop)

    def run(self):
        """The main client execution loop."""
        try:
            self.scheduler.run(self._next_frame)
        finally:
            pygame.quit()

    def _next_frame(self):
        """Wait for the next host frame, then feed queued events to the listeners."""
        self.clock.tick(HOST_FRAME_RATE)
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event):
        s = self.scheduler
        if event.type == pygame.QUIT:
            s.dispatch(QUIT)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                s.dispatch(QUIT)
            else:
                s.dispatch(KEYDOWN, pygame.key.name(event.key))
        elif event.type == pygame.KEYUP:
            s.dispatch(KEYUP, pygame.key.name(event.key))
        elif event.type == pygame.JOYDEVICEADDED:
            device = JoystickDevice(pygame.joystick.Joystick(event.device_index))
            self.devices[device.instance_id] = device
            s.dispatch(GAMEPAD_CONNECTED, device, event.device_index)
        elif event.type == pygame.JOYDEVICEREMOVED:
            device = self.devices.pop(event.instance_id, None)
            if device is not None:
                s.dispatch(GAMEPAD_DISCONNECTED, device)
