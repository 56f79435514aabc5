from __future__ import annotations

import pygame
import pytest

from touchline.data_models import GamepadSample
from touchline.field_client import FieldClient


@pytest.fixture()
def client():
    c = FieldClient()
    yield c
    pygame.quit()


def test_window_matches_canvas(client: FieldClient) -> None:
    assert client.screen.get_size() == client.config.canvas_size


def test_key_events_reach_input_state(client: FieldClient) -> None:
    client.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    client.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LSHIFT))
    assert client.input_state.movement.up
    assert client.input_state.movement.sprint

    client.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_w))
    assert not client.input_state.movement.up


def test_escape_stops_and_detaches(client: FieldClient) -> None:
    client.scheduler.start()
    client.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))

    assert not client.scheduler.running
    assert client.scheduler.listener_count() == 0

    client.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d))
    assert not client.input_state.movement.right


def test_removed_joystick_clears_its_slot(client: FieldClient, make_device) -> None:
    device = make_device()
    client.devices[42] = device
    client.gamepad.on_connected(device)

    client.handle_event(pygame.event.Event(pygame.JOYDEVICEREMOVED, instance_id=42))

    assert client.gamepad.poll() is None
    assert 42 not in client.devices


def test_unknown_joystick_removal_is_ignored(client: FieldClient) -> None:
    client.handle_event(pygame.event.Event(pygame.JOYDEVICEREMOVED, instance_id=7))
    assert not client.gamepad.connected


def test_added_joystick_is_wrapped_and_polled(client: FieldClient, make_joystick, monkeypatch: pytest.MonkeyPatch) -> None:
    joystick = make_joystick(instance_id=11, axes=(0.05, -0.6))
    opened = []

    def fake_joystick(index: int):
        opened.append(index)
        return joystick

    monkeypatch.setattr(pygame.joystick, "Joystick", fake_joystick)

    client.handle_event(pygame.event.Event(pygame.JOYDEVICEADDED, device_index=1))

    assert opened == [1]
    assert client.devices[11].joystick is joystick
    assert client.gamepad.device_in(1) is client.devices[11]
    assert client.gamepad.poll() == GamepadSample(axis_x=0.0, axis_y=-0.6, sprint_pressed=False)

    client.handle_event(pygame.event.Event(pygame.JOYDEVICEREMOVED, instance_id=11))
    assert client.gamepad.poll() is None
