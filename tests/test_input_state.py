from __future__ import annotations

import pytest

from touchline.data_models import MovementState
from touchline.input_state import InputState


@pytest.mark.parametrize(
    "key, flag",
    [("w", "up"), ("s", "down"), ("a", "left"), ("d", "right"), ("shift", "sprint")],
)
def test_key_down_then_up(key: str, flag: str) -> None:
    state = InputState()

    assert state.on_key_down(key) is True
    assert getattr(state.movement, flag) is True

    assert state.on_key_up(key) is True
    assert state.movement == MovementState()


def test_keys_are_case_insensitive() -> None:
    state = InputState()
    state.on_key_down("W")
    assert state.movement.up
    state.on_key_up("w")
    assert not state.movement.up


def test_pygame_shift_names_sprint() -> None:
    state = InputState()
    state.on_key_down("left shift")
    assert state.movement.sprint
    state.on_key_up("left shift")
    state.on_key_down("right shift")
    assert state.movement.sprint


def test_key_up_leaves_other_flags_alone() -> None:
    state = InputState()
    for key in ("w", "d", "shift"):
        state.on_key_down(key)

    state.on_key_up("w")

    assert state.movement == MovementState(right=True, sprint=True)


def test_repeated_key_down_does_not_toggle() -> None:
    state = InputState()
    for _ in range(5):
        state.on_key_down("a")
    assert state.movement.left
    state.on_key_up("a")
    state.on_key_up("a")
    assert not state.movement.left


@pytest.mark.parametrize("key", ["q", "space", "up", "1", ""])
def test_unknown_keys_are_ignored(key: str) -> None:
    state = InputState()
    assert state.on_key_down(key) is False
    assert state.on_key_up(key) is False
    assert state.movement == MovementState()


def test_backtick_toggles_debug_overlay() -> None:
    state = InputState()
    assert state.on_key_down("`") is True
    assert state.debug_visible
    state.on_key_up("`")
    assert state.debug_visible
    state.on_key_down("`")
    assert not state.debug_visible
    assert state.movement == MovementState()


def test_sprint_held_until_both_shifts_released() -> None:
    state = InputState()
    state.on_key_down("left shift")
    state.on_key_down("right shift")

    state.on_key_up("left shift")
    assert state.movement.sprint

    state.on_key_up("right shift")
    assert not state.movement.sprint
