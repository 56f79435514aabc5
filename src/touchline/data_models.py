"""
data_models.py: Data structures for the field, the input and the player marker.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import (
    SCALE, FIELD_WIDTH_M, FIELD_LENGTH_M, DEAD_BALL_M, MARGIN_M,
    PLAYER_RADIUS, DISTANCE_BELOW_HALFWAY, MOVEMENT_SPEED, SPRINT_SPEED,
    DEAD_ZONE, TARGET_FPS
)


@dataclass
class Position:
    """Centre of the player marker in canvas pixels. (0, 0) means not spawned yet."""
    x: float = 0.0
    y: float = 0.0

    def is_unset(self) -> bool:
        return self.x == 0 and self.y == 0

    def rounded(self) -> Tuple[int, int]:
        return round(self.x), round(self.y)


@dataclass
class MovementState:
    """Keyboard intent, held between key-down and the matching key-up."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    sprint: bool = False


@dataclass(frozen=True)
class GamepadSample:
    """One tick's worth of gamepad input, already dead-zone filtered."""
    axis_x: float = 0.0
    axis_y: float = 0.0
    sprint_pressed: bool = False


@dataclass
class DebugStats:
    """What the debug overlay shows."""
    fps: int = 0
    position: Tuple[int, int] = (0, 0)
    speed: float = 0.0


@dataclass(frozen=True)
class FieldConfig:
    """
    Immutable field, marker and input settings.
    Canvas size is derived from the field measurements and the scale.
    """
    scale: int = SCALE
    field_width_m: float = FIELD_WIDTH_M
    field_length_m: float = FIELD_LENGTH_M
    dead_ball_m: float = DEAD_BALL_M
    margin_m: float = MARGIN_M
    radius: float = PLAYER_RADIUS
    distance_below_halfway: float = DISTANCE_BELOW_HALFWAY
    movement_speed: float = MOVEMENT_SPEED
    sprint_speed: float = SPRINT_SPEED
    dead_zone: float = DEAD_ZONE
    target_fps: int = TARGET_FPS

    def __post_init__(self):
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        if self.movement_speed < 0 or self.sprint_speed < 0:
            raise ValueError("speeds must not be negative")
        if self.sprint_speed < self.movement_speed:
            raise ValueError(
                f"sprint speed {self.sprint_speed} is slower than movement speed {self.movement_speed}")
        if not 0 <= self.dead_zone < 1:
            raise ValueError(f"dead zone must be in [0, 1), got {self.dead_zone}")
        if self.target_fps <= 0:
            raise ValueError(f"target fps must be positive, got {self.target_fps}")
        if self.canvas_width < 2 * self.radius or self.canvas_height < 2 * self.radius:
            raise ValueError("field is too small to hold the player marker")

    @property
    def canvas_width(self) -> float:
        return (self.field_width_m + 2 * self.margin_m) * self.scale

    @property
    def canvas_height(self) -> float:
        return (self.field_length_m + 2 * self.dead_ball_m + 2 * self.margin_m) * self.scale

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return int(self.canvas_width), int(self.canvas_height)

    @property
    def halfway_y(self) -> float:
        return self.canvas_height / 2

    @property
    def frame_interval(self) -> float:
        """Seconds between ticks at the target rate."""
        return 1.0 / self.target_fps

    def spawn_position(self) -> Position:
        """Kick-off spot: centre of the field, a few metres below halfway."""
        return Position(x=self.canvas_width / 2, y=self.halfway_y + self.distance_below_halfway)
