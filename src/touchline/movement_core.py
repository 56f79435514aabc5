"""
movement_core.py: The deterministic movement step and boundary clamping.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .data_models import FieldConfig, GamepadSample, MovementState, Position


@dataclass
class MovementCore:
    """
    Turns one tick of input into a new player position.
    Keyboard and gamepad contributions are summed before diagonal normalization.
    """
    config: FieldConfig = field(default_factory=FieldConfig)

    def is_sprinting(self, movement: MovementState, sample: Optional[GamepadSample]) -> bool:
        return movement.sprint or (sample is not None and sample.sprint_pressed)

    def speed_for(self, movement: MovementState, sample: Optional[GamepadSample]) -> float:
        if self.is_sprinting(movement, sample):
            return self.config.sprint_speed
        return self.config.movement_speed

    def direction_for(self, movement: MovementState, sample: Optional[GamepadSample]) -> Tuple[float, float]:
        """Blended input direction, unit length whenever both axes are non-zero."""
        dx = dy = 0.0

        # 1. Analog stick, already dead-zone filtered
        if sample is not None:
            dx = sample.axis_x
            dy = sample.axis_y

        # 2. Keyboard adds on top of the stick
        if movement.up:
            dy -= 1
        if movement.down:
            dy += 1
        if movement.left:
            dx -= 1
        if movement.right:
            dx += 1

        # 3. Diagonals are no faster than straight lines
        if dx != 0 and dy != 0:
            magnitude = math.sqrt(dx * dx + dy * dy)
            dx /= magnitude
            dy /= magnitude

        return dx, dy

    def clamp_to_field(self, x: float, y: float) -> Position:
        r = self.config.radius
        x = max(r, min(x, self.config.canvas_width - r))
        y = max(r, min(y, self.config.canvas_height - r))
        return Position(x, y)

    def resolve(self, prev: Position, movement: MovementState,
                sample: Optional[GamepadSample], dt: float = 1.0) -> Position:
        """
        Returns the position after one step. dt is measured in ticks.
        Never mutates prev.
        """
        speed = self.speed_for(movement, sample)
        dx, dy = self.direction_for(movement, sample)
        return self.clamp_to_field(prev.x + dx * speed * dt, prev.y + dy * speed * dt)
