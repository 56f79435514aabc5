"""
Touchline: a single player marker running around a rugby pitch,
steered by keyboard and gamepad.
"""

from .data_models import DebugStats, FieldConfig, GamepadSample, MovementState, Position
from .gamepad import GamepadReader
from .input_state import InputState
from .movement_core import MovementCore
from .scheduler import FrameScheduler, RenderTargetError

__version__ = "0.1.0"
