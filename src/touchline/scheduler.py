"""
scheduler.py: Fixed-rate update/render loop and the event listeners that feed it.
"""

import logging
import math
import time
from typing import Callable, Dict, List, Optional

from .constants import FPS_WINDOW, HOST_FRAME_RATE
from .data_models import DebugStats, Position
from .gamepad import GamepadReader
from .input_state import InputState
from .movement_core import MovementCore

logger = logging.getLogger(__name__)

KEYDOWN = "keydown"
KEYUP = "keyup"
GAMEPAD_CONNECTED = "gamepadconnected"
GAMEPAD_DISCONNECTED = "gamepaddisconnected"
QUIT = "quit"


class RenderTargetError(RuntimeError):
    """Raised when the scheduler is given nothing it can draw to."""


def _check_render_target(renderer):
    if renderer is None or not callable(getattr(renderer, "draw", None)):
        raise RenderTargetError(f"not a usable render target: {renderer!r}")
    if hasattr(renderer, "surface") and renderer.surface is None:
        raise RenderTargetError(f"render target has no surface: {renderer!r}")


class FpsCounter:
    """Counts ticks per wall-clock window."""

    def __init__(self, window: float = FPS_WINDOW):
        self.window = window
        self.frame_count = 0
        self.last_update: Optional[float] = None
        self.fps = 0

    def update(self, now: float) -> int:
        if self.last_update is None:
            self.last_update = now
        self.frame_count += 1
        if now - self.last_update >= self.window:
            self.fps = self.frame_count
            self.frame_count = 0
            self.last_update = now
        return self.fps


class FrameScheduler:
    """
    Runs tick = poll gamepad, resolve movement, update position, render.

    Throttled mode accumulates elapsed time and ticks once per full frame
    interval built up, at most ceil(target_fps / host_rate) times per host
    frame so a target rate above the host rate is still reached.
    Unthrottled mode ticks once on every host frame.
    """

    def __init__(self, core: MovementCore, input_state: InputState, gamepad: GamepadReader,
                 renderer, throttled: bool = True, clock: Callable[[], float] = time.perf_counter,
                 host_rate: int = HOST_FRAME_RATE):
        _check_render_target(renderer)
        self.core = core
        self.config = core.config
        self.input_state = input_state
        self.gamepad = gamepad
        self.renderer = renderer
        self.throttled = throttled
        self.clock = clock
        self.ticks_per_frame = max(1, math.ceil(self.config.target_fps / host_rate))

        self.position = Position()
        self.stats = DebugStats()
        self.fps = FpsCounter()
        self.tick_count = 0
        self.running = False

        self._listeners: Dict[str, List[Callable]] = {}
        self._accumulator = 0.0
        self._last_time: Optional[float] = None

    # -------- Listeners --------

    def add_listener(self, event: str, handler: Callable):
        self._listeners.setdefault(event, []).append(handler)

    def remove_listener(self, event: str, handler: Callable):
        handlers = self._listeners.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def listener_count(self) -> int:
        return sum(len(handlers) for handlers in self._listeners.values())

    def dispatch(self, event: str, *args) -> bool:
        """Call every handler for the event. True if any of them consumed it."""
        handled = False
        for handler in list(self._listeners.get(event, ())):
            if handler(*args):
                handled = True
        return handled

    # -------- Lifecycle --------

    def start(self):
        _check_render_target(self.renderer)
        if self.running:
            return
        self.running = True
        self._accumulator = 0.0
        self._last_time = self.clock()
        logger.info("Scheduler started (%s, %d Hz)",
                    "throttled" if self.throttled else "unthrottled", self.config.target_fps)

    def stop(self):
        """Detach all listeners and stop ticking. A tick already running completes."""
        was_running = self.running
        self.running = False
        self._listeners.clear()
        if was_running:
            logger.info("Scheduler stopped after %d ticks", self.tick_count)

    def run(self, wait_frame: Callable[[], None]):
        """Loop host frames until stop() is called, usually from a listener."""
        self.start()
        try:
            while self.running:
                wait_frame()
                self.advance()
        finally:
            self.stop()

    # -------- Timing --------

    def advance(self, now: Optional[float] = None) -> bool:
        """Handle one host frame. Returns True if at least one tick ran."""
        if not self.running:
            return False

        now = self.clock() if now is None else now
        elapsed = now - self._last_time
        self._last_time = now

        if not self.throttled:
            return self.tick()

        interval = self.config.frame_interval
        self._accumulator += elapsed
        ran = 0
        while self._accumulator >= interval and ran < self.ticks_per_frame and self.running:
            self._accumulator -= interval
            self.tick()
            ran += 1

        # Don't try to catch up on a long stall
        self._accumulator = min(self._accumulator, interval)
        return ran > 0

    def tick(self) -> bool:
        """One update/render cycle. Does nothing unless the scheduler is running."""
        if not self.running:
            return False

        if self.position.is_unset():
            self.position = self.config.spawn_position()

        movement = self.input_state.movement
        sample = self.gamepad.poll()
        self.position = self.core.resolve(self.position, movement, sample)
        self.tick_count += 1

        self.stats = DebugStats(
            fps=self.fps.update(self.clock()),
            position=self.position.rounded(),
            speed=self.core.speed_for(movement, sample),
        )
        self.renderer.draw(self.position, self.stats if self.input_state.debug_visible else None)
        return True
