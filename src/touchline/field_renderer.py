"""
field_renderer.py: Draws the pitch and the player marker onto a pygame surface.
"""

from typing import Callable, Optional

import pygame

from .constants import (
    FIELD_INSET, TRY_LINE_OFFSET, TWENTY_TWO_OFFSET, LINE_WIDTH, LABEL_OFFSET,
    GRASS_COLOR, OUTER_GRASS_COLOR, LINE_COLOR, FONT_NAME, FONT_SIZE,
    PLAYER_COLOR, PLAYER_STROKE_COLOR
)
from .data_models import DebugStats, FieldConfig, Position
from .scheduler import RenderTargetError

DEBUG_TEXT_COLOR = (255, 255, 0)


class FieldRenderer:
    """Redraws the whole frame on every call to draw()."""

    def __init__(self, surface: pygame.Surface, config: FieldConfig,
                 present: Optional[Callable[[], None]] = None):
        if not isinstance(surface, pygame.Surface):
            raise RenderTargetError(f"expected a pygame.Surface, got {surface!r}")
        self.surface = surface
        self.config = config
        self.present = present
        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(FONT_NAME, FONT_SIZE)
        return self._font

    def draw(self, position: Position, stats: Optional[DebugStats] = None):
        self.draw_field()
        self.draw_player(position)
        if stats is not None:
            self.draw_debug(stats)
        if self.present is not None:
            self.present()

    def draw_field(self):
        screen = self.surface
        width, height = screen.get_size()
        inset = FIELD_INSET

        screen.fill(OUTER_GRASS_COLOR)
        playing_area = pygame.Rect(inset, inset, width - 2 * inset, height - 2 * inset)
        pygame.draw.rect(screen, GRASS_COLOR, playing_area)
        pygame.draw.rect(screen, LINE_COLOR, playing_area, LINE_WIDTH)

        # Try lines, 22s and halfway, each spanning the playing area
        halfway_y = height / 2
        for y in (TRY_LINE_OFFSET, height - TRY_LINE_OFFSET,
                  TWENTY_TWO_OFFSET, height - TWENTY_TWO_OFFSET, halfway_y):
            pygame.draw.line(screen, LINE_COLOR, (inset, y), (width - inset, y), LINE_WIDTH)

        for text, y in (("50", halfway_y),
                        ("22", TWENTY_TWO_OFFSET),
                        ("22", height - TWENTY_TWO_OFFSET)):
            self._blit_centered(text, LABEL_OFFSET, y, LINE_COLOR)
            self._blit_centered(text, width - LABEL_OFFSET, y, LINE_COLOR)

    def draw_player(self, position: Position):
        center = (round(position.x), round(position.y))
        radius = round(self.config.radius)
        pygame.draw.circle(self.surface, PLAYER_COLOR, center, radius)
        pygame.draw.circle(self.surface, PLAYER_STROKE_COLOR, center, radius, 1)

    def draw_debug(self, stats: DebugStats):
        lines = (
            f"FPS: {stats.fps}",
            f"X: {stats.position[0]} Y: {stats.position[1]}",
            f"Speed: {stats.speed}",
        )
        for i, line in enumerate(lines):
            surf = self.font.render(line, True, DEBUG_TEXT_COLOR)
            self.surface.blit(surf, (10, 10 + i * (FONT_SIZE + 4)))

    def _blit_centered(self, text: str, x: float, y: float, color):
        surf = self.font.render(text, True, color)
        self.surface.blit(surf, surf.get_rect(center=(round(x), round(y))))
