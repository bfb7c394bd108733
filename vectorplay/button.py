"""A clickable rectangular button with a text label."""

from __future__ import annotations

import functools
from dataclasses import dataclass

import pygame

from vectorplay.controls import FrameInput
from vectorplay.geometry import Vec2

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

_FONT_SIZE = 20


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


@dataclass
class Button:
    """A labelled rectangle that reports left clicks inside it."""

    x: float
    y: float
    width: float
    height: float
    text: str

    def contains(self, point: Vec2) -> bool:
        """Return whether ``point`` lies inside the rectangle."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )

    def is_pressed(self, frame: FrameInput) -> bool:
        """Return whether the left button went down over this button."""
        return self.contains(frame.mouse) and frame.left_pressed

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the rectangle and its label."""
        rect = pygame.Rect(round(self.x), round(self.y), round(self.width), round(self.height))
        pygame.draw.rect(surface, WHITE, rect)
        label = _font(_FONT_SIZE).render(self.text, True, BLACK)
        surface.blit(label, (self.x + 20, self.y + 5))