"""The bouncing ball: launching by mouse drag and collisions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import pygame

from vectorplay.controls import FrameInput
from vectorplay.geometry import (
    Vec2,
    closest_point_on_line,
    distance,
    projected_amount,
    reflect,
    wall_normal,
)
from vectorplay.vectors import VectorSegment

YELLOW = (253, 249, 0)


@dataclass
class DragState:
    """Progress of a mouse drag used to launch the ball."""

    dragging: bool = False
    start: Vec2 = Vec2(0.0, 0.0)


@dataclass
class Ball:
    """A circle that moves with constant velocity and bounces off walls."""

    position: Vec2
    radius: float
    velocity: Vec2 = Vec2(0.0, 0.0)

    def update_position(self, time: float) -> None:
        """Advance the ball by ``time`` seconds."""
        self.position += self.velocity * time

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ball."""
        pygame.draw.circle(surface, YELLOW, tuple(self.position), self.radius)

    def window_collision(self, width: int, height: int) -> None:
        """Reverse the velocity along any axis where the ball touches the window edge."""
        x, y = self.position
        vx, vy = self.velocity
        if x - self.radius < 0 or x + self.radius >= width:
            vx = -vx
        if y - self.radius < 0 or y + self.radius >= height:
            vy = -vy
        self.velocity = Vec2(vx, vy)

    def launch(self, drag: DragState, frame: FrameInput, velocity_multiplier: float) -> None:
        """Track a left-button drag and, on release, fling the ball opposite to it."""
        if frame.left_pressed:
            drag.dragging = True
            drag.start = frame.mouse
        if drag.dragging and frame.left_released:
            drag.dragging = False
            self.velocity = (drag.start - frame.mouse) * velocity_multiplier

    def vector_collision(self, vectors: Iterable[VectorSegment]) -> bool:
        """Bounce off the first segment the ball overlaps; return whether it did."""
        for segment in vectors:
            direction = segment.direction()
            length_squared = direction.dot(direction)
            if length_squared == 0:
                continue
            amount = projected_amount(self.position, segment.start, direction, length_squared)
            if not 0.0 <= amount <= 1.0:
                continue
            closest = closest_point_on_line(segment.start, direction, amount)
            if distance(self.position, closest) < self.radius:
                self.velocity = reflect(self.velocity, wall_normal(segment.start, segment.end))
                return True
        return False