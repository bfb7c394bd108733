"""User-drawn vector segments and the ordered collection holding them."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import pygame

from vectorplay.geometry import Vec2

RED = (230, 41, 55)
BLUE = (0, 121, 241)

_POINT_RADIUS = 5
_ARROW_SIZE = 25


@dataclass(eq=False)
class VectorSegment:
    """A directed segment from ``start`` to ``end``; compared by identity."""

    start: Vec2
    end: Vec2

    def move(self, dx: float, dy: float) -> None:
        """Shift both ends by ``(dx, dy)``."""
        offset = Vec2(dx, dy)
        self.start += offset
        self.end += offset

    def direction(self) -> Vec2:
        """Return the vector from start to end."""
        return self.end - self.start


def arrow_head(start: Vec2, end: Vec2, size: float) -> tuple[Vec2, Vec2]:
    """Return the two back corners of the arrow head drawn at ``end``."""
    angle = math.atan2(end.y - start.y, end.x - start.x)
    # The 45 is applied in radians, which gives the arrow its familiar shape.
    first = Vec2(end.x - size * math.cos(angle + 45), end.y - size * math.sin(angle + 45))
    second = Vec2(end.x - size * math.cos(angle - 45), end.y - size * math.sin(angle - 45))
    return first, second


class VectorList:
    """Segments in the order they were created."""

    def __init__(self) -> None:
        self._segments: list[VectorSegment] = []

    def add(self, start: Vec2, end: Vec2) -> VectorSegment:
        """Append a new segment and return it."""
        segment = VectorSegment(start, end)
        self._segments.append(segment)
        return segment

    def remove(self, segment: VectorSegment) -> None:
        """Remove ``segment``; raise ValueError if it is not in the list."""
        self._segments.remove(segment)

    def __iter__(self) -> Iterator[VectorSegment]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def draw(self, surface: pygame.Surface, highlighted: Iterable[VectorSegment | None]) -> None:
        """Draw every segment, in red if it is among ``highlighted``, else blue."""
        marked = [h for h in highlighted if h is not None]
        for segment in self._segments:
            color = RED if any(segment is h for h in marked) else BLUE
            start, end = tuple(segment.start), tuple(segment.end)
            pygame.draw.circle(surface, color, start, _POINT_RADIUS)
            pygame.draw.line(surface, color, start, end)
            corners = arrow_head(segment.start, segment.end, _ARROW_SIZE)
            pygame.draw.polygon(surface, color, [end, *(tuple(c) for c in corners)])