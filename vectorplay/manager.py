"""Creation, selection, movement and comparison of user-drawn vectors."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from vectorplay.button import Button
from vectorplay.controls import FrameInput, Key
from vectorplay.geometry import Vec2
from vectorplay.vectors import VectorList, VectorSegment

SELECTION_THRESHOLD = 30

_ORIGIN = Vec2(0.0, 0.0)

_MOVES = (
    (Key.W, Vec2(0.0, -1.0)),
    (Key.S, Vec2(0.0, 1.0)),
    (Key.A, Vec2(-1.0, 0.0)),
    (Key.D, Vec2(1.0, 0.0)),
)


def _near_segment(point: Vec2, start: Vec2, end: Vec2, threshold: float) -> bool:
    """Return whether ``point`` lies within ``threshold`` of the segment."""
    to_point = point - start
    line = end - start
    cross = to_point.x * line.y - to_point.y * line.x
    if abs(cross) >= threshold * max(abs(line.x), abs(line.y)):
        return False
    if abs(line.x) >= abs(line.y):
        low, high = sorted((start.x, end.x))
        return low <= point.x <= high
    low, high = sorted((start.y, end.y))
    return low <= point.y <= high


@dataclass(frozen=True)
class VectorComparison:
    """Two selected vectors, with their dot product and sum."""

    first_start: Vec2
    first_end: Vec2
    second_start: Vec2
    second_end: Vec2

    @property
    def first(self) -> Vec2:
        return self.first_end - self.first_start

    @property
    def second(self) -> Vec2:
        return self.second_end - self.second_start

    @property
    def dot(self) -> float:
        return self.first.dot(self.second)

    @property
    def total(self) -> Vec2:
        return self.first + self.second

    def describe(self) -> str:
        """Return a human-readable report of both vectors and their relation."""
        s1, e1, s2, e2 = self.first_start, self.first_end, self.second_start, self.second_end
        v1, v2, total = self.first, self.second, self.total
        return "\n".join(
            [
                f"Vector 1 Coordinates: ({s1.x:g}, {s1.y:g}), ({e1.x:g}, {e1.y:g})",
                f"Vector 2 Coordinates: ({s2.x:g}, {s2.y:g}), ({e2.x:g}, {e2.y:g})",
                f"Vector 1: ({v1.x:g}, {v1.y:g})",
                f"Vector 2: ({v2.x:g}, {v2.y:g})",
                f"Dot Product: {self.dot:g}",
                f"Sum: ({total.x:g}, {total.y:g})",
            ]
        )


class VectorManager:
    """Turns frames of user input into edits of a list of vectors."""

    def __init__(self) -> None:
        self.vectors = VectorList()
        self.selected: VectorSegment | None = None
        self.second_selected: VectorSegment | None = None
        self.creating = False
        self._complete = False
        self._button_just_pressed = False
        self._just_created = False
        self._start = _ORIGIN

    def create_vector(self, button: Button, frame: FrameInput) -> None:
        """Handle the button, backspace and clicks that draw a new vector."""
        if button.is_pressed(frame):
            self.creating = True
            self._complete = False
            self._start = _ORIGIN
            self._button_just_pressed = True

        if frame.is_key_pressed(Key.BACKSPACE):
            if self.creating:
                self.creating = False
                self._complete = False
            elif self.selected is not None:
                self.delete_selected()

        if not (self.creating and frame.left_pressed):
            return
        if self._button_just_pressed:
            self._button_just_pressed = False
        elif not self._complete:
            if self._start == _ORIGIN:
                self._start = frame.mouse
            else:
                self._complete = True
                self.creating = False
                self.vectors.add(self._start, frame.mouse)
                self._just_created = True

    def draw(self, surface: pygame.Surface) -> None:
        """Draw all vectors, highlighting the selected ones."""
        self.vectors.draw(surface, (self.selected, self.second_selected))

    def check_selection(self, frame: FrameInput) -> VectorComparison | None:
        """Select a clicked vector; return a comparison when a second one is picked."""
        if self.creating:
            return None
        if self._just_created:
            self._just_created = False
            return None

        hit = next(
            (
                segment
                for segment in self.vectors
                if _near_segment(frame.mouse, segment.start, segment.end, SELECTION_THRESHOLD)
            ),
            None,
        )
        comparison = None
        selected_now = False
        if hit is not None and frame.left_pressed:
            if self.selected is None:
                self.selected = hit
            elif self.selected is not hit:
                self.second_selected = hit
                comparison = self.compare_vectors()
                print(comparison.describe())
            selected_now = True

        if frame.left_pressed and not selected_now:
            self.selected = None
            self.second_selected = None
        return comparison

    def delete_selected(self) -> None:
        """Remove the selected vector from the list, if any is selected."""
        segment = self.selected
        if segment is None:
            return
        try:
            self.vectors.remove(segment)
        except ValueError:
            pass
        if self.second_selected is segment:
            self.second_selected = None
        self.selected = None

    def move_selected(self, frame: FrameInput, move_speed: float) -> None:
        """Shift the selected vector by ``move_speed`` for each held W/A/S/D key."""
        if self.selected is None:
            return
        for key, step in _MOVES:
            if frame.is_key_down(key):
                self.selected.move(step.x * move_speed, step.y * move_speed)

    def compare_vectors(self) -> VectorComparison:
        """Return the comparison of the two selected vectors."""
        if self.selected is None or self.second_selected is None:
            raise ValueError("two vectors must be selected to compare them")
        return VectorComparison(
            self.selected.start,
            self.selected.end,
            self.second_selected.start,
            self.second_selected.end,
        )