"""The input state of one frame, independent of any windowing library."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from vectorplay.geometry import Vec2


class Key(enum.Enum):
    """Keys the application reacts to."""

    W = enum.auto()
    A = enum.auto()
    S = enum.auto()
    D = enum.auto()
    BACKSPACE = enum.auto()


@dataclass(frozen=True)
class FrameInput:
    """Mouse and keyboard state observed during one frame."""

    mouse: Vec2 = Vec2(0.0, 0.0)
    left_pressed: bool = False
    left_released: bool = False
    keys_down: Iterable[Key] = field(default_factory=frozenset)
    keys_pressed: Iterable[Key] = field(default_factory=frozenset)
    frame_time: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys_down", frozenset(self.keys_down))
        object.__setattr__(self, "keys_pressed", frozenset(self.keys_pressed))

    def is_key_down(self, key: Key) -> bool:
        """Return whether ``key`` is held during this frame."""
        return key in self.keys_down

    def is_key_pressed(self, key: Key) -> bool:
        """Return whether ``key`` went down during this frame."""
        return key in self.keys_pressed