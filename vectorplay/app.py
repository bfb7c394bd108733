"""The interactive window: draw vectors and bounce a ball off them."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import replace

import pygame

from vectorplay.ball import Ball, DragState
from vectorplay.button import Button
from vectorplay.controls import FrameInput, Key
from vectorplay.geometry import Vec2
from vectorplay.manager import VectorManager

SCREEN_WIDTH = 1080
SCREEN_HEIGHT = 720
BUTTON_WIDTH = 200.0
BUTTON_HEIGHT = 30.0
TARGET_FPS = 60
MOVE_SPEED = 3.0
VELOCITY_MULTIPLIER = 1.5
BALL_RADIUS = 10.0

_LEFT_BUTTON = 1

_KEYMAP = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_BACKSPACE: Key.BACKSPACE,
}


def read_frame(previous_buttons: Iterable[Key], events: Iterable[pygame.event.Event]) -> FrameInput:
    """Build the input of one frame from the keys held before it and its events."""
    held = set(previous_buttons)
    pressed: set[Key] = set()
    left_pressed = left_released = False
    mouse = Vec2(0.0, 0.0)
    for event in events:
        pos = getattr(event, "pos", None)
        if pos is not None:
            mouse = Vec2(float(pos[0]), float(pos[1]))
        if event.type == pygame.KEYDOWN:
            key = _KEYMAP.get(event.key)
            if key is not None:
                held.add(key)
                pressed.add(key)
        elif event.type == pygame.KEYUP:
            key = _KEYMAP.get(event.key)
            if key is not None:
                held.discard(key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == _LEFT_BUTTON:
            left_pressed = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == _LEFT_BUTTON:
            left_released = True
    return FrameInput(
        mouse=mouse,
        left_pressed=left_pressed,
        left_released=left_released,
        keys_down=held,
        keys_pressed=pressed,
    )


def _should_close(events: Sequence[pygame.event.Event]) -> bool:
    return any(
        event.type == pygame.QUIT
        or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE)
        for event in events
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="vectorplay",
        description="Draw vectors with the mouse and launch a ball to bounce off them.",
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Vectors")
        clock = pygame.time.Clock()

        button = Button(
            (SCREEN_WIDTH - BUTTON_WIDTH) / 2,
            (SCREEN_HEIGHT - BUTTON_HEIGHT) - 40,
            BUTTON_WIDTH,
            BUTTON_HEIGHT,
            "Create Vector",
        )
        manager = VectorManager()
        ball = Ball(Vec2(SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 2.0), BALL_RADIUS)
        drag = DragState()
        held: Iterable[Key] = frozenset()
        frame_time = 0.0

        while True:
            events = pygame.event.get()
            if _should_close(events):
                break
            x, y = pygame.mouse.get_pos()
            frame = replace(
                read_frame(held, events), mouse=Vec2(float(x), float(y)), frame_time=frame_time
            )
            held = frame.keys_down

            screen.fill((0, 0, 0))
            button.draw(screen)
            manager.create_vector(button, frame)
            manager.check_selection(frame)
            manager.draw(screen)
            manager.move_selected(frame, MOVE_SPEED)

            ball.draw(screen)
            ball.launch(drag, frame, VELOCITY_MULTIPLIER)
            ball.update_position(frame.frame_time)
            ball.window_collision(SCREEN_WIDTH, SCREEN_HEIGHT)
            ball.vector_collision(manager.vectors)

            pygame.display.flip()
            frame_time = clock.tick(TARGET_FPS) / 1000.0
    finally:
        pygame.quit()
    return 0