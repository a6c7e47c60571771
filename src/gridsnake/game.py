from __future__ import annotations

import logging

import pygame

from . import config
from .autopilot import choose_direction
from .logic import change_direction, new_game, step
from .render import draw_state, field_background, status_line
from .state import Direction, State

logger = logging.getLogger(__name__)

TICK = pygame.USEREVENT + 1

KEY_MAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}


def handle_event(state: State, event: pygame.event.Event, autopilot: bool = False) -> bool:
    """Apply one event to the game. Returns False once the player wants out."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
        return False
    if state.game_over:
        return True

    if event.type == pygame.KEYDOWN and event.key in KEY_MAP:
        change_direction(state, KEY_MAP[event.key])
    elif event.type == TICK:
        if autopilot:
            change_direction(state, choose_direction(state))
        step(state)
        pygame.display.set_caption(status_line(state))
        if state.game_over:
            # Leave the last frame up until the player closes the window.
            pygame.time.set_timer(TICK, 0)
    return True


def main(settings: config.Settings, autopilot: bool = False) -> int:
    pygame.init()
    screen = pygame.display.set_mode((settings.window_px, settings.window_px))
    clock = pygame.time.Clock()
    background = field_background(settings.field_size, settings.cell_px)

    logger.info(
        "window %dx%d px, tick every %d ms, autopilot %s",
        settings.window_px,
        settings.window_px,
        settings.tick_ms,
        autopilot,
    )
    state = new_game(settings)
    pygame.time.set_timer(TICK, settings.tick_ms)
    pygame.display.set_caption(status_line(state))

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(state, event, autopilot):
                running = False
                break

        draw_state(screen, state, background, settings.cell_px)
        pygame.display.flip()
        clock.tick(config.FPS)

    pygame.time.set_timer(TICK, 0)
    pygame.quit()
    print("Game Over! Score:", state.score)
    return 0
