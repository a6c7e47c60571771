from __future__ import annotations

import numpy as np
import pygame

from . import config
from .logic import BODY, FOOD, HEAD, TAIL, occupancy_grid
from .state import State

_COLORS = {FOOD: config.FOOD, BODY: config.BODY, TAIL: config.TAIL, HEAD: config.HEAD}


def field_background(size: int, cell_px: int) -> pygame.Surface:
    """Checkerboard of `size` x `size` cells, composed once up front."""
    yy, xx = np.mgrid[0:size, 0:size]
    checker = ((xx + yy) % 2).astype(bool)
    color = np.empty((size, size, 3), dtype=np.uint8)
    color[checker] = config.FIELD_DARK
    color[~checker] = config.FIELD_LIGHT
    # One pixel per cell, then blow each pixel up to a full cell.
    color = np.repeat(np.repeat(color, cell_px, axis=0), cell_px, axis=1)
    surf = pygame.Surface((size * cell_px, size * cell_px))
    # pygame surfarray is (w, h, c), our buffer is (h, w, c).
    pygame.surfarray.blit_array(surf, np.transpose(color, (1, 0, 2)))
    return surf


def draw_state(screen: pygame.Surface, state: State, background: pygame.Surface, cell_px: int) -> None:
    screen.blit(background, (0, 0))

    grid = occupancy_grid(state)
    ys, xs = np.nonzero(grid)
    for x, y in zip(xs.tolist(), ys.tolist()):
        rect = pygame.Rect(x * cell_px, y * cell_px, cell_px, cell_px)
        pygame.draw.rect(screen, _COLORS[int(grid[y, x])], rect)


def status_line(state: State) -> str:
    if state.won:
        return f"snake - board filled! score {state.score}"
    if state.game_over:
        return f"snake - game over, score {state.score}"
    return f"snake - score {state.score}  length {len(state.snake)}"
