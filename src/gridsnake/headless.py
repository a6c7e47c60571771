from __future__ import annotations

import logging

from .autopilot import choose_direction
from .config import Settings
from .logic import change_direction, new_game, step
from .state import State

logger = logging.getLogger(__name__)


def run(settings: Settings, max_ticks: int = 10_000) -> State:
    """Let the autopilot play without a window until the game ends or time runs out."""
    if max_ticks <= 0:
        raise ValueError(f"max ticks must be positive, got {max_ticks}")

    state = new_game(settings)
    while not state.game_over and state.ticks < max_ticks:
        change_direction(state, choose_direction(state))
        step(state)

    if not state.game_over:
        logger.info("stopped after %d ticks, score %d", state.ticks, state.score)
    return state
