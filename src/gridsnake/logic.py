from __future__ import annotations

import logging
import random

import numpy as np

from .config import Settings
from .errors import GameOverError
from .point import Point
from .state import Direction, PartType, Snake, State

logger = logging.getLogger(__name__)

EMPTY = 0
FOOD = 1
BODY = 2
TAIL = 3
HEAD = 4

_PART_CODES = {PartType.HEAD: HEAD, PartType.BODY: BODY, PartType.TAIL: TAIL}


def new_game(settings: Settings, rng: random.Random | None = None) -> State:
    rng = rng or random.Random(settings.seed)
    snake = Snake.spawn(settings.field_size, settings.initial_length)
    state = State(snake, settings.field_size, rng)
    for _ in range(settings.food_count):
        if spawn_food(state) is None:
            break
    logger.info(
        "new game: %dx%d field, snake length %d, %d food",
        state.size,
        state.size,
        len(snake),
        len(state.food),
    )
    return state


def free_cells(state: State) -> list[Point]:
    taken = state.occupied | state.food
    return [Point(x, y) for y in range(state.size) for x in range(state.size) if (x, y) not in taken]


def spawn_food(state: State, rng: random.Random | None = None) -> Point | None:
    """Put one food item on a random free cell; `rng` defaults to the game's own."""
    cells = free_cells(state)
    if not cells:
        return None
    cell = (rng or state.rng).choice(cells)
    state.food.add(cell)
    logger.debug("food spawned at %r", cell)
    return cell


def change_direction(state: State, direction: Direction) -> bool:
    """Queue a turn for the next tick. Reversing onto the body is ignored."""
    if direction is state.snake.direction.opposite:
        logger.debug("ignored reverse turn %s", direction.name)
        return False
    state.pending = direction
    return True


def step(state: State, rng: random.Random | None = None) -> State:
    if state.game_over:
        raise GameOverError(f"game already over after {state.ticks} ticks")

    vacated, tail_direction = state.snake.advance(state.size, state.pending)
    state.pending = None
    state.ticks += 1
    head = state.snake.head.position

    # What is left after dropping the vacated cell is exactly where the rest
    # of the body now sits.
    state.occupied.discard(vacated)
    if head in state.occupied:
        state.game_over = True
        state.death_reason = "self"
        logger.info("snake ran into itself at %r after %d ticks, score %d", head, state.ticks, state.score)
        return state
    state.occupied.add(head)

    if head in state.food:
        state.food.remove(head)
        state.snake.grow(vacated, tail_direction)
        state.occupied.add(vacated)
        state.score += 1
        logger.debug("ate food at %r, length now %d", head, len(state.snake))
        if spawn_food(state, rng) is None and not state.food:
            state.game_over = True
            state.won = True
            logger.info("board filled after %d ticks, score %d", state.ticks, state.score)

    return state


def occupancy_grid(state: State) -> np.ndarray:
    grid = np.zeros((state.size, state.size), dtype=np.uint8)
    for x, y in state.food:
        grid[y, x] = FOOD
    # Head last so it stays visible on a collision.
    for part in reversed(list(state.snake.parts())):
        x, y = part.position
        grid[y, x] = _PART_CODES[part.part_type]
    return grid
