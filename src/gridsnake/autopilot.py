from __future__ import annotations

import logging
from collections import deque

from .point import Point
from .state import Direction, State

logger = logging.getLogger(__name__)


def bfs(start: Point, goals: set[Point], obstacles: set[Point], size: int) -> list[Point] | None:
    """Shortest path on the torus from `start` to the nearest goal, start excluded."""
    queue = deque([[start]])
    visited = {start}
    while queue:
        path = queue.popleft()
        cell = path[-1]
        if cell in goals:
            return path[1:]
        for nxt in cell.neighbours(size):
            if nxt not in obstacles and nxt not in visited:
                visited.add(nxt)
                queue.append(path + [nxt])
    return None


def direction_towards(start: Point, target: Point, size: int) -> Direction | None:
    for d in Direction:
        if (start + d).wrap(size) == target:
            return d
    return None


def choose_direction(state: State) -> Direction:
    snake = state.snake
    head = snake.head.position
    # The tail moves out of the way this tick.
    obstacles = state.occupied - {snake.tail.position}
    # Turning straight back is never allowed, even onto a moving tail.
    obstacles.add((head + snake.direction.opposite).wrap(state.size))

    path = bfs(head, state.food, obstacles, state.size)
    if path:
        return direction_towards(head, path[0], state.size)

    for d in Direction:
        if d is snake.direction.opposite:
            continue
        if (head + d).wrap(state.size) not in obstacles:
            logger.debug("no path to food, sidestepping %s", d.name)
            return d

    return snake.direction  # boxed in
