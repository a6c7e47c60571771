from .config import Settings
from .errors import GameOverError
from .logic import change_direction, new_game, occupancy_grid, spawn_food, step
from .point import Point
from .state import Direction, PartType, Snake, SnakePart, State

__all__ = [
    "Direction",
    "GameOverError",
    "PartType",
    "Point",
    "Settings",
    "Snake",
    "SnakePart",
    "State",
    "change_direction",
    "new_game",
    "occupancy_grid",
    "spawn_food",
    "step",
]
