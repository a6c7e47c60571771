from __future__ import annotations

from dataclasses import dataclass

BLOCK = 24
FPS = 60

MIN_FIELD_SIZE = 3
MIN_LENGTH = 2

FIELD_LIGHT = (170, 215, 81)
FIELD_DARK = (162, 209, 73)
FOOD = (231, 71, 29)
HEAD = (38, 70, 200)
BODY = (78, 124, 246)
TAIL = (120, 160, 250)


def cells_for_window(min_side_px: int, cell_px: int = BLOCK) -> int:
    """How many whole cells fit along the short side of a window."""
    if cell_px <= 0:
        raise ValueError(f"cell size must be positive, got {cell_px}")
    return min_side_px // cell_px


@dataclass
class Settings:
    field_size: int = 20
    initial_length: int = 2
    food_count: int = 1
    tick_ms: int = 150
    seed: int | None = None
    cell_px: int = BLOCK

    def __post_init__(self) -> None:
        if self.field_size < MIN_FIELD_SIZE:
            raise ValueError(f"field size must be at least {MIN_FIELD_SIZE}, got {self.field_size}")
        if not MIN_LENGTH <= self.initial_length <= self.field_size:
            raise ValueError(
                f"initial length must be between {MIN_LENGTH} and the field size "
                f"({self.field_size}), got {self.initial_length}"
            )
        if self.food_count < 1:
            raise ValueError(f"food count must be at least 1, got {self.food_count}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick interval must be positive, got {self.tick_ms}")
        if self.cell_px <= 0:
            raise ValueError(f"cell size must be positive, got {self.cell_px}")

    @property
    def window_px(self) -> int:
        return self.field_size * self.cell_px
