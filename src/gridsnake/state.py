from __future__ import annotations

import random
from collections.abc import Iterator
from enum import Enum

from .point import Point


class Direction(Enum):
    UP = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class PartType(Enum):
    HEAD = "head"
    BODY = "body"
    TAIL = "tail"


class SnakePart:
    def __init__(
        self,
        part_type: PartType,
        position: Point,
        direction: Direction,
        next_part: SnakePart | None = None,
    ):
        self.part_type = part_type
        self.position = position
        self.direction = direction
        self.next_part = next_part

    def step(self, size: int, next_direction: Direction) -> tuple[Point, Direction]:
        """Move one cell along our own direction, then take on `next_direction`.

        Returns the position and direction this part had before the move, which
        is what the part behind it needs.
        """
        old = (self.position, self.direction)
        self.position = (self.position + self.direction).wrap(size)
        self.direction = next_direction
        return old

    def __repr__(self):
        return f"SnakePart({self.part_type.name}, {self.position!r}, {self.direction.name})"


class Snake:
    """Singly linked chain of parts, head first."""

    def __init__(self, head: SnakePart):
        self.head = head

    @classmethod
    def spawn(cls, size: int, length: int = 2, direction: Direction = Direction.RIGHT) -> Snake:
        # Head one cell past the centre; the rest trails behind it.
        start = Point(size // 2, size // 2) + direction
        back = direction.opposite
        head = SnakePart(PartType.HEAD, start.wrap(size), direction)
        part = head
        pos = start
        for i in range(1, length):
            pos = pos + back
            kind = PartType.TAIL if i == length - 1 else PartType.BODY
            part.next_part = SnakePart(kind, pos.wrap(size), direction)
            part = part.next_part
        return cls(head)

    @property
    def direction(self) -> Direction:
        return self.head.direction

    @property
    def tail(self) -> SnakePart:
        part = self.head
        while part.next_part is not None:
            part = part.next_part
        return part

    def parts(self) -> Iterator[SnakePart]:
        part = self.head
        while part is not None:
            yield part
            part = part.next_part

    def cells(self) -> list[Point]:
        return [p.position for p in self.parts()]

    def __len__(self) -> int:
        return sum(1 for _ in self.parts())

    def advance(self, size: int, direction: Direction | None = None) -> tuple[Point, Direction]:
        """Move the whole chain one tick.

        Every part moves along its own direction and then takes the direction
        the part ahead of it had before this tick. Returns the cell the tail
        vacated and the direction the tail moved with.
        """
        if direction is not None:
            self.head.direction = direction
        part = self.head
        carried = part.direction
        while True:
            vacated, carried = part.step(size, carried)
            if part.next_part is None:
                return vacated, carried
            part = part.next_part

    def grow(self, at: Point, direction: Direction) -> SnakePart:
        old_tail = self.tail
        if old_tail is not self.head:
            old_tail.part_type = PartType.BODY
        old_tail.next_part = SnakePart(PartType.TAIL, at, direction)
        return old_tail.next_part


class State:
    def __init__(self, snake: Snake, size: int, rng: random.Random | None = None):
        self.snake = snake
        self.size = size
        self.rng = rng or random.Random()
        self.food: set[Point] = set()
        self.occupied: set[Point] = set(snake.cells())
        self.pending: Direction | None = None
        self.score = 0
        self.ticks = 0
        self.game_over = False
        self.won = False
        self.death_reason: str | None = None

    def __repr__(self):
        return (
            f"State(size={self.size}, length={len(self.snake)}, score={self.score}, "
            f"ticks={self.ticks}, game_over={self.game_over})"
        )
