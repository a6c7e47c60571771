from __future__ import annotations

from collections import namedtuple

STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def mod(left: int, right: int) -> int:
    return left % right


class Point(namedtuple("Point", ["x", "y"])):
    """Integer grid cell. Hashable, so it can live in the occupied/food sets."""

    __slots__ = ()

    def __add__(self, other):
        dx, dy = getattr(other, "delta", other)
        return Point(self.x + dx, self.y + dy)

    def __repr__(self):
        return (self.x, self.y).__repr__()

    def wrap(self, size: int) -> Point:
        return Point(mod(self.x, size), mod(self.y, size))

    def neighbours(self, size: int) -> list[Point]:
        return [Point(self.x + dx, self.y + dy).wrap(size) for dx, dy in STEPS]
