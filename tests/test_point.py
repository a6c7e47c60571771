"""Tests for grid positions and wrap-around arithmetic."""

from gridsnake.point import Point, mod
from gridsnake.state import Direction


class TestMod:
    def test_negative_wraps_to_far_edge(self):
        """mod() never returns a negative cell index."""
        assert mod(-1, 5) == 4
        assert mod(-6, 5) == 4

    def test_in_range_is_unchanged(self):
        assert mod(3, 5) == 3


class TestPoint:
    def test_add_direction(self):
        """Adding a Direction moves one cell along its delta."""
        assert Point(2, 2) + Direction.UP == Point(2, 1)
        assert Point(2, 2) + Direction.RIGHT == Point(3, 2)

    def test_add_tuple(self):
        assert Point(1, 1) + (2, -1) == Point(3, 0)

    def test_wrap(self):
        """Cells past either edge come back on the opposite one."""
        assert Point(5, 2).wrap(5) == Point(0, 2)
        assert Point(-1, -1).wrap(5) == Point(4, 4)

    def test_neighbours_wrap(self):
        """A corner cell has four distinct neighbours on a torus."""
        assert set(Point(0, 0).neighbours(4)) == {Point(1, 0), Point(3, 0), Point(0, 1), Point(0, 3)}

    def test_hashable_and_equal_to_tuple(self):
        """Points can be looked up in sets of plain tuples and vice versa."""
        assert Point(1, 2) in {(1, 2)}
        assert (1, 2) in {Point(1, 2)}
