"""Tests for the pygame drawing helpers, on off-screen surfaces."""

import pygame

from gridsnake import config
from gridsnake.config import Settings
from gridsnake.logic import new_game, step
from gridsnake.point import Point
from gridsnake.render import draw_state, field_background, status_line


def rgb(surf, xy):
    return tuple(surf.get_at(xy))[:3]


class TestFieldBackground:
    def test_size_and_checker(self):
        bg = field_background(4, 3)
        assert bg.get_size() == (12, 12)
        assert rgb(bg, (0, 0)) == config.FIELD_LIGHT
        assert rgb(bg, (2, 2)) == config.FIELD_LIGHT
        assert rgb(bg, (3, 0)) == config.FIELD_DARK
        assert rgb(bg, (0, 3)) == config.FIELD_DARK
        assert rgb(bg, (3, 3)) == config.FIELD_LIGHT


class TestDrawState:
    def test_cells_are_coloured(self):
        state = new_game(Settings(field_size=5, seed=0, cell_px=4))
        state.food.clear()
        state.food.add(Point(0, 0))
        screen = pygame.Surface((20, 20))

        draw_state(screen, state, field_background(5, 4), 4)

        # head (3, 2), tail (2, 2)
        assert rgb(screen, (3 * 4 + 1, 2 * 4 + 1)) == config.HEAD
        assert rgb(screen, (2 * 4 + 1, 2 * 4 + 1)) == config.TAIL
        assert rgb(screen, (1, 1)) == config.FOOD
        assert rgb(screen, (4 * 4 + 1, 4 * 4 + 1)) == config.FIELD_LIGHT


class TestStatusLine:
    def test_running(self, state):
        assert "score 0" in status_line(state)
        assert "length 2" in status_line(state)

    def test_game_over(self, state):
        state.game_over = True
        assert "game over" in status_line(state)

    def test_won(self, state):
        state.game_over = True
        state.won = True
        assert "board filled" in status_line(state)


def test_step_then_draw_does_not_fail():
    state = new_game(Settings(field_size=6, seed=4))
    screen = pygame.Surface((6 * config.BLOCK, 6 * config.BLOCK))
    bg = field_background(6, config.BLOCK)
    for _ in range(3):
        step(state)
        draw_state(screen, state, bg, config.BLOCK)
