import os

# pygame must not try to open a real window while tests run.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from gridsnake.config import Settings
from gridsnake.logic import new_game


@pytest.fixture
def settings():
    return Settings(field_size=20, initial_length=2, food_count=1, seed=7)


@pytest.fixture
def state(settings):
    s = new_game(settings, random.Random(7))
    # Most tests place their own food.
    s.food.clear()
    return s
