"""
Shared fixtures.
"""

import pytest

from square_dodger.dodger_core.config_loader import load_config
from square_dodger.dodger_core.game import CoreGame


WORLD_WIDTH = 400
WORLD_HEIGHT = 800


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def game(config):
    game = CoreGame(config=config, seed=42)
    game.initialize(WORLD_WIDTH, WORLD_HEIGHT)
    return game


@pytest.fixture
def running_game(game):
    game.start_run()
    return game
