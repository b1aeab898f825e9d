"""
Shared fixtures for the combat engine tests.
"""

import pytest

from skirmish.character.variants import create_goblin, create_player, create_troll
from skirmish.core.randomness import ScriptedRandom


@pytest.fixture
def player():
    return create_player()


@pytest.fixture
def goblin():
    return create_goblin()


@pytest.fixture
def troll():
    return create_troll()


@pytest.fixture
def lucky_rng():
    """Every probability check succeeds, every enemy uses its special."""
    return ScriptedRandom(rolls=[0.0], choices=[0])


@pytest.fixture
def unlucky_rng():
    """Every probability check fails, every enemy makes a standard attack."""
    return ScriptedRandom(rolls=[0.99], choices=[1])
