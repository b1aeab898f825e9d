"""
Tests for the randomness providers.
"""

import pytest

from skirmish.core.randomness import RandomSource, ScriptedRandom, make_rng


def test_seeded_sources_are_reproducible():
    first, second = make_rng(42), make_rng(42)
    assert [first.random() for _ in range(5)] == [second.random() for _ in range(5)]
    assert [first.randrange(3) for _ in range(5)] == [second.randrange(3) for _ in range(5)]


def test_sources_satisfy_protocol():
    assert isinstance(make_rng(1), RandomSource)
    assert isinstance(ScriptedRandom(), RandomSource)


def test_scripted_values_repeat_the_last_one():
    rng = ScriptedRandom(rolls=[0.1, 0.7], choices=[2, 0])
    assert [rng.random() for _ in range(4)] == [0.1, 0.7, 0.7, 0.7]
    assert [rng.randrange(3) for _ in range(3)] == [2, 0, 0]


def test_scripted_choice_must_fit_the_range():
    rng = ScriptedRandom(choices=[5])
    with pytest.raises(ValueError):
        rng.randrange(3)


def test_scripted_sequences_cannot_be_empty():
    with pytest.raises(ValueError):
        ScriptedRandom(rolls=[])
