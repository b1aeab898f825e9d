"""
Tests for the enemy action choice.
"""

from skirmish.combat.npc_ai import EnemyAction, choose_enemy_action
from skirmish.core.randomness import ScriptedRandom, make_rng


def test_zero_roll_picks_special():
    rng = ScriptedRandom(choices=[0])
    assert choose_enemy_action(rng, 3) == EnemyAction.SPECIAL


def test_other_rolls_pick_attack():
    rng = ScriptedRandom(choices=[1, 2])
    assert choose_enemy_action(rng, 3) == EnemyAction.ATTACK
    assert choose_enemy_action(rng, 3) == EnemyAction.ATTACK


def test_special_is_picked_about_a_third_of_the_time():
    rng = make_rng(1234)
    picks = [choose_enemy_action(rng, 3) for _ in range(3000)]
    ratio = picks.count(EnemyAction.SPECIAL) / len(picks)
    assert 0.28 < ratio < 0.39


def test_odds_of_one_always_picks_special():
    rng = make_rng(7)
    assert all(choose_enemy_action(rng, 1) == EnemyAction.SPECIAL for _ in range(20))
