"""
Tests for the Character data model: health clamping, damage, healing and
standard attacks.
"""

import pytest

from skirmish.actions.abilities import PowerStrike
from skirmish.character.main import Character
from skirmish.character.variants import always_use_ability
from skirmish.combat.events import (
    AttackEvent,
    DamageTakenEvent,
    DefeatEvent,
    HealEvent,
    NoEffectEvent,
)
from skirmish.core.constants import CharacterKind

AMOUNTS = [-50, -1, 0, 1, 17, 59, 60, 119, 120, 121, 10_000]


@pytest.mark.parametrize(
    "fixture_name, max_health, damage",
    [("player", 120, 18), ("goblin", 60, 10), ("troll", 110, 16)],
)
def test_characters_start_at_full_health(request, fixture_name, max_health, damage):
    character = request.getfixturevalue(fixture_name)
    assert character.max_health == max_health
    assert character.current_health == max_health
    assert character.damage == damage
    assert character.is_alive()
    assert character.is_full_health()


@pytest.mark.parametrize("fixture_name", ["player", "goblin", "troll"])
@pytest.mark.parametrize("amount", AMOUNTS)
def test_take_damage_keeps_health_in_range(request, fixture_name, amount):
    character = request.getfixturevalue(fixture_name)
    character.take_damage(amount)
    assert 0 <= character.current_health <= character.max_health


@pytest.mark.parametrize("fixture_name", ["player", "goblin", "troll"])
@pytest.mark.parametrize("amount", AMOUNTS)
def test_heal_keeps_health_in_range(request, fixture_name, amount):
    character = request.getfixturevalue(fixture_name)
    character.take_damage(30)
    character.heal(amount)
    assert 0 <= character.current_health <= character.max_health


def test_take_damage_reports_remaining_health(goblin):
    events = goblin.take_damage(25)
    assert events == [
        DamageTakenEvent(actor="Goblin Raider", amount=25, current_health=35, max_health=60)
    ]
    assert goblin.current_health == 35


def test_negative_damage_counts_as_zero(goblin):
    events = goblin.take_damage(-10)
    assert goblin.current_health == 60
    assert events[0].amount == 0


def test_lethal_damage_emits_defeat(goblin):
    events = goblin.take_damage(500)
    assert goblin.current_health == 0
    assert not goblin.is_alive()
    assert isinstance(events[0], DamageTakenEvent)
    assert events[0].current_health == 0
    assert events[1] == DefeatEvent(actor="Goblin Raider")


def test_exact_lethal_damage(goblin):
    goblin.take_damage(60)
    assert goblin.current_health == 0
    assert not goblin.is_alive()


def test_defeated_character_ignores_damage_and_heal(goblin):
    goblin.take_damage(60)
    assert goblin.take_damage(10) == []
    assert goblin.heal(10) == []
    assert goblin.current_health == 0


def test_heal_reports_actual_amount(player):
    player.take_damage(30)
    events = player.heal(15)
    assert events == [
        HealEvent(actor="Student Hero", amount=15, current_health=105, max_health=120)
    ]
    # Only 15 is missing, so only 15 is reported.
    events = player.heal(100)
    assert events[0].amount == 15
    assert player.current_health == 120


def test_heal_at_full_health_has_no_effect(player):
    events = player.heal(15)
    assert events == [NoEffectEvent(actor="Student Hero")]
    assert events[0].amount == 0
    assert player.current_health == 120


def test_negative_heal_has_no_effect(player):
    player.take_damage(40)
    events = player.heal(-20)
    assert isinstance(events[0], NoEffectEvent)
    assert player.current_health == 80


def test_attack_deals_base_damage(goblin, player):
    events = goblin.attack(player)
    assert events[0] == AttackEvent(actor="Goblin Raider", target="Student Hero")
    assert events[1].amount == 10
    assert player.current_health == 110


def test_attack_on_defeated_target_only_narrates(player, goblin):
    goblin.take_damage(60)
    events = player.attack(goblin)
    assert events == [AttackEvent(actor="Student Hero", target="Goblin Raider")]


def test_player_special_uses_bound_ability(player, goblin, unlucky_rng):
    player.use_special_ability(goblin, unlucky_rng)
    assert goblin.current_health == 60 - 30


@pytest.mark.parametrize("max_health, damage", [(0, 5), (-1, 5), (10, -1)])
def test_invalid_stats_are_rejected(max_health, damage):
    with pytest.raises(ValueError):
        Character(
            name="Broken",
            kind=CharacterKind.PLAYER,
            max_health=max_health,
            damage=damage,
            ability=PowerStrike(bonus_damage=12),
            special=always_use_ability,
        )
