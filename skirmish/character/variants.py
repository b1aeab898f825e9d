"""
Character variants for the combat engine.

Binds each character kind to its base stats, its ability and the way its
special ability is dispatched. Kinds are a flat table: a character is a plain
Character built by `create_character`, never a subclass.
"""

from functools import partial

from skirmish.actions.abilities import BaseAbility, GoblinStab, PowerStrike, TrollSmash
from skirmish.combat.events import AbilityEvent, CombatEvent
from skirmish.core.constants import CharacterKind
from skirmish.core.content import CombatSettings
from skirmish.core.logging import log_debug
from skirmish.core.randomness import RandomSource

from .main import Character, SpecialDispatch

DEFAULT_NAMES: dict[CharacterKind, str] = {
    CharacterKind.PLAYER: "Student Hero",
    CharacterKind.GOBLIN: "Goblin Raider",
    CharacterKind.TROLL: "Mountain Troll",
}


def always_use_ability(
    actor: Character, target: Character, rng: RandomSource
) -> list[CombatEvent]:
    """Dispatch for kinds whose special never fails (player, troll)."""
    return actor.ability.execute(actor, target, rng)


def sneaky_stab(
    actor: Character,
    target: Character,
    rng: RandomSource,
    success_chance: float,
) -> list[CombatEvent]:
    """
    Dispatch for goblins: the stab only lands if the roll succeeds.

    On a failed roll the goblin narrates the failure and falls back to a
    standard attack, which deals its plain damage.
    """
    roll = rng.random()
    if roll <= success_chance:
        return actor.ability.execute(actor, target, rng)
    log_debug(f"{actor.name} failed the sneaky stab", {"roll": roll})
    return [
        AbilityEvent(
            actor=actor.name,
            target=target.name,
            ability="sneaky stab",
            failed=True,
        ),
        *actor.attack(target),
    ]


def _bind(
    kind: CharacterKind, settings: CombatSettings
) -> tuple[BaseAbility, SpecialDispatch]:
    if kind == CharacterKind.PLAYER:
        return PowerStrike(bonus_damage=settings.power_strike_bonus), always_use_ability
    if kind == CharacterKind.GOBLIN:
        return (
            GoblinStab(bonus_damage=settings.goblin_stab_bonus),
            partial(sneaky_stab, success_chance=settings.goblin_special_chance),
        )
    if kind == CharacterKind.TROLL:
        return (
            TrollSmash(
                crit_chance=settings.troll_crit_chance,
                crit_multiplier=settings.troll_crit_multiplier,
            ),
            always_use_ability,
        )
    raise ValueError(f"Unknown character kind: {kind}")


def create_character(
    kind: CharacterKind,
    name: str | None = None,
    settings: CombatSettings | None = None,
) -> Character:
    """
    Creates a character of the given kind at full health.

    Args:
        kind (CharacterKind): The kind of character.
        name (str | None): Its name; defaults to the kind's default name.
        settings (CombatSettings | None): Balance settings; defaults apply if None.

    Returns:
        Character: The new character.

    """
    settings = settings or CombatSettings()
    stats = settings.stats_for(kind)
    ability, special = _bind(kind, settings)
    return Character(
        name=name or DEFAULT_NAMES[kind],
        kind=kind,
        max_health=stats.max_health,
        damage=stats.damage,
        ability=ability,
        special=special,
    )


def create_player(
    name: str | None = None, settings: CombatSettings | None = None
) -> Character:
    return create_character(CharacterKind.PLAYER, name, settings)


def create_goblin(
    name: str | None = None, settings: CombatSettings | None = None
) -> Character:
    return create_character(CharacterKind.GOBLIN, name, settings)


def create_troll(
    name: str | None = None, settings: CombatSettings | None = None
) -> Character:
    return create_character(CharacterKind.TROLL, name, settings)
