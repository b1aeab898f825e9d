"""
Character management module for the combat engine.

Defines the Character class: health bookkeeping with clamping, the universal
damage, heal and attack operations, and the per-instance special ability
dispatch bound at construction.
"""

from collections.abc import Callable
from typing import TypeAlias

from skirmish.actions.abilities import BaseAbility
from skirmish.combat.events import (
    AttackEvent,
    CombatEvent,
    DamageTakenEvent,
    DefeatEvent,
    HealEvent,
    NoEffectEvent,
)
from skirmish.core.constants import CharacterKind
from skirmish.core.logging import log_debug
from skirmish.core.randomness import RandomSource


class Character:
    """
    Represents a combatant.

    Attributes:
        name (str):
            The name of the character.
        kind (CharacterKind):
            The kind of character (player, goblin, troll).
        max_health (int):
            The maximum health, also the starting health.
        damage (int):
            The damage dealt by a standard attack.
        ability (BaseAbility):
            The special ability bound to this character.

    """

    name: str
    kind: CharacterKind
    max_health: int
    damage: int
    ability: BaseAbility

    def __init__(
        self,
        name: str,
        kind: CharacterKind,
        max_health: int,
        damage: int,
        ability: BaseAbility,
        special: "SpecialDispatch",
    ) -> None:
        if max_health <= 0:
            raise ValueError(f"max_health must be positive, got {max_health}")
        if damage < 0:
            raise ValueError(f"damage must not be negative, got {damage}")
        self.name = name
        self.kind = kind
        self.max_health = max_health
        self.damage = damage
        self.ability = ability
        self._special = special
        self._current_health = max_health

    def __repr__(self) -> str:
        return (
            f"Character({self.name!r}, {self.kind}, "
            f"{self._current_health}/{self.max_health})"
        )

    @property
    def colored_name(self) -> str:
        """
        Returns the character's name with color coding based on its kind.
        """
        return self.kind.colorize(self.name)

    @property
    def current_health(self) -> int:
        return self._current_health

    def _set_health(self, value: int) -> None:
        self._current_health = max(0, min(value, self.max_health))

    def is_alive(self) -> bool:
        """
        Checks if the character is alive (health > 0).

        Returns:
            bool:
                True if the character is alive, False otherwise

        """
        return self._current_health > 0

    def is_full_health(self) -> bool:
        return self._current_health == self.max_health

    def take_damage(self, amount: int) -> list[CombatEvent]:
        """
        Applies damage to the character.

        Negative amounts count as zero. Nothing happens to a character that is
        already defeated.

        Args:
            amount:
                The damage to apply.

        Returns:
            list[CombatEvent]:
                A DamageTakenEvent, followed by a DefeatEvent if the damage
                was lethal; empty if the character was already defeated.

        """
        if not self.is_alive():
            return []

        amount = max(0, amount)
        self._set_health(self._current_health - amount)

        log_debug(
            f"{self.name} takes {amount} damage",
            {"health": self._current_health, "max_health": self.max_health},
        )

        events: list[CombatEvent] = [
            DamageTakenEvent(
                actor=self.name,
                amount=amount,
                current_health=self._current_health,
                max_health=self.max_health,
            )
        ]
        if not self.is_alive():
            events.append(DefeatEvent(actor=self.name))
        return events

    def heal(self, amount: int) -> list[CombatEvent]:
        """
        Increases the character's health by the given amount, up to max_health.

        Args:
            amount:
                The amount of healing to apply; negative amounts count as zero.

        Returns:
            list[CombatEvent]:
                A HealEvent carrying the health actually restored, or a
                NoEffectEvent if nothing was restored; empty if the character
                is defeated.

        """
        if not self.is_alive():
            return []

        old_health = self._current_health
        self._set_health(old_health + max(0, amount))
        healed = self._current_health - old_health

        log_debug(f"{self.name} heals", {"requested": amount, "healed": healed})

        if healed > 0:
            return [
                HealEvent(
                    actor=self.name,
                    amount=healed,
                    current_health=self._current_health,
                    max_health=self.max_health,
                )
            ]
        return [NoEffectEvent(actor=self.name)]

    def attack(self, target: "Character") -> list[CombatEvent]:
        """Performs a standard attack dealing this character's damage."""
        return [
            AttackEvent(actor=self.name, target=target.name),
            *target.take_damage(self.damage),
        ]

    def use_special_ability(
        self, target: "Character", rng: RandomSource
    ) -> list[CombatEvent]:
        """
        Uses this character's special ability on a target.

        What happens depends on the dispatch bound for the character's kind,
        see `skirmish.character.variants`.
        """
        return self._special(self, target, rng)


# The special ability dispatch bound to a character: (actor, target, rng) -> events.
SpecialDispatch: TypeAlias = Callable[
    [Character, Character, RandomSource], list[CombatEvent]
]

