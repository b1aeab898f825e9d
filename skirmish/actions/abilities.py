"""
Abilities module for the combat engine.

Defines the special abilities bound to each character kind. An ability is an
immutable strategy object: it computes a damage value from the attacker's
stats (and, for some, a roll), narrates itself and applies the damage to the
target.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from skirmish.combat.events import AbilityEvent, CombatEvent
from skirmish.core.logging import log_debug
from skirmish.core.randomness import RandomSource

if TYPE_CHECKING:
    from skirmish.character.main import Character


class BaseAbility(BaseModel):
    """Base class for all special abilities.

    Subclasses implement `_compute`, returning the damage to deal and the
    event narrating it; `execute` takes care of applying that damage.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name of the ability.")

    def execute(
        self,
        actor: "Character",
        target: "Character",
        rng: RandomSource,
    ) -> list[CombatEvent]:
        """Execute the ability against a target character.

        Args:
            actor (Character):
                The character using the ability.
            target (Character):
                The character being targeted.
            rng (RandomSource):
                The source for any roll the ability needs.

        Returns:
            list[CombatEvent]:
                The ability narration followed by the damage events.

        """
        damage, event = self._compute(actor, target, rng)
        log_debug(
            f"{actor.name} uses {self.name} on {target.name}",
            {"damage": damage, "critical": event.critical},
        )
        return [event, *target.take_damage(damage)]

    def _compute(
        self,
        actor: "Character",
        target: "Character",
        rng: RandomSource,
    ) -> tuple[int, AbilityEvent]:
        raise NotImplementedError("Subclasses must implement this method.")


class BonusDamageAbility(BaseAbility):
    """An ability dealing the attacker's damage plus a fixed bonus."""

    bonus_damage: int = Field(ge=0, description="Damage added to the base damage.")

    def _compute(
        self,
        actor: "Character",
        target: "Character",
        rng: RandomSource,
    ) -> tuple[int, AbilityEvent]:
        damage = actor.damage + self.bonus_damage
        return damage, AbilityEvent(
            actor=actor.name,
            target=target.name,
            ability=self.name,
            amount=damage,
        )


class PowerStrike(BonusDamageAbility):
    """The player's special: always lands for damage + bonus."""

    name: str = "Power Strike"


class GoblinStab(BonusDamageAbility):
    """The goblin's special, once its sneaky roll succeeded."""

    name: str = "Quick Stab"


class TrollSmash(BaseAbility):
    """The troll's special: a smash that may crit for a multiple of its damage."""

    name: str = "Smash"
    crit_chance: float = Field(ge=0, le=1, description="Probability of a crit.")
    crit_multiplier: int = Field(ge=1, description="Damage multiplier on a crit.")

    def _compute(
        self,
        actor: "Character",
        target: "Character",
        rng: RandomSource,
    ) -> tuple[int, AbilityEvent]:
        critical = rng.random() <= self.crit_chance
        damage = actor.damage * self.crit_multiplier if critical else actor.damage
        return damage, AbilityEvent(
            actor=actor.name,
            target=target.name,
            ability=self.name,
            amount=damage,
            critical=critical,
        )
