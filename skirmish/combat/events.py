"""
Event system module for the combat engine.

Every engine operation reports what happened as structured events instead of
printing; the presentation layer decides how to render them.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from skirmish.core.constants import CombatOutcome


class EventType(Enum):
    """Enumeration of available event types."""

    ON_ATTACK = "on_attack"  # A standard attack is launched
    ON_ABILITY = "on_ability"  # A special ability is used (or fumbled)
    ON_DAMAGE_TAKEN = "on_damage_taken"  # A character loses health
    ON_DEATH = "on_death"  # A character reaches 0 health
    ON_HEAL = "on_heal"  # A character regains health
    ON_NO_EFFECT = "on_no_effect"  # A heal on a full-health character
    ON_WASTED_TURN = "on_wasted_turn"  # Invalid input consumed the turn
    ON_OUTCOME = "on_outcome"  # The session reached a terminal state


class WasteReason(Enum):
    """Why a player turn was wasted."""

    INVALID_CHOICE = "invalid_choice"
    INVALID_TARGET = "invalid_target"


class CombatEvent(BaseModel):
    """Base class for all combat events."""

    model_config = ConfigDict(frozen=True)

    event_type: EventType = Field(description="The type of event.")
    actor: str = Field(description="Name of the character the event is about.")


class AttackEvent(CombatEvent):
    """A standard attack from actor on target."""

    event_type: EventType = EventType.ON_ATTACK
    target: str = Field(description="Name of the attacked character.")

    def __str__(self) -> str:
        return f"{self.actor} attacks {self.target} with a standard strike."


class AbilityEvent(CombatEvent):
    """A special ability used by actor on target."""

    event_type: EventType = EventType.ON_ABILITY
    target: str = Field(description="Name of the targeted character.")
    ability: str = Field(description="Name of the ability.")
    amount: int = Field(default=0, ge=0, description="Damage about to be dealt.")
    critical: bool = Field(default=False, description="Whether the ability crit.")
    failed: bool = Field(
        default=False,
        description="Whether the ability failed and fell back to an attack.",
    )

    def __str__(self) -> str:
        if self.failed:
            return f"{self.actor} failed the {self.ability}!"
        if self.critical:
            return f"{self.actor} lands a CRITICAL {self.ability.upper()}!"
        return f"{self.actor} uses {self.ability} on {self.target}!"


class DamageTakenEvent(CombatEvent):
    """Actor lost health."""

    event_type: EventType = EventType.ON_DAMAGE_TAKEN
    amount: int = Field(ge=0, description="Damage requested after clamping.")
    current_health: int = Field(ge=0, description="Health after the damage.")
    max_health: int = Field(gt=0, description="Maximum health of the actor.")

    def __str__(self) -> str:
        return (
            f"{self.actor} takes {self.amount} damage! "
            f"Remaining Health: {self.current_health}/{self.max_health}"
        )


class DefeatEvent(CombatEvent):
    """Actor's health reached zero."""

    event_type: EventType = EventType.ON_DEATH

    def __str__(self) -> str:
        return f"*** {self.actor} has been defeated! ***"


class HealEvent(CombatEvent):
    """Actor regained health."""

    event_type: EventType = EventType.ON_HEAL
    amount: int = Field(gt=0, description="Health actually restored.")
    current_health: int = Field(ge=0)
    max_health: int = Field(gt=0)

    def __str__(self) -> str:
        return f"{self.actor} heals for {self.amount} HP."


class NoEffectEvent(CombatEvent):
    """A heal that restored nothing because actor was at full health."""

    event_type: EventType = EventType.ON_NO_EFFECT
    amount: int = 0

    def __str__(self) -> str:
        return f"{self.actor} is already at full health."


class WastedTurnEvent(CombatEvent):
    """Actor's turn was consumed by invalid input."""

    event_type: EventType = EventType.ON_WASTED_TURN
    reason: WasteReason
    message: str = ""

    def __str__(self) -> str:
        if self.reason == WasteReason.INVALID_CHOICE:
            return "Invalid choice. Turn skipped."
        return "Invalid target selection. Turn skipped."


class OutcomeEvent(CombatEvent):
    """The session ended; actor is the player."""

    event_type: EventType = EventType.ON_OUTCOME
    outcome: CombatOutcome

    def __str__(self) -> str:
        if self.outcome == CombatOutcome.VICTORY:
            return "VICTORY ACHIEVED!"
        return "DEFEAT! GAME OVER."
