"""
Constants and enumerations for the combat engine.

Defines the character kinds, the player's menu choices, the combat outcome
states and the default balance values used when no configuration overrides
them.
"""

from enum import Enum

# Default balance values.
PLAYER_MAX_HEALTH = 120
PLAYER_BASE_DAMAGE = 18
PLAYER_POWER_STRIKE_BONUS = 12
PLAYER_REST_HEAL = 15

GOBLIN_MAX_HEALTH = 60
GOBLIN_BASE_DAMAGE = 10
GOBLIN_STAB_BONUS = 8
GOBLIN_SPECIAL_CHANCE = 0.5

TROLL_MAX_HEALTH = 110
TROLL_BASE_DAMAGE = 16
TROLL_CRIT_CHANCE = 0.25
TROLL_CRIT_MULTIPLIER = 2

# An enemy uses its special ability when randrange(ENEMY_SPECIAL_ODDS) == 0.
ENEMY_SPECIAL_ODDS = 3


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name


class CharacterKind(NiceEnum):
    """Defines the kind of character taking part in combat."""

    PLAYER = "PLAYER"
    GOBLIN = "GOBLIN"
    TROLL = "TROLL"

    @property
    def is_enemy(self) -> bool:
        return self != CharacterKind.PLAYER

    @property
    def color(self) -> str:
        """Returns the color string associated with this character kind."""
        return {
            CharacterKind.PLAYER: "bold blue",
            CharacterKind.GOBLIN: "bold yellow",
            CharacterKind.TROLL: "bold red",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies character kind color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class PlayerChoice(NiceEnum):
    """The actions offered to the player on their turn."""

    ATTACK = "1"
    SPECIAL = "2"
    REST = "3"

    @property
    def needs_target(self) -> bool:
        return self in (PlayerChoice.ATTACK, PlayerChoice.SPECIAL)

    @property
    def label(self) -> str:
        return {
            PlayerChoice.ATTACK: "Standard Attack",
            PlayerChoice.SPECIAL: "Special Ability",
            PlayerChoice.REST: "Rest",
        }[self]

    @classmethod
    def parse(cls, answer: "PlayerChoice | str | None") -> "PlayerChoice | None":
        """
        Resolves a menu answer into a choice.

        Accepts the choice itself, its menu number ("1", "2", "3") or its name
        in any case ("attack", "special", "rest").

        Returns:
            PlayerChoice | None: The matching choice, None if unrecognized.

        """
        if isinstance(answer, PlayerChoice):
            return answer
        if not isinstance(answer, str):
            return None
        answer = answer.strip()
        for choice in cls:
            if answer == choice.value or answer.upper() == choice.name:
                return choice
        return None


class CombatOutcome(NiceEnum):
    """The states of a combat session."""

    IN_PROGRESS = "IN_PROGRESS"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"

    @property
    def is_terminal(self) -> bool:
        return self != CombatOutcome.IN_PROGRESS
