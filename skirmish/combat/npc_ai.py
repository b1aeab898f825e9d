"""
Enemy decision making for the combat engine.
"""

from enum import Enum

from skirmish.core.randomness import RandomSource


class EnemyAction(Enum):
    """What an enemy does on its turn."""

    ATTACK = "attack"
    SPECIAL = "special"


def choose_enemy_action(rng: RandomSource, special_odds: int) -> EnemyAction:
    """
    Chooses an enemy's action: one chance in `special_odds` of using its
    special ability, a standard attack otherwise.

    Args:
        rng (RandomSource): The source of the roll.
        special_odds (int): The odds denominator, 3 for a 1/3 chance.

    Returns:
        EnemyAction: The chosen action.

    """
    if rng.randrange(special_odds) == 0:
        return EnemyAction.SPECIAL
    return EnemyAction.ATTACK
