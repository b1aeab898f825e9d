"""
Randomness providers for the combat engine.

Every roll in combat (goblin stab success, troll crits, the enemy action
choice) goes through a RandomSource handed to the session, so a seeded or
scripted source makes a whole fight reproducible.
"""

import random
from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """The subset of random.Random used by the engine."""

    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


def make_rng(seed: int | None = None) -> random.Random:
    """
    Creates a seeded random source.

    Args:
        seed (int | None): The seed, or None to seed from the system.

    Returns:
        random.Random: A source satisfying RandomSource.

    """
    return random.Random(seed)


class ScriptedRandom:
    """
    Replays fixed sequences of rolls.

    Floats are served by random() and integers by randrange(); once a
    sequence runs out its last value repeats, so ScriptedRandom(rolls=[0.9])
    fails every probability check forever.
    """

    def __init__(
        self,
        rolls: Iterable[float] = (0.0,),
        choices: Iterable[int] = (0,),
    ) -> None:
        self.rolls: list[float] = list(rolls)
        self.choices: list[int] = list(choices)
        if not self.rolls or not self.choices:
            raise ValueError("ScriptedRandom needs at least one roll and one choice")
        self._roll_index = 0
        self._choice_index = 0

    def random(self) -> float:
        value = self.rolls[min(self._roll_index, len(self.rolls) - 1)]
        self._roll_index += 1
        return value

    def randrange(self, stop: int) -> int:
        value = self.choices[min(self._choice_index, len(self.choices) - 1)]
        self._choice_index += 1
        if not 0 <= value < stop:
            raise ValueError(f"Scripted choice {value} is outside range({stop})")
        return value
