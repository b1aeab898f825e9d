"""
Actions module for the combat engine.

This module holds the special abilities characters bind at construction.
"""

from .abilities import (
    BaseAbility,
    BonusDamageAbility,
    GoblinStab,
    PowerStrike,
    TrollSmash,
)

__all__ = [
    "BaseAbility",
    "BonusDamageAbility",
    "GoblinStab",
    "PowerStrike",
    "TrollSmash",
]
