"""
Character system module for the combat engine.

This module handles the character data model and the per-kind variants that
bind base stats and special abilities.
"""

from .main import Character, SpecialDispatch
from .variants import (
    DEFAULT_NAMES,
    always_use_ability,
    create_character,
    create_goblin,
    create_player,
    create_troll,
    sneaky_stab,
)

__all__ = [
    # Import from main.py
    "Character",
    "SpecialDispatch",
    # Import from variants.py
    "DEFAULT_NAMES",
    "always_use_ability",
    "create_character",
    "create_goblin",
    "create_player",
    "create_troll",
    "sneaky_stab",
]
