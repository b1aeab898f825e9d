"""
Core system module for the combat engine.

This module contains the fundamental components shared by the rest of the
package: constants and enumerations, configuration content, the error
taxonomy, logging, randomness providers and console helpers.
"""

from .constants import (
    CharacterKind,
    CombatOutcome,
    PlayerChoice,
)
from .content import (
    CharacterStats,
    CombatSettings,
    EncounterConfig,
    EnemyEntry,
    load_encounter,
    load_settings,
)
from .errors import (
    CombatError,
    InvalidChoiceError,
    InvalidTargetError,
)
from .randomness import (
    RandomSource,
    ScriptedRandom,
    make_rng,
)

__all__ = [
    # Import from constants.py
    "CharacterKind",
    "CombatOutcome",
    "PlayerChoice",
    # Import from content.py
    "CharacterStats",
    "CombatSettings",
    "EncounterConfig",
    "EnemyEntry",
    "load_encounter",
    "load_settings",
    # Import from errors.py
    "CombatError",
    "InvalidChoiceError",
    "InvalidTargetError",
    # Import from randomness.py
    "RandomSource",
    "ScriptedRandom",
    "make_rng",
]
