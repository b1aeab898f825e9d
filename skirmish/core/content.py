"""
Configuration content for the combat engine.

Holds the pydantic models describing the balance settings and the encounter
roster, and the helpers that load them from JSON files.
"""

import json
from collections import Counter
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from skirmish.core.constants import (
    ENEMY_SPECIAL_ODDS,
    GOBLIN_BASE_DAMAGE,
    GOBLIN_MAX_HEALTH,
    GOBLIN_SPECIAL_CHANCE,
    GOBLIN_STAB_BONUS,
    PLAYER_BASE_DAMAGE,
    PLAYER_MAX_HEALTH,
    PLAYER_POWER_STRIKE_BONUS,
    PLAYER_REST_HEAL,
    TROLL_BASE_DAMAGE,
    TROLL_CRIT_CHANCE,
    TROLL_CRIT_MULTIPLIER,
    TROLL_MAX_HEALTH,
    CharacterKind,
)
from skirmish.core.logging import log_debug

DEFAULT_ENCOUNTER_FILE = Path(__file__).parent.parent / "data" / "encounter.json"

T = TypeVar("T")


class CharacterStats(BaseModel):
    """Base stats of one character kind."""

    model_config = ConfigDict(frozen=True)

    max_health: int = Field(gt=0, description="Maximum (and starting) health.")
    damage: int = Field(ge=0, description="Damage dealt by a standard attack.")


def _default_stats() -> dict[CharacterKind, CharacterStats]:
    return {
        CharacterKind.PLAYER: CharacterStats(
            max_health=PLAYER_MAX_HEALTH, damage=PLAYER_BASE_DAMAGE
        ),
        CharacterKind.GOBLIN: CharacterStats(
            max_health=GOBLIN_MAX_HEALTH, damage=GOBLIN_BASE_DAMAGE
        ),
        CharacterKind.TROLL: CharacterStats(
            max_health=TROLL_MAX_HEALTH, damage=TROLL_BASE_DAMAGE
        ),
    }


class CombatSettings(BaseModel):
    """Balance settings for every character kind and ability."""

    model_config = ConfigDict(frozen=True)

    stats: dict[CharacterKind, CharacterStats] = Field(
        default_factory=_default_stats,
        description="Base stats per character kind.",
    )
    power_strike_bonus: int = Field(default=PLAYER_POWER_STRIKE_BONUS, ge=0)
    goblin_stab_bonus: int = Field(default=GOBLIN_STAB_BONUS, ge=0)
    goblin_special_chance: float = Field(default=GOBLIN_SPECIAL_CHANCE, ge=0, le=1)
    troll_crit_chance: float = Field(default=TROLL_CRIT_CHANCE, ge=0, le=1)
    troll_crit_multiplier: int = Field(default=TROLL_CRIT_MULTIPLIER, ge=1)
    rest_heal: int = Field(default=PLAYER_REST_HEAL, ge=0)
    enemy_special_odds: int = Field(
        default=ENEMY_SPECIAL_ODDS,
        ge=1,
        description="An enemy uses its special when randrange(odds) == 0.",
    )

    def stats_for(self, kind: CharacterKind) -> CharacterStats:
        """Returns the stats of a kind, falling back to the defaults."""
        return self.stats.get(kind, _default_stats()[kind])


class EnemyEntry(BaseModel):
    """One enemy of the encounter roster."""

    kind: CharacterKind
    name: str = Field(min_length=1)

    @field_validator("kind")
    @classmethod
    def _must_be_enemy(cls, kind: CharacterKind) -> CharacterKind:
        if not kind.is_enemy:
            raise ValueError(f"{kind} cannot be part of the enemy roster")
        return kind


class EncounterConfig(BaseModel):
    """The participants of a fight; enemies act in the listed order."""

    player_name: str = Field(default="Student Hero", min_length=1)
    enemies: list[EnemyEntry] = Field(
        default_factory=lambda: [
            EnemyEntry(kind=CharacterKind.GOBLIN, name="Goblin Raider"),
            EnemyEntry(kind=CharacterKind.TROLL, name="Mountain Troll"),
        ],
        min_length=1,
    )

    def unique_enemy_names(self) -> list[str]:
        """
        Returns the enemy names made unique by appending numbers.

        Only duplicated names are numbered; single instances keep their name.

        Example:
            ["Goblin", "Goblin", "Orc"] -> ["Goblin (1)", "Goblin (2)", "Orc"]

        """
        name_counts = Counter(entry.name for entry in self.enemies)
        seen: Counter[str] = Counter()
        names: list[str] = []
        for entry in self.enemies:
            if name_counts[entry.name] > 1:
                seen[entry.name] += 1
                names.append(f"{entry.name} ({seen[entry.name]})")
            else:
                names.append(entry.name)
        return names


def _load_json_file(
    path: Path,
    loader: Callable[[Any], T],
    description: str,
) -> T:
    """
    Loads a JSON file and hands its content to a loader.

    Args:
        path (Path): The file to read.
        loader (Callable[[Any], T]): Builds the result from the decoded JSON.
        description (str): What the file holds, for logging.

    Returns:
        T: Whatever the loader returns.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        pydantic.ValidationError: If the content does not match the model.

    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    result = loader(data)
    log_debug(f"Loaded {description}", {"path": str(path)})
    return result


def load_settings(path: Path | None = None) -> CombatSettings:
    """
    Loads the combat settings.

    Args:
        path (Path | None): A JSON file overriding the defaults, or None.

    Returns:
        CombatSettings: The settings.

    """
    if path is None:
        return CombatSettings()
    return _load_json_file(path, CombatSettings.model_validate, "combat settings")


def load_encounter(path: Path | None = None) -> EncounterConfig:
    """
    Loads an encounter roster.

    Args:
        path (Path | None): A JSON file, or None for the bundled default.

    Returns:
        EncounterConfig: The encounter.

    """
    return _load_json_file(
        path or DEFAULT_ENCOUNTER_FILE,
        EncounterConfig.model_validate,
        "encounter",
    )
