"""
Combat session for the combat engine.

Sequences a fight between one player and an ordered roster of enemies:
player action, cleanup of defeated enemies, victory check, enemy round, and
defeat check, until one side is eliminated.
"""

from collections.abc import Callable, Iterable

from catchery import log_warning
from pydantic import BaseModel, ConfigDict

from skirmish.character.main import Character
from skirmish.character.variants import create_character
from skirmish.combat.events import (
    CombatEvent,
    OutcomeEvent,
    WastedTurnEvent,
    WasteReason,
)
from skirmish.combat.npc_ai import EnemyAction, choose_enemy_action
from skirmish.core.constants import CharacterKind, CombatOutcome, PlayerChoice
from skirmish.core.content import CombatSettings, EncounterConfig
from skirmish.core.errors import CombatError, InvalidChoiceError, InvalidTargetError
from skirmish.core.logging import log_debug, log_info
from skirmish.core.randomness import RandomSource, make_rng

EventCallback = Callable[[CombatEvent], None]


class CombatantStatus(BaseModel):
    """A snapshot of one participant, as shown before the player's turn."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: CharacterKind
    current_health: int
    max_health: int
    # 1-based position in the living enemy list, None for the player.
    index: int | None = None


class CombatSession:
    """Manages the flow of a fight between the player and a roster of enemies.

    The session never prints. Every operation returns the events it produced;
    the same events are recorded in `history` and delivered to callbacks
    registered with `subscribe`.
    """

    def __init__(
        self,
        player: Character,
        enemies: Iterable[Character],
        rng: RandomSource,
        settings: CombatSettings | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            player (Character): The character controlled by the user.
            enemies (Iterable[Character]): The enemies, in turn order.
            rng (RandomSource): The source of every roll in the fight.
            settings (CombatSettings | None): Balance settings, defaults if None.

        """
        self.player: Character = player
        self.enemies: list[Character] = list(enemies)
        self.rng: RandomSource = rng
        self.settings: CombatSettings = settings or CombatSettings()
        self.round_number: int = 0
        self.history: list[CombatEvent] = []
        self._subscribers: list[EventCallback] = []
        self._outcome: CombatOutcome = CombatOutcome.IN_PROGRESS

    # =========================================================================
    # EVENT CHANNEL
    # =========================================================================

    def subscribe(self, callback: EventCallback) -> None:
        """Registers a callback receiving every event as it is produced."""
        self._subscribers.append(callback)

    def _emit(self, events: list[CombatEvent]) -> list[CombatEvent]:
        for event in events:
            self.history.append(event)
            for callback in self._subscribers:
                callback(event)
        return events

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_living_enemies(self) -> list[Character]:
        """Returns the living enemies in roster order.

        Returns:
            list[Character]: The enemies a player target index refers to.

        """
        return [enemy for enemy in self.enemies if enemy.is_alive()]

    def status(self) -> list[CombatantStatus]:
        """Returns the player followed by the living enemies, numbered from 1."""
        snapshot = [
            CombatantStatus(
                name=self.player.name,
                kind=self.player.kind,
                current_health=self.player.current_health,
                max_health=self.player.max_health,
            )
        ]
        for index, enemy in enumerate(self.get_living_enemies(), 1):
            snapshot.append(
                CombatantStatus(
                    name=enemy.name,
                    kind=enemy.kind,
                    current_health=enemy.current_health,
                    max_health=enemy.max_health,
                    index=index,
                )
            )
        return snapshot

    def check_outcome(self) -> CombatOutcome:
        """Determines the state of the fight.

        Defeat takes precedence over victory. Once a terminal state is
        reached it never changes, and an OutcomeEvent is emitted exactly once.

        Returns:
            CombatOutcome: The current state.

        """
        if self._outcome.is_terminal:
            return self._outcome
        if not self.player.is_alive():
            self._outcome = CombatOutcome.DEFEAT
        elif not self.get_living_enemies():
            self._outcome = CombatOutcome.VICTORY
        if self._outcome.is_terminal:
            log_info(
                f"Combat ends: {self._outcome}",
                {"round": self.round_number, "player_health": self.player.current_health},
            )
            self._emit([OutcomeEvent(actor=self.player.name, outcome=self._outcome)])
        return self._outcome

    def is_over(self) -> bool:
        return self.check_outcome().is_terminal

    # =========================================================================
    # PLAYER TURN
    # =========================================================================

    def run_player_action(
        self,
        choice: PlayerChoice | str | None,
        target_index: int | str | None = None,
    ) -> list[CombatEvent]:
        """Runs the player's action for this round.

        Invalid input never raises: it consumes the turn and produces a
        WastedTurnEvent.

        Args:
            choice (PlayerChoice | str | None):
                The menu answer: a PlayerChoice, "1"/"2"/"3" or
                "attack"/"special"/"rest".
            target_index (int | str | None):
                The 1-based index into the living enemies, needed by attack
                and special.

        Returns:
            list[CombatEvent]: The events produced by the action.

        """
        if self.check_outcome().is_terminal:
            return []
        try:
            events = self._resolve_player_action(choice, target_index)
        except CombatError as e:
            log_warning(e.message, {"player": self.player.name, **e.context})
            reason = (
                WasteReason.INVALID_CHOICE
                if isinstance(e, InvalidChoiceError)
                else WasteReason.INVALID_TARGET
            )
            events = [
                WastedTurnEvent(actor=self.player.name, reason=reason, message=e.message)
            ]
        return self._emit(events)

    def _resolve_player_action(
        self,
        choice: PlayerChoice | str | None,
        target_index: int | str | None,
    ) -> list[CombatEvent]:
        action = PlayerChoice.parse(choice)
        if action is None:
            raise InvalidChoiceError(
                "Invalid choice. Turn skipped.", {"choice": repr(choice)}
            )
        if action == PlayerChoice.REST:
            return self.player.heal(self.settings.rest_heal)
        target = self._select_target(target_index)
        if action == PlayerChoice.ATTACK:
            return self.player.attack(target)
        return self.player.use_special_ability(target, self.rng)

    def _select_target(self, target_index: int | str | None) -> Character:
        living = self.get_living_enemies()
        if not living:
            raise InvalidTargetError("No living enemies to target.")
        if isinstance(target_index, str):
            try:
                target_index = int(target_index.strip())
            except ValueError:
                raise InvalidTargetError(
                    "Invalid target selection.", {"target": repr(target_index)}
                ) from None
        if (
            isinstance(target_index, bool)
            or not isinstance(target_index, int)
            or not 1 <= target_index <= len(living)
        ):
            raise InvalidTargetError(
                "Invalid target selection.",
                {"target": repr(target_index), "living": len(living)},
            )
        return living[target_index - 1]

    def remove_defeated_enemies(self) -> list[Character]:
        """Drops defeated enemies from the roster.

        Returns:
            list[Character]: The enemies removed by this call.

        """
        removed = [enemy for enemy in self.enemies if not enemy.is_alive()]
        if removed:
            self.enemies = [enemy for enemy in self.enemies if enemy.is_alive()]
            log_debug(
                "Removed defeated enemies",
                {"removed": ", ".join(enemy.name for enemy in removed)},
            )
        return removed

    # =========================================================================
    # ENEMY TURN
    # =========================================================================

    def run_enemy_round(self) -> list[CombatEvent]:
        """Lets every living enemy act once against the player, in roster order.

        Enemies left in the sequence are skipped once the player is defeated.

        Returns:
            list[CombatEvent]: The events produced by the enemies.

        """
        if self.check_outcome().is_terminal:
            return []
        events: list[CombatEvent] = []
        for enemy in self.get_living_enemies():
            if not self.player.is_alive():
                log_debug(
                    f"{self.player.name} is down, remaining enemies skip their turn"
                )
                break
            action = choose_enemy_action(self.rng, self.settings.enemy_special_odds)
            if action == EnemyAction.SPECIAL:
                produced = enemy.use_special_ability(self.player, self.rng)
            else:
                produced = enemy.attack(self.player)
            events.extend(self._emit(produced))
        return events

    # =========================================================================
    # ROUND
    # =========================================================================

    def play_round(
        self,
        choice: PlayerChoice | str | None,
        target_index: int | str | None = None,
    ) -> list[CombatEvent]:
        """Runs one full round: player action, cleanup, then the enemy round.

        The enemy round is skipped when the player's action won the fight.

        Returns:
            list[CombatEvent]: Every event of the round, including the
            OutcomeEvent if the round ended the fight.

        """
        if self.check_outcome().is_terminal:
            return []
        start = len(self.history)
        self.run_player_action(choice, target_index)
        self.remove_defeated_enemies()
        if not self.check_outcome().is_terminal:
            self.run_enemy_round()
            self.check_outcome()
        self.round_number += 1
        return self.history[start:]


def build_session(
    encounter: EncounterConfig | None = None,
    settings: CombatSettings | None = None,
    rng: RandomSource | None = None,
) -> CombatSession:
    """Creates a session for an encounter.

    Args:
        encounter (EncounterConfig | None): The roster; the default if None.
        settings (CombatSettings | None): Balance settings; defaults if None.
        rng (RandomSource | None): The source of rolls; an unseeded one if None.

    Returns:
        CombatSession: A session ready for its first round.

    """
    encounter = encounter or EncounterConfig()
    settings = settings or CombatSettings()
    player = create_character(CharacterKind.PLAYER, encounter.player_name, settings)
    enemies = [
        create_character(entry.kind, name, settings)
        for entry, name in zip(encounter.enemies, encounter.unique_enemy_names())
    ]
    return CombatSession(player, enemies, rng or make_rng(), settings)
