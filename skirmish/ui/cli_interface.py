"""
User interface module for the combat engine.

A thin console adapter over CombatSession: rich renders the status and the
events, prompt_toolkit reads the player's answers. Answers are passed to the
engine untouched, so an invalid answer wastes the turn instead of
re-prompting.
"""

import time
from collections.abc import Callable

from prompt_toolkit import ANSI, PromptSession
from rich.markup import escape
from rich.table import Table

from skirmish.combat.combat_manager import CombatantStatus, CombatSession
from skirmish.combat.events import (
    AbilityEvent,
    AttackEvent,
    CombatEvent,
    EventType,
    OutcomeEvent,
)
from skirmish.core.constants import CombatOutcome, PlayerChoice
from skirmish.core.utils import ccapture, cprint, crule, make_bar

EVENT_STYLES: dict[EventType, str] = {
    EventType.ON_ATTACK: "white",
    EventType.ON_ABILITY: "bold white",
    EventType.ON_DAMAGE_TAKEN: "yellow",
    EventType.ON_DEATH: "bold red",
    EventType.ON_HEAL: "green",
    EventType.ON_NO_EFFECT: "dim white",
    EventType.ON_WASTED_TURN: "dim white",
    EventType.ON_OUTCOME: "bold",
}


def format_event(event: CombatEvent) -> str:
    """Returns the rich markup used to display an event."""
    style = EVENT_STYLES.get(event.event_type, "white")
    if isinstance(event, AbilityEvent) and event.critical:
        style = "bold magenta"
    if isinstance(event, OutcomeEvent):
        style = "bold green" if event.outcome == CombatOutcome.VICTORY else "bold red"
    return f"[{style}]{escape(str(event))}[/]"


def format_status(status: CombatantStatus) -> str:
    """Returns the status line of a participant, with its health bar."""
    prefix = f"[{status.index}] " if status.index is not None else ""
    line = (
        f"{prefix}{status.name}: {make_bar(status.current_health, status.max_health)} "
        f"({status.current_health}/{status.max_health})"
    )
    return status.kind.colorize(escape(line))


class PlayerInterface:
    """
    Command-line interface for the player.

    Provides rich table menus for the action and target choice and renders
    the session's events. Input is read through prompt_toolkit unless a
    `prompt` callable is given.
    """

    def __init__(
        self,
        prompt: Callable[[str], str] | None = None,
        start_delay: float = 0.5,
        turn_delay: float = 0.65,
        enemy_delay: float = 0.75,
    ) -> None:
        """
        Args:
            prompt: Reads one answer given the prompt text; prompt_toolkit if None.
            start_delay: Pause after the introduction, in seconds.
            turn_delay: Pause after each round, in seconds.
            enemy_delay: Pause before each enemy action, in seconds.
        """
        self._prompt = prompt
        self._session: PromptSession | None = None
        self.start_delay = start_delay
        self.turn_delay = turn_delay
        self.enemy_delay = enemy_delay

    def ask(self, prompt: str) -> str:
        """Reads one line of input."""
        if self._prompt is not None:
            return self._prompt(prompt)
        if self._session is None:
            self._session = PromptSession(erase_when_done=True)
        return self._session.prompt(ANSI(prompt))

    @staticmethod
    def pause(seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)

    def choose_action(self, rest_heal: int) -> str:
        """Shows the action menu and returns the raw answer."""
        table = Table(title="Your Turn", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Action", style="bold")
        for choice in PlayerChoice:
            label = choice.label
            if choice == PlayerChoice.REST:
                label = f"{label} (Heal {rest_heal} HP)"
            table.add_row(choice.value, label)
        return self.ask("\n" + ccapture(table) + "\nAction > ")

    def choose_target(self, statuses: list[CombatantStatus]) -> str:
        """Shows the living enemies and returns the raw answer."""
        table = Table(title="Select Target", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Name", style="bold")
        table.add_column("Health", style="yellow")
        for status in statuses:
            if status.index is None:
                continue
            table.add_row(
                str(status.index),
                status.name,
                f"{status.current_health}/{status.max_health}",
            )
        return self.ask("\n" + ccapture(table) + "\nTarget > ")

    def render_status(self, statuses: list[CombatantStatus]) -> None:
        crule("STATUS", style="cyan")
        for status in statuses:
            cprint(format_status(status))

    def render_event(self, event: CombatEvent) -> None:
        cprint(format_event(event))

    def render_events(self, events: list[CombatEvent], enemy_names: set[str]) -> None:
        """Renders a round, opening the enemy turn with a separator and pausing
        before each enemy's action."""
        previous: CombatEvent | None = None
        enemy_turn = False
        for event in events:
            # A failed stab and its fallback attack are a single enemy action.
            follows_failed_stab = isinstance(previous, AbilityEvent) and previous.failed
            if (
                isinstance(event, (AttackEvent, AbilityEvent))
                and event.actor in enemy_names
                and not follows_failed_stab
            ):
                if not enemy_turn:
                    crule("ENEMY TURN", style="red")
                    enemy_turn = True
                self.pause(self.enemy_delay)
            self.render_event(event)
            previous = event

    def render_banner(self, outcome: CombatOutcome) -> None:
        if outcome == CombatOutcome.VICTORY:
            crule("VICTORY ACHIEVED!", style="bold green")
        else:
            crule("DEFEAT! GAME OVER.", style="bold red")


def play_turn(session: CombatSession, ui: PlayerInterface) -> list[CombatEvent]:
    """
    Asks the player for one action (and target when needed), then plays the
    round.
    """
    statuses = session.status()
    ui.render_status(statuses)
    answer = ui.choose_action(session.settings.rest_heal)
    choice = PlayerChoice.parse(answer)
    target: str | None = None
    if choice is not None and choice.needs_target:
        target = ui.choose_target(statuses)
    return session.play_round(answer, target)


def run_game(session: CombatSession, ui: PlayerInterface) -> CombatOutcome:
    """
    Runs the fight until one side is eliminated.

    Returns:
        CombatOutcome: VICTORY or DEFEAT.

    """
    crule("RPG COMBAT SIM", style="bold green")
    cprint(f"\nA challenging encounter awaits, {session.player.colored_name}!")
    ui.pause(ui.start_delay)
    while not session.is_over():
        enemy_names = {enemy.name for enemy in session.enemies}
        events = play_turn(session, ui)
        ui.render_events(events, enemy_names)
        ui.pause(ui.turn_delay)
    outcome = session.check_outcome()
    ui.render_banner(outcome)
    return outcome
