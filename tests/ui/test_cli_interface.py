"""
Tests for the console adapter, driven with scripted answers and no pauses.
"""

import itertools

from skirmish.combat.combat_manager import CombatSession
from skirmish.combat.events import (
    AbilityEvent,
    AttackEvent,
    DamageTakenEvent,
    OutcomeEvent,
    WastedTurnEvent,
)
from skirmish.core.constants import CombatOutcome
from skirmish.core.utils import make_bar
from skirmish.ui.cli_interface import (
    PlayerInterface,
    format_event,
    format_status,
    run_game,
)


def scripted_ui(answers):
    answers = iter(answers)
    prompts = []

    def prompt(text):
        prompts.append(text)
        return next(answers)

    ui = PlayerInterface(prompt=prompt, start_delay=0, turn_delay=0, enemy_delay=0)
    return ui, prompts


def test_health_bar():
    assert make_bar(60, 60) == "[" + "#" * 20 + "]"
    assert make_bar(30, 60) == "[" + "#" * 10 + "-" * 10 + "]"
    assert make_bar(0, 60) == "[" + "-" * 20 + "]"
    assert make_bar(5, 0) == "[" + "-" * 20 + "]"


def test_format_event_uses_narration():
    event = DamageTakenEvent(
        actor="Goblin Raider", amount=18, current_health=42, max_health=60
    )
    text = format_event(event)
    assert "Goblin Raider takes 18 damage! Remaining Health: 42/60" in text
    assert text.startswith("[yellow]")


def test_format_event_highlights_crits_and_outcome():
    crit = AbilityEvent(
        actor="Mountain Troll", target="Student Hero", ability="Smash", critical=True
    )
    assert format_event(crit).startswith("[bold magenta]")
    defeat = OutcomeEvent(actor="Student Hero", outcome=CombatOutcome.DEFEAT)
    assert format_event(defeat).startswith("[bold red]")


def test_format_status_shows_index_and_health(player, goblin, unlucky_rng):
    session = CombatSession(player, [goblin], unlucky_rng)
    player_line, goblin_line = (format_status(s) for s in session.status())
    assert "(120/120)" in player_line
    assert "[1] Goblin Raider" in goblin_line
    assert "(60/60)" in goblin_line


def test_action_menu_lists_rest_amount():
    ui, prompts = scripted_ui(["3"])
    assert ui.choose_action(rest_heal=15) == "3"
    assert "Heal 15 HP" in prompts[0]
    assert prompts[0].rstrip().endswith("Action >")


def test_run_game_until_victory(player, goblin, unlucky_rng):
    session = CombatSession(player, [goblin], unlucky_rng)
    ui, _ = scripted_ui(itertools.repeat("1"))
    assert run_game(session, ui) == CombatOutcome.VICTORY
    assert player.current_health == 90


def test_invalid_answers_waste_turns(player, goblin, unlucky_rng):
    session = CombatSession(player, [goblin], unlucky_rng)
    # An unknown action, then an attack on a target that does not exist.
    answers = itertools.chain(["x", "1", "9"], itertools.repeat("1"))
    ui, _ = scripted_ui(answers)
    assert run_game(session, ui) == CombatOutcome.VICTORY
    wasted = [e for e in session.history if isinstance(e, WastedTurnEvent)]
    assert len(wasted) == 2
    # Two wasted rounds plus three rounds before the killing blow.
    assert player.current_health == 120 - 50


def record_output(monkeypatch):
    lines = []
    monkeypatch.setattr(
        "skirmish.ui.cli_interface.crule", lambda title, style="": lines.append(("rule", title))
    )
    monkeypatch.setattr(
        "skirmish.ui.cli_interface.cprint", lambda message: lines.append(("text", message))
    )
    return lines


def test_enemy_turn_separator_precedes_enemy_actions(monkeypatch):
    lines = record_output(monkeypatch)
    ui, _ = scripted_ui([])
    events = [
        AttackEvent(actor="Student Hero", target="Goblin Raider"),
        DamageTakenEvent(
            actor="Goblin Raider", amount=18, current_health=42, max_health=60
        ),
        AbilityEvent(
            actor="Goblin Raider", target="Student Hero", ability="sneaky stab", failed=True
        ),
        AttackEvent(actor="Goblin Raider", target="Student Hero"),
        AttackEvent(actor="Mountain Troll", target="Student Hero"),
    ]
    ui.render_events(events, {"Goblin Raider", "Mountain Troll"})
    rules = [i for i, (kind, _) in enumerate(lines) if kind == "rule"]
    assert [lines[i] for i in rules] == [("rule", "ENEMY TURN")]
    # Player attack and damage come first, then the separator.
    assert rules == [2]
    assert len(lines) == len(events) + 1


def test_no_enemy_turn_separator_when_enemies_do_not_act(monkeypatch):
    lines = record_output(monkeypatch)
    ui, _ = scripted_ui([])
    events = [
        AttackEvent(actor="Student Hero", target="Goblin Raider"),
        DamageTakenEvent(
            actor="Goblin Raider", amount=18, current_health=0, max_health=60
        ),
        OutcomeEvent(actor="Student Hero", outcome=CombatOutcome.VICTORY),
    ]
    ui.render_events(events, {"Goblin Raider"})
    assert all(kind == "text" for kind, _ in lines)
