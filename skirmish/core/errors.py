"""
Error taxonomy for the combat engine.

None of these errors is fatal: the combat session catches them while
resolving the player's input and turns them into a wasted turn.
"""

from typing import Any


class CombatError(Exception):
    """Base class for recoverable combat input errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class InvalidChoiceError(CombatError):
    """Raised when the player picks an unrecognized menu option."""


class InvalidTargetError(CombatError):
    """Raised when there is no living enemy or the target index is out of range."""
