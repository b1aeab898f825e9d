"""
Skirmish: a turn-based combat simulator.

A single player character fights a small roster of enemies until one side is
eliminated. This package contains the combat engine (characters, abilities,
the combat session and its events) and a thin console interface over it.
"""
