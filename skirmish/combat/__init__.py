"""
Combat system module for the combat engine.

This module handles combat events, enemy decision making and the combat
session that sequences player and enemy turns.
"""
