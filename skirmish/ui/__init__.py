"""
User interface module for the Skirmish combat simulator.

This module provides the console adapter over the combat session: menus,
prompts, status display and event rendering.
"""
