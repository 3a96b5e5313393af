"""
UI Module - pygame screens for the orrery
"""
from .theme import get_theme, Colors, Fonts
from .base_screen import BaseScreen
from .screen_orrery import OrreryScreen

__all__ = [
    "get_theme", "Colors", "Fonts",
    "BaseScreen", "OrreryScreen",
]
