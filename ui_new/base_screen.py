"""
Base Screen Class

Interface the main loop drives once per frame: input, update, render.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

import pygame

from .theme import get_theme


class BaseScreen(ABC):
    """
    Abstract base class for orrery screens.

    handle_input() returns "QUIT" to end the application, None otherwise.
    """

    def __init__(self, screen_name: str):
        self.screen_name = screen_name
        self.theme = get_theme()

    @abstractmethod
    def handle_input(self, events: List[pygame.event.Event]) -> Optional[str]:
        pass

    @abstractmethod
    def update(self, dt: float):
        """Advance per-frame logic; dt in seconds."""
        pass

    @abstractmethod
    def render(self, surface: pygame.Surface):
        pass

    # Shared chrome

    def draw_header(self, surface: pygame.Surface, rect: pygame.Rect,
                    title: str, subtitle: str = ""):
        """Title panel in the top-left corner with an optional second line."""
        colors = self.theme.colors
        self.theme.draw_panel(surface, rect)
        self.theme.draw_text(surface, self.theme.fonts.title(),
                             rect.x + 12, rect.y + 10, title, colors.FG_PRIMARY)
        if subtitle:
            self.theme.draw_text(surface, self.theme.fonts.small(),
                                 rect.x + 12, rect.y + 38, subtitle, colors.FG_DIM)

    def draw_footer(self, surface: pygame.Surface, rect: pygame.Rect, controls: str):
        """Key hints, e.g. "[ESC] Quit"."""
        self.theme.draw_panel(surface, rect)
        self.theme.draw_text(surface, self.theme.fonts.small(),
                             rect.x + 12, rect.y + 8, controls, self.theme.colors.FG_DIM)
