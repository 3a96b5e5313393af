"""
Theme - palette, fonts and drawing helpers for the orrery UI

Phosphor-green panels over a near-black sky. Body colours come from the
catalog (0xRRGGBB); the helpers here turn them into pygame RGB tuples.
"""

import logging
import textwrap
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import pygame

from core.types import hex_to_rgb

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


class Colors:
    """Color palette"""

    BG_SPACE = (2, 4, 14)        # Sky behind the ecliptic
    BG_PANEL = (0, 20, 15)       # Header / dialog fill

    FG_PRIMARY = (0, 255, 120)   # Panel text
    FG_DIM = (0, 180, 80)        # Labels, hints
    FG_BRIGHT = (120, 255, 180)  # Labels of highlighted bodies

    BORDER_NORMAL = FG_PRIMARY
    BORDER_FOCUS = (0, 255, 255)  # Open detail dialog

    # Orbit traces are drawn this far from the sky towards the body colour
    TRACE_MIX = 0.45

    @staticmethod
    def lerp_color(a: RGB, b: RGB, t: float) -> RGB:
        """Linear blend from `a` (t=0) to `b` (t=1)."""
        return tuple(int(ca + (cb - ca) * t) for ca, cb in zip(a, b))

    @classmethod
    def body(cls, color_hex: int) -> RGB:
        return hex_to_rgb(color_hex)

    @classmethod
    def trace(cls, color_hex: int) -> RGB:
        """Faded body colour for its orbit trace."""
        return cls.lerp_color(cls.BG_SPACE, hex_to_rgb(color_hex), cls.TRACE_MIX)


@dataclass
class FontConfig:
    """Font configuration"""
    families: Tuple[str, ...] = ("Consolas", "Courier New", "Courier", "monospace")
    size_title: int = 24
    size_normal: int = 18
    size_small: int = 14


class Fonts:
    """
    Font cache, filled on first use.

    The first configured family installed on the system is used (looked up
    with match_font); with none installed, the pygame default font.
    """

    _fonts: Dict[str, pygame.font.Font] = {}
    _config = FontConfig()

    @classmethod
    def initialize(cls, config: Optional[FontConfig] = None):
        if config is not None:
            cls._config = config
        pygame.font.init()

        sizes = {'title': cls._config.size_title,
                 'normal': cls._config.size_normal,
                 'small': cls._config.size_small}
        family = cls.pick_family(cls._config.families)
        if family is None:
            logger.debug("No configured font family installed, using the pygame default")
            cls._fonts = {name: pygame.font.Font(None, size) for name, size in sizes.items()}
        else:
            cls._fonts = {name: pygame.font.SysFont(family, size, bold=(name == 'title'))
                          for name, size in sizes.items()}

    @staticmethod
    def pick_family(families) -> Optional[str]:
        for family in families:
            if pygame.font.match_font(family):
                return family
        return None

    @classmethod
    def get(cls, size: str = 'normal') -> pygame.font.Font:
        if not cls._fonts:
            cls.initialize()
        return cls._fonts.get(size, cls._fonts['normal'])

    @classmethod
    def title(cls) -> pygame.font.Font:
        return cls.get('title')

    @classmethod
    def small(cls) -> pygame.font.Font:
        return cls.get('small')


class Theme:
    """Palette, fonts and the panel/text primitives every screen draws with."""

    def __init__(self):
        self.colors = Colors()
        self.fonts = Fonts()
        self.border_width = 2
        self.line_height = 20

    def draw_panel(self, surface: pygame.Surface, rect: pygame.Rect,
                   title: str = "", border: Optional[RGB] = None):
        """Filled rectangle with a border and an optional title line."""
        border = border or self.colors.BORDER_NORMAL
        pygame.draw.rect(surface, self.colors.BG_PANEL, rect)
        pygame.draw.rect(surface, border, rect, self.border_width)
        if title:
            self.draw_text(surface, self.fonts.get('normal'),
                           rect.x + 10, rect.y + 8, title, border)

    def draw_text(self, surface: pygame.Surface, font: pygame.font.Font,
                  x: int, y: int, text: str, color: RGB):
        # No antialiasing: matches the pixel font look of the panels
        surface.blit(font.render(text, False, color), (x, y))

    def wrap(self, text: str, width_chars: int) -> List[str]:
        return textwrap.wrap(text, width_chars)

    def draw_dialog(self, surface: pygame.Surface, right: int, top: int,
                    title: str, text: str, width_px: int = 420, width_chars: int = 44):
        """
        Detail dialog anchored at its top-right corner: title bar plus the
        body text wrapped to `width_chars`.
        """
        lines = self.wrap(text, width_chars)
        rect = pygame.Rect(right - width_px, top, width_px,
                           50 + self.line_height * len(lines))
        self.draw_panel(surface, rect, title=title, border=self.colors.BORDER_FOCUS)
        font = self.fonts.small()
        for i, line in enumerate(lines):
            self.draw_text(surface, font, rect.x + 10, rect.y + 38 + self.line_height * i,
                           line, self.colors.FG_PRIMARY)
        return rect


_theme = None

def get_theme() -> Theme:
    """Shared theme instance (fonts need pygame to be initialized first)."""
    global _theme
    if _theme is None:
        _theme = Theme()
        _theme.fonts.initialize()
    return _theme
