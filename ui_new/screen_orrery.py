"""
Orrery Screen — top-down view of the solar system snapshot

Renders the scene built at startup: orbit traces as polylines, bodies as
discs in their current material colour (nominal or highlight), and the
detail dialog of the pressed body.

Camera: orthographic, looking down the ecliptic pole. The pointer ray
starts above the ecliptic at the pointer's world x/y and points along -z;
it is handed to the interaction state machine once per frame.

Controls
--------
  Mouse over body       Highlight
  Hold left button      Show detail dialog
  Scroll / +/-          Zoom
  ESC                   Quit
"""

from typing import Optional, Tuple

import numpy as np
import pygame

from game.interaction import Cursor
from game.state_manager import AppState
from rendering.scene import Ray
from .base_screen import BaseScreen


# Start of the pick ray, above anything in the scene (display units)
CAMERA_HEIGHT = 1.0e5

# Initial view fits this radius (display units; ~Mars orbit at 1e-6/km)
_INITIAL_VIEW_RADIUS = 260.0

_MIN_ZOOM, _MAX_ZOOM = 0.01, 50.0


class OrreryScreen(BaseScreen):
    """Top-down orrery chart."""

    def __init__(self, app_state: AppState):
        super().__init__("ORRERY")
        self.app = app_state

        cfg = app_state.config
        self.width, self.height = cfg.width, cfg.height
        self.zoom = 0.45 * min(self.width, self.height) / _INITIAL_VIEW_RADIUS   # px per unit

        self.mouse_pos: Tuple[int, int] = (self.width // 2, self.height // 2)
        self.mouse_down = False
        self._cursor = Cursor.DEFAULT

    # -----------------------------------------------------------------------
    # Projection
    # -----------------------------------------------------------------------

    def world_to_screen(self, p) -> Tuple[float, float]:
        return (self.width / 2 + p[0] * self.zoom,
                self.height / 2 - p[1] * self.zoom)

    def pointer_ray(self, pos: Tuple[int, int]) -> Ray:
        wx = (pos[0] - self.width / 2) / self.zoom
        wy = -(pos[1] - self.height / 2) / self.zoom
        return Ray(origin=np.array([wx, wy, CAMERA_HEIGHT]),
                   direction=np.array([0.0, 0.0, -1.0]))

    def _zoom(self, f: float):
        self.zoom = min(_MAX_ZOOM, max(_MIN_ZOOM, self.zoom * f))

    # -----------------------------------------------------------------------
    # Input
    # -----------------------------------------------------------------------

    def handle_input(self, events) -> Optional[str]:
        for event in events:
            if event.type == pygame.KEYDOWN:
                k = event.key
                if   k == pygame.K_ESCAPE: return 'QUIT'
                elif k in (pygame.K_EQUALS, pygame.K_PLUS,  pygame.K_KP_PLUS):  self._zoom(1.25)
                elif k in (pygame.K_MINUS,  pygame.K_KP_MINUS):                  self._zoom(0.8)

            elif event.type == pygame.MOUSEWHEEL:
                self._zoom(1.15 if event.y > 0 else 0.85)

            elif event.type == pygame.MOUSEMOTION:
                self.mouse_pos = event.pos

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.mouse_pos = event.pos
                self.mouse_down = True

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.mouse_pos = event.pos
                self.mouse_down = False

        return None

    def resize(self, width: int, height: int):
        self.width, self.height = width, height

    # -----------------------------------------------------------------------
    # Update
    # -----------------------------------------------------------------------

    def update(self, dt: float):
        # Positions are a fixed snapshot; only interaction changes per frame
        state = self.app.interaction.tick(self.pointer_ray(self.mouse_pos), self.mouse_down)
        if state.cursor != self._cursor:
            self._cursor = state.cursor
            pygame.mouse.set_system_cursor(
                pygame.SYSTEM_CURSOR_HAND if state.cursor == Cursor.POINTER
                else pygame.SYSTEM_CURSOR_ARROW)

    # -----------------------------------------------------------------------
    # Render
    # -----------------------------------------------------------------------

    def render(self, surface: pygame.Surface):
        if (surface.get_width(), surface.get_height()) != (self.width, self.height):
            self.resize(surface.get_width(), surface.get_height())

        surface.fill(self.theme.colors.BG_SPACE)
        self._draw_traces(surface)
        self._draw_bodies(surface)
        self._draw_dialog(surface)

        header = pygame.Rect(10, 10, 380, 60)
        self.draw_header(surface, header, "SOLAR SYSTEM",
                         f"Snapshot {self.app.instant}")
        footer = pygame.Rect(10, self.height - 40, 420, 30)
        self.draw_footer(surface, footer, "[HOLD LMB] Details  [WHEEL] Zoom  [ESC] Quit")

    def _draw_traces(self, surface):
        for node in self.app.scene:
            if node.trace is None or len(node.trace) < 2:
                continue
            colour = self.theme.colors.trace(node.nominal_color)
            points = [self.world_to_screen(p) for p in node.trace]
            pygame.draw.lines(surface, colour, False, points, 1)

    def _draw_bodies(self, surface):
        font = self.theme.fonts.small()
        hovered = set(self.app.interaction.state.highlighted)
        for node in self.app.scene:
            x, y = self.world_to_screen(node.position)
            r = max(2, int(node.radius * self.zoom))
            pygame.draw.circle(surface, self.theme.colors.body(node.color), (int(x), int(y)), r)
            label_col = (self.theme.colors.FG_BRIGHT if node.tag in hovered
                         else self.theme.colors.FG_DIM)
            self.theme.draw_text(surface, font, int(x) + r + 4, int(y) - 7,
                                 node.tag.name.capitalize(), label_col)

    def _draw_dialog(self, surface):
        key = self.app.interaction.state.dialog_open_for
        text = self.app.interaction.dialog_content
        if key is None or text is None:
            return

        self.theme.draw_dialog(surface, self.width - 10, 10, key.name.upper(), text)
