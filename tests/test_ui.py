"""Tests for the pygame front-end that do not need a window."""

from __future__ import annotations

import numpy as np
import pytest

from core.config import OrreryConfig
from game.interaction import Phase
from game.state_manager import build_app_state
from ui_new.theme import Colors, Fonts


def test_trace_colour_is_faded_body_colour() -> None:
    assert Colors.body(0x33bb33) == (0x33, 0xbb, 0x33)
    faded = Colors.trace(0xffffff)
    assert all(sky < c < 255 for sky, c in zip(Colors.BG_SPACE, faded))
    assert Colors.lerp_color((0, 0, 0), (200, 100, 50), 0.5) == (100, 50, 25)


@pytest.fixture
def screen(monkeypatch, instant):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    from ui_new.screen_orrery import OrreryScreen

    state = build_app_state(OrreryConfig(trace_samples=8), instant=instant)
    return OrreryScreen(state)


def test_pointer_ray_inverts_projection(screen) -> None:
    earth = screen.app.scene.get("earth")
    sx, sy = screen.world_to_screen(earth.position)
    ray = screen.pointer_ray((sx, sy))
    np.testing.assert_allclose(ray.origin[:2], earth.position[:2], atol=1e-9)
    np.testing.assert_allclose(ray.direction, [0.0, 0.0, -1.0])


def test_pressing_over_a_body_opens_its_dialog(screen) -> None:
    earth = screen.app.scene.get("earth")
    ray = screen.pointer_ray(screen.world_to_screen(earth.position))
    state = screen.app.interaction.tick(ray, mouse_down=True)
    assert state.phase is Phase.PRESSED
    assert state.dialog_open_for == earth.tag


def test_font_family_falls_back_to_first_installed(monkeypatch) -> None:
    import pygame

    installed = {"courier": "/fonts/courier.ttf"}
    monkeypatch.setattr(pygame.font, "match_font",
                        lambda name, *a, **kw: installed.get(name.lower()))
    assert Fonts.pick_family(("Consolas", "Courier", "monospace")) == "Courier"
    assert Fonts.pick_family(("Consolas",)) is None
