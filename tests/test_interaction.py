"""Tests for the hover/press interaction state machine."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from core.types import BodyKey
from game.interaction import Cursor, InteractionState, InteractionStateMachine, Phase
from rendering.scene import Intersection, Ray, SceneGraph, SceneNode

HIGHLIGHT = 0xffff00
EARTH, MARS, PLUTO = BodyKey("earth"), BodyKey("mars"), BodyKey("pluto")
NOMINAL = {EARTH: 0x33bb33, MARS: 0xbb3333, PLUTO: 0xc8b49a}


@pytest.fixture
def scene() -> SceneGraph:
    scene = SceneGraph()
    for i, (key, color) in enumerate(NOMINAL.items()):
        scene.add(SceneNode(key, np.array([10.0 * (i + 1), 0.0, 0.0]), 2.0, color))
    scene.add(SceneNode(None, np.zeros(3), 500.0, 0x202020))     # ecliptic helper
    return scene


@pytest.fixture
def machine(scene) -> InteractionStateMachine:
    return InteractionStateMachine(scene, highlight_color=HIGHLIGHT)


def hit(tag, distance=1.0) -> Intersection:
    return Intersection(tag, distance, np.zeros(3))


def colors(scene):
    return {n.tag: n.color for n in scene}


def test_initial_state_is_idle(machine) -> None:
    assert machine.state == InteractionState()
    assert machine.state.phase is Phase.IDLE
    assert machine.dialog_content is None


def test_hover_highlights_without_dialog(machine, scene) -> None:
    state = machine.resolve([hit(EARTH)], mouse_down=False)
    assert state.phase is Phase.HOVERING
    assert state.hovered == EARTH
    assert state.cursor is Cursor.POINTER
    assert state.dialog_open_for is None
    assert colors(scene) == {EARTH: HIGHLIGHT, MARS: 0xbb3333, PLUTO: 0xc8b49a}


def test_press_opens_dialog_and_highlights(machine, scene) -> None:
    state = machine.resolve([hit(EARTH)], mouse_down=True)
    assert state.phase is Phase.PRESSED
    assert state.dialog_open_for == EARTH
    assert scene.get("earth").color == HIGHLIGHT
    assert scene.get("earth").color != 0x33bb33
    assert machine.dialog_content.startswith("Earth")


def test_empty_frame_resets_everything(machine, scene) -> None:
    """One frame without a hit restores colour, cursor and dialog."""
    machine.resolve([hit(MARS)], mouse_down=True)
    assert machine.state.dialog_open_for == MARS

    state = machine.resolve([], mouse_down=True)
    assert state.dialog_open_for is None
    assert state.hovered is None
    assert state.cursor is Cursor.DEFAULT
    assert state.phase is Phase.IDLE
    assert scene.get("mars").color == 0xbb3333
    assert colors(scene) == NOMINAL


def test_release_closes_dialog(machine, scene) -> None:
    machine.resolve([hit(EARTH)], mouse_down=True)
    state = machine.resolve([hit(EARTH)], mouse_down=False)
    assert state.phase is Phase.HOVERING
    assert state.dialog_open_for is None
    assert scene.get("earth").color == HIGHLIGHT


def test_press_on_body_without_content(machine, scene) -> None:
    state = machine.resolve([hit(PLUTO)], mouse_down=True)
    assert state.phase is Phase.PRESSED
    assert state.dialog_open_for is None
    assert scene.get("pluto").color == HIGHLIGHT
    assert machine.dialog_content is None


def test_overlapping_hits_highlight_all(machine, scene) -> None:
    state = machine.resolve([hit(MARS, 1.0), hit(EARTH, 2.0)], mouse_down=True)
    assert state.hovered == MARS
    assert state.highlighted == (MARS, EARTH)
    assert scene.get("mars").color == scene.get("earth").color == HIGHLIGHT
    # the dialog goes to the last matched body with content
    assert state.dialog_open_for == EARTH


def test_overlap_with_contentless_body_picks_body_with_content(machine) -> None:
    state = machine.resolve([hit(EARTH, 1.0), hit(PLUTO, 2.0)], mouse_down=True)
    assert state.dialog_open_for == EARTH


def test_moving_hover_restores_previous_body(machine, scene) -> None:
    machine.resolve([hit(EARTH)], mouse_down=False)
    state = machine.resolve([hit(MARS)], mouse_down=False)
    assert state.hovered == MARS
    assert scene.get("earth").color == 0x33bb33
    assert scene.get("mars").color == HIGHLIGHT


def test_helper_and_unknown_tags_are_ignored(machine, scene) -> None:
    state = machine.resolve([hit(None), hit(BodyKey("vulcan"))], mouse_down=True)
    assert state == InteractionState(mouse_down=True)
    assert colors(scene) == NOMINAL


def test_helper_in_front_does_not_block_body(machine) -> None:
    state = machine.resolve([hit(None, 0.5), hit(EARTH, 1.0)], mouse_down=False)
    assert state.hovered == EARTH


def test_duplicate_hits_collapse(machine) -> None:
    state = machine.resolve([hit(EARTH, 1.0), hit(EARTH, 3.0)], mouse_down=False)
    assert state.highlighted == (EARTH,)


def test_string_tags_are_normalized(machine) -> None:
    state = machine.resolve([hit("EARTH")], mouse_down=True)
    assert state.hovered == EARTH
    assert state.dialog_open_for == EARTH


def test_idle_to_pressed_in_one_frame(machine) -> None:
    assert machine.state.phase is Phase.IDLE
    assert machine.resolve([hit(EARTH)], mouse_down=True).phase is Phase.PRESSED


def test_repeated_frames_are_stable(scene) -> None:
    calls = []

    def lookup(key):
        calls.append(key)
        return "text" if key == EARTH else None

    machine = InteractionStateMachine(scene, content_lookup=lookup, highlight_color=HIGHLIGHT)
    first = machine.resolve([hit(EARTH)], mouse_down=True)
    second = machine.resolve([hit(EARTH)], mouse_down=True)
    assert first == second
    # the open dialog is kept without asking for content again
    assert calls == [EARTH]
    assert machine.dialog_content == "text"
    assert colors(scene)[EARTH] == HIGHLIGHT


def test_tick_passes_all_intersectable_nodes(scene) -> None:
    seen = []

    def fake_intersect(ray, nodes):
        seen.append(list(nodes))
        return [hit(MARS)]

    machine = InteractionStateMachine(scene, intersect=fake_intersect)
    ray = Ray(origin=[0, 0, 10], direction=[0, 0, -1])
    state = machine.tick(ray, mouse_down=False)
    assert state.hovered == MARS
    assert len(seen[0]) == 4
    assert any(n.tag is None for n in seen[0])


def test_tick_with_sphere_intersection(machine, scene) -> None:
    # Earth sits at x=10 with radius 2; the helper disc is hit too
    state = machine.tick(Ray(origin=[10.0, 0.0, 100.0], direction=[0, 0, -1]), mouse_down=True)
    assert state.hovered == EARTH
    assert state.dialog_open_for == EARTH

    state = machine.tick(Ray(origin=[15.0, 0.0, 100.0], direction=[0, 0, -1]), mouse_down=True)
    assert state.phase is Phase.IDLE
    assert colors(scene) == NOMINAL


def test_transitions_are_logged(machine, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="game.interaction"):
        machine.resolve([hit(EARTH)], mouse_down=True)
        machine.resolve([], mouse_down=False)
    assert "opened for earth" in caplog.text
    assert "closed" in caplog.text


def test_colours_are_written_through_the_scene(scene) -> None:
    writes = []
    original = scene.set_color

    def recording_set_color(key, color):
        writes.append((key, color))
        original(key, color)

    scene.set_color = recording_set_color
    InteractionStateMachine(scene, highlight_color=HIGHLIGHT).resolve([hit(MARS)], mouse_down=False)
    assert (MARS, HIGHLIGHT) in writes
    assert (EARTH, NOMINAL[EARTH]) in writes
