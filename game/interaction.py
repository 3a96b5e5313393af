"""
Interaction State Machine

Hover / press handling for the orrery, evaluated once per frame:

    Idle ──(ray hits a body)──▶ Hovering(body) ──(button down)──▶ Pressed(body)
      ▲                              │  ▲                              │
      └──────(no hit this frame)─────┘  └──────(button released)───────┘

Nothing is latched between frames: highlight colours, cursor and the
detail dialog are re-derived from the current intersection results, so a
single frame without a hit fully resets the visual state. Overlapping
bodies are all highlighted.

The dialog opens for a pressed body only if detail content exists for it;
without content the body is still highlighted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from catalogs.body_content import lookup_content
from core.types import BodyKey
from rendering.scene import Intersection, IntersectFn, Ray, SceneGraph, intersect_spheres

logger = logging.getLogger(__name__)

ContentLookup = Callable[[BodyKey], Optional[str]]


class Cursor(Enum):
    DEFAULT = "default"
    POINTER = "pointer"


class Phase(Enum):
    IDLE = "idle"
    HOVERING = "hovering"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionState:
    hovered: Optional[BodyKey] = None
    mouse_down: bool = False
    dialog_open_for: Optional[BodyKey] = None
    cursor: Cursor = Cursor.DEFAULT
    highlighted: Tuple[BodyKey, ...] = ()

    @property
    def phase(self) -> Phase:
        if self.hovered is None:
            return Phase.IDLE
        return Phase.PRESSED if self.mouse_down else Phase.HOVERING


class InteractionStateMachine:
    """
    Owns the InteractionState and the highlight colours of the scene.

    Args:
        scene: scene graph whose body nodes can be picked
        content_lookup: body key -> detail text, or None
        intersect: (ray, nodes) -> hits, nearest first
        highlight_color: 0xRRGGBB applied to hovered bodies
    """

    def __init__(self, scene: SceneGraph,
                 content_lookup: ContentLookup = lookup_content,
                 intersect: IntersectFn = intersect_spheres,
                 highlight_color: int = 0xffff00):
        self.scene = scene
        self.highlight_color = highlight_color
        self._lookup = content_lookup
        self._intersect = intersect
        self.state = InteractionState()

    @property
    def dialog_content(self) -> Optional[str]:
        key = self.state.dialog_open_for
        return self._lookup(key) if key is not None else None

    # ------------------------------------------------------------------

    def tick(self, ray: Ray, mouse_down: bool) -> InteractionState:
        """One frame: intersect the pointer ray with the scene and resolve."""
        hits = self._intersect(ray, self.scene.intersectable_nodes())
        return self.resolve(hits, mouse_down)

    def resolve(self, hits: Sequence[Intersection], mouse_down: bool) -> InteractionState:
        """Derive the new state from this frame's intersection list."""
        matched = self._matched_bodies(hits)
        previous = self.state

        if not matched:
            self.scene.restore_colors()
            new = InteractionState(mouse_down=mouse_down)
        else:
            hit_set = set(matched)
            for node in self.scene:
                self.scene.set_color(node.tag, self.highlight_color if node.tag in hit_set
                                     else node.nominal_color)

            dialog = None
            if mouse_down:
                for key in matched:
                    if key == previous.dialog_open_for or self._lookup(key) is not None:
                        dialog = key
            new = InteractionState(
                hovered=matched[0],
                mouse_down=mouse_down,
                dialog_open_for=dialog,
                cursor=Cursor.POINTER,
                highlighted=tuple(matched),
            )

        self._log_transition(previous, new)
        self.state = new
        return new

    # ------------------------------------------------------------------

    def _matched_bodies(self, hits: Sequence[Intersection]) -> List[BodyKey]:
        matched: List[BodyKey] = []
        for hit in hits:
            if hit.tag is None or hit.tag not in self.scene:
                continue
            key = BodyKey.of(hit.tag)
            if key not in matched:
                matched.append(key)
        return matched

    @staticmethod
    def _log_transition(old: InteractionState, new: InteractionState) -> None:
        if old.phase != new.phase or old.hovered != new.hovered:
            logger.debug("Interaction %s(%s) -> %s(%s)", old.phase.value, old.hovered,
                         new.phase.value, new.hovered)
        if old.dialog_open_for != new.dialog_open_for:
            if new.dialog_open_for is None:
                logger.debug("Detail dialog closed (%s)", old.dialog_open_for)
            else:
                logger.debug("Detail dialog opened for %s", new.dialog_open_for)
