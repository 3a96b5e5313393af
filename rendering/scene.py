"""
Scene graph and synchronizer.

The scene holds one node per body (marker + precomputed orbit trace), keyed
by BodyKey. It is built once from a single Instant: a live snapshot plus a
trace, not an advancing simulation. Drawing the nodes is left to the UI
adapter (ui_new.screen_orrery).

Picking goes through an intersection function, (Ray, nodes) -> hits, so the
interaction code can be driven without a renderer.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Sequence

import numpy as np

from core.astro_time import Instant
from core.config import OrreryConfig
from core.errors import DegenerateOrbitError
from core.types import BodyDefinition, BodyKey, Vector3
from universe.propagator import OrbitalPropagator

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Picking primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Ray:
    origin: Vector3
    direction: Vector3

    def __post_init__(self):
        d = np.asarray(self.direction, dtype=float)
        norm = float(np.linalg.norm(d))
        if norm == 0.0:
            raise ValueError("ray direction must be non-zero")
        object.__setattr__(self, "origin", np.asarray(self.origin, dtype=float))
        object.__setattr__(self, "direction", d / norm)


@dataclass(frozen=True)
class Intersection:
    tag: Optional[BodyKey]
    distance: float
    point: Vector3


# ---------------------------------------------------------------------------
# Scene graph
# ---------------------------------------------------------------------------

@dataclass
class SceneNode:
    """
    One drawable object. Body nodes carry their BodyKey as tag; helper
    geometry has tag None and is never resolved to a body.
    """
    tag: Optional[BodyKey]
    position: Vector3
    radius: float
    nominal_color: int
    color: int = -1
    trace: Optional[np.ndarray] = None
    intersectable: bool = True

    def __post_init__(self):
        if self.color < 0:
            self.color = self.nominal_color


class SceneGraph:
    """Body nodes by key (at most one per body) plus untagged helpers."""

    def __init__(self):
        self._bodies: Dict[BodyKey, SceneNode] = {}
        self._helpers: List[SceneNode] = []

    def add(self, node: SceneNode) -> SceneNode:
        if node.tag is None:
            self._helpers.append(node)
        elif node.tag in self._bodies:
            raise ValueError(f"scene already has a node for {node.tag.name!r}")
        else:
            self._bodies[node.tag] = node
        return node

    def get(self, key: BodyKey | str) -> Optional[SceneNode]:
        return self._bodies.get(BodyKey.of(key))

    def __contains__(self, key) -> bool:
        return isinstance(key, (BodyKey, str)) and BodyKey.of(key) in self._bodies

    def __iter__(self) -> Iterator[SceneNode]:
        return iter(self._bodies.values())

    def __len__(self) -> int:
        return len(self._bodies)

    @property
    def helpers(self) -> List[SceneNode]:
        return list(self._helpers)

    def intersectable_nodes(self) -> List[SceneNode]:
        nodes = list(self._bodies.values()) + self._helpers
        return [n for n in nodes if n.intersectable]

    # ── Material colour ─────────────────────────────────────────────────────

    def set_color(self, key: BodyKey, color: int) -> None:
        self._bodies[key].color = color

    def nominal_color(self, key: BodyKey | str) -> int:
        return self._bodies[BodyKey.of(key)].nominal_color

    def restore_colors(self) -> None:
        for node in self._bodies.values():
            node.color = node.nominal_color


IntersectFn = Callable[[Ray, Sequence[SceneNode]], List[Intersection]]


def intersect_spheres(ray: Ray, nodes: Sequence[SceneNode]) -> List[Intersection]:
    """
    Ray against every node's bounding sphere. Returns all hits in front of
    the ray origin, nearest first.
    """
    hits = []
    for node in nodes:
        oc = ray.origin - node.position
        b = float(np.dot(oc, ray.direction))
        c = float(np.dot(oc, oc)) - node.radius * node.radius
        disc = b * b - c
        if disc < 0.0:
            continue
        s = math.sqrt(disc)
        t = -b - s
        if t < 0.0:
            t = -b + s          # origin inside the sphere
        if t < 0.0:
            continue            # sphere behind the ray
        hits.append(Intersection(node.tag, t, ray.origin + t * ray.direction))
    hits.sort(key=lambda h: h.distance)
    return hits


# ---------------------------------------------------------------------------
# Synchronizer
# ---------------------------------------------------------------------------

class SceneSynchronizer:
    """Turns propagator output into scene nodes, one per body."""

    def __init__(self, propagator: OrbitalPropagator, config: OrreryConfig):
        self.propagator = propagator
        self.config = config

    def display_radius(self, body: BodyDefinition) -> float:
        r = body.radius_km * self.config.display_scale * self.config.body_size_exaggeration
        return min(max(r, self.config.min_body_radius), self.config.max_body_radius)

    def build(self, bodies: Sequence[BodyDefinition], instant: Instant,
              scene: Optional[SceneGraph] = None) -> SceneGraph:
        """
        Place every body at `instant` and attach its orbit trace.

        A degenerate orbit only affects its own body: the marker falls back
        to the circular placement, the trace is left empty.
        """
        scene = scene if scene is not None else SceneGraph()
        for body in bodies:
            scene.add(SceneNode(
                tag=body.key,
                position=self._place(body, instant),
                radius=self.display_radius(body),
                nominal_color=body.color_hex,
                trace=self._trace(body, instant),
            ))
        logger.info("Scene built for %d bodies at %s", len(scene), instant)
        return scene

    def _place(self, body: BodyDefinition, instant: Instant) -> Vector3:
        try:
            return self.propagator.current_position(body, instant)
        except DegenerateOrbitError as e:
            logger.error("Cannot place %s from its elements (%s); using fallback", body.name, e)
            return self.propagator.fallback_position(body)

    def _trace(self, body: BodyDefinition, instant: Instant) -> Optional[np.ndarray]:
        try:
            return self.propagator.orbit_trace(body, instant, self.config.trace_samples)
        except DegenerateOrbitError as e:
            logger.error("No orbit trace for %s: %s", body.name, e)
            return None
