"""
Rendering module — scene graph, scene synchronizer and ray picking.
"""

from .scene import (
    Intersection,
    Ray,
    SceneGraph,
    SceneNode,
    SceneSynchronizer,
    intersect_spheres,
)

__all__ = [
    "Intersection",
    "Ray",
    "SceneGraph",
    "SceneNode",
    "SceneSynchronizer",
    "intersect_spheres",
]
