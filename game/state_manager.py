"""
Application State

Everything the orrery needs at runtime, built once at startup and passed
explicitly to whoever needs it (no module-level singleton):

    state = build_app_state(load_config())
    state.scene          # SceneGraph with one node per body
    state.interaction    # InteractionStateMachine driving highlight/dialog
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from catalogs.body_content import lookup_content
from core.astro_time import Instant
from core.config import OrreryConfig
from core.types import BodyDefinition, BodyKey
from rendering.scene import SceneGraph, SceneSynchronizer
from universe.bodies import build_solar_system, index_by_key
from universe.catalogue_loader import load_orbital_elements, load_orbital_elements_file
from universe.ephemeris import OrbitalElements
from universe.propagator import OrbitalPropagator
from .interaction import InteractionStateMachine

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Runtime state shared by the frame loop and the screen"""
    config: OrreryConfig
    instant: Instant                  # snapshot time of the scene
    bodies: List[BodyDefinition]
    elements: Dict[BodyKey, OrbitalElements]
    propagator: OrbitalPropagator
    scene: SceneGraph
    interaction: InteractionStateMachine


def build_app_state(config: OrreryConfig,
                    instant: Optional[Instant] = None,
                    elements: Optional[Dict[BodyKey, OrbitalElements]] = None) -> AppState:
    """
    Load the catalog, propagate every body at `instant` (default: now) and
    build the scene and interaction machine.
    """
    if instant is None:
        instant = Instant.now()
    if elements is None:
        if config.catalog_path:
            elements = load_orbital_elements_file(config.catalog_path)
        else:
            elements = load_orbital_elements()

    bodies = build_solar_system()
    unknown = set(elements) - set(index_by_key(bodies))
    if unknown:
        logger.warning("Orbital elements for unknown bodies ignored: %s",
                       ", ".join(sorted(k.name for k in unknown)))

    propagator = OrbitalPropagator(elements, config.display_scale, mu=config.mu_sun_km3_s2)
    scene = SceneSynchronizer(propagator, config).build(bodies, instant)
    interaction = InteractionStateMachine(scene, content_lookup=lookup_content,
                                          highlight_color=config.highlight_color)

    return AppState(
        config=config,
        instant=instant,
        bodies=bodies,
        elements=elements,
        propagator=propagator,
        scene=scene,
        interaction=interaction,
    )
