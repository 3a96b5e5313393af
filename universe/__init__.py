"""
Universe module — solar system bodies and their orbital state.

Usage:
    from universe import build_solar_system, load_orbital_elements, OrbitalPropagator
    bodies = build_solar_system()
    prop = OrbitalPropagator(load_orbital_elements(), display_scale=1e-6)

    pos   = prop.current_position(bodies[3], Instant.now())
    trace = prop.orbit_trace(bodies[3], Instant.now(), 256)
"""

from .ephemeris import (
    OrbitalElements,
    get_state_vector,
    orbital_period_days,
    orbital_period_seconds,
    solve_kepler,
)
from .bodies import build_solar_system, index_by_key
from .catalogue_loader import load_orbital_elements, load_orbital_elements_file
from .propagator import OrbitalPropagator

__all__ = [
    "OrbitalElements",
    "get_state_vector",
    "orbital_period_days",
    "orbital_period_seconds",
    "solve_kepler",
    "build_solar_system",
    "index_by_key",
    "load_orbital_elements",
    "load_orbital_elements_file",
    "OrbitalPropagator",
]
