"""
Orbital State Propagator

For one body and one instant: the current placement.
For one body and a start instant: N+1 positions sampled over one orbit.

Bodies with orbital elements go through the ephemeris provider; the others
use a circular approximation of radius semi_major_axis_km, which does not
move with time (static fallback placement at angle 0).

All outputs are in display units: km × display_scale, the same factor for
positions and traces.
"""

from __future__ import annotations

import functools
import logging
import math
from typing import Callable, Mapping, Optional

import numpy as np

from core.astro_time import Instant
from core.config import MU_SUN_KM3_S2
from core.errors import DegenerateOrbitError
from core.types import BodyDefinition, BodyKey, StateVector, Vector3
from .ephemeris import OrbitalElements, get_state_vector, orbital_period_seconds

logger = logging.getLogger(__name__)

EphemerisProvider = Callable[[OrbitalElements, Instant], StateVector]


class OrbitalPropagator:
    """
    Parameters
    ----------
    elements      : orbital-element lookup from the catalogue loader
    display_scale : display units per km
    provider      : ephemeris provider (default: Keplerian get_state_vector)
    mu            : gravitational parameter used for the trace period (km³/s²)
    """

    def __init__(self,
                 elements: Mapping[BodyKey, OrbitalElements],
                 display_scale: float,
                 provider: Optional[EphemerisProvider] = None,
                 mu: float = MU_SUN_KM3_S2):
        self._elements = dict(elements)
        self.display_scale = display_scale
        self.mu = mu
        # Same μ for the provider and the Kepler period, or traces won't close
        self._provider = provider or functools.partial(get_state_vector, mu=mu)

    # ── Lookup ───────────────────────────────────────────────────────────────

    def elements_for(self, body: BodyDefinition) -> Optional[OrbitalElements]:
        return self._elements.get(body.key)

    # ── Current placement ────────────────────────────────────────────────────

    def current_position(self, body: BodyDefinition, instant: Instant) -> Vector3:
        """Position of `body` at `instant`, display units."""
        elements = self.elements_for(body)
        if elements is None:
            return self.fallback_position(body)

        position = self._provider(elements, instant).position * self.display_scale
        if not np.all(np.isfinite(position)):
            raise DegenerateOrbitError(f"non-finite position for {body.name}")
        return position

    def fallback_position(self, body: BodyDefinition) -> Vector3:
        """Point on the circular fallback orbit at angle 0."""
        return np.array([body.semi_major_axis_km * self.display_scale, 0.0, 0.0])

    # ── Orbit trace ──────────────────────────────────────────────────────────

    def orbit_trace(self, body: BodyDefinition, instant0: Instant,
                    sample_count: int) -> np.ndarray:
        """
        sample_count+1 positions over one orbit, shape (sample_count+1, 3).

        With elements, samples are evenly spaced in time over
        [instant0, instant0 + T], T from Kepler's third law, so the first
        and last points coincide. sample_count=0 still yields 2 points.
        """
        if sample_count < 0:
            raise ValueError(f"sample_count must be >= 0, got {sample_count}")
        samples = max(sample_count, 1)

        elements = self.elements_for(body)
        if elements is None:
            return self.fallback_trace(body, samples)

        period_s = orbital_period_seconds(elements.a, self.mu)
        offsets = np.linspace(0.0, period_s, samples + 1)
        points = np.array([self._provider(elements, instant0.shifted(float(dt))).position
                           for dt in offsets]) * self.display_scale
        if not np.all(np.isfinite(points)):
            raise DegenerateOrbitError(f"non-finite trace point for {body.name}")

        logger.debug("Trace for %s: %d points over %.1f days",
                     body.name, len(points), period_s / 86400.0)
        return points

    def fallback_trace(self, body: BodyDefinition, sample_count: int) -> np.ndarray:
        """Perfect circle of radius semi_major_axis_km in the ecliptic plane."""
        samples = max(sample_count, 1)
        radius = body.semi_major_axis_km * self.display_scale
        angles = np.linspace(0.0, 2.0 * math.pi, samples + 1)
        return np.column_stack((radius * np.cos(angles),
                                radius * np.sin(angles),
                                np.zeros_like(angles)))
