"""Shared fixtures: a fixed snapshot instant and the default catalog."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.astro_time import Instant
from core.types import BodyDefinition
from universe.bodies import build_solar_system, index_by_key
from universe.catalogue_loader import load_orbital_elements
from universe.propagator import OrbitalPropagator

SCALE = 1.0e-6


@pytest.fixture
def instant() -> Instant:
    return Instant.from_datetime(datetime(2024, 3, 20, 3, 6, tzinfo=timezone.utc))


@pytest.fixture
def elements():
    return load_orbital_elements()


@pytest.fixture
def bodies() -> dict[str, BodyDefinition]:
    return {b.key.name: b for b in index_by_key(build_solar_system()).values()}


@pytest.fixture
def propagator(elements) -> OrbitalPropagator:
    return OrbitalPropagator(elements, SCALE)
