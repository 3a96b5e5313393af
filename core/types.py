from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np


# Position / velocity triple. Always a float64 ndarray of shape (3,).
Vector3 = np.ndarray


@dataclass(frozen=True, slots=True)
class BodyKey:
    """
    Identity of a body, shared by the body catalog, the orbital-element
    lookup and the scene graph. Always stored stripped and lowercase, so
    BodyKey("Earth") == BodyKey(" earth ").
    """
    name: str

    def __post_init__(self):
        object.__setattr__(self, "name", self.name.strip().lower())

    @classmethod
    def of(cls, value: "BodyKey | str") -> "BodyKey":
        return value if isinstance(value, BodyKey) else cls(value)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class BodyDefinition:
    """One catalogued body. Fixed at startup, never mutated."""
    name: str
    radius_km: float
    semi_major_axis_km: float
    orbital_period_days: float
    color_hex: int
    key: BodyKey = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "key", BodyKey(self.name))


@dataclass(frozen=True, slots=True)
class StateVector:
    # heliocentric ecliptic J2000, km and km/s
    position: Vector3
    velocity: Vector3


def hex_to_rgb(color_hex: int) -> tuple[int, int, int]:
    """0xRRGGBB -> (r, g, b)"""
    return ((color_hex >> 16) & 0xFF, (color_hex >> 8) & 0xFF, color_hex & 0xFF)
