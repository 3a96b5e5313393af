"""
Solar System Catalog — the fixed set of bodies shown by the orrery.

Physical data from the JPL Planetary Fact Sheet. semi_major_axis_km is only
used by the circular fallback (bodies without orbital elements); bodies with
elements are placed by the ephemeris.
"""

from __future__ import annotations
from typing import Dict, List

from core.types import BodyDefinition, BodyKey


# (name, radius_km, semi_major_axis_km, orbital_period_days, color_hex)
_SOLAR_SYSTEM = [
    ("Sun",     695700.0,  0.0,            0.0,      0xffcc33),
    ("Mercury", 2439.7,    57.909e6,       87.969,   0x999999),
    ("Venus",   6051.8,    108.209e6,      224.701,  0xe6c27a),
    ("Earth",   6371.0,    149.598e6,      365.256,  0x33bb33),
    ("Mars",    3389.5,    227.939e6,      686.980,  0xbb3333),
    ("Jupiter", 69911.0,   778.479e6,      4332.589, 0xd8a066),
    ("Saturn",  58232.0,   1432.041e6,     10759.22, 0xe8d28c),
    ("Uranus",  25362.0,   2867.043e6,     30685.4,  0x7fd4e6),
    ("Neptune", 24622.0,   4514.953e6,     60189.0,  0x3355dd),
    ("Pluto",   1188.3,    5869.656e6,     90560.0,  0xc8b49a),
]


def build_solar_system() -> List[BodyDefinition]:
    """Return the catalogued bodies, Sun first, in order of distance."""
    return [BodyDefinition(name, r, a, p, color)
            for name, r, a, p, color in _SOLAR_SYSTEM]


def index_by_key(bodies: List[BodyDefinition]) -> Dict[BodyKey, BodyDefinition]:
    return {b.key: b for b in bodies}
