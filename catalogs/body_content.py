"""
Body Detail Content

Text shown in the detail dialog when a body is clicked, keyed by the same
lowercase name as the body catalog. A missing entry is a normal outcome:
the body is still highlighted, no dialog opens.
"""

from typing import Optional

from core.types import BodyKey


BODY_CONTENT = {
    "sun":     "The Sun. G2V main sequence star, age ~4.6 Gyr, "
               "99.86% of the mass of the Solar System.",
    "mercury": "Mercury. Innermost rocky planet, extreme temperature swings, "
               "3:2 spin-orbit resonance.",
    "venus":   "Venus. Thick CO2 atmosphere, surface ~465 C, retrograde rotation.",
    "earth":   "Earth. The only known world with liquid surface oceans and life.",
    "mars":    "Mars. Thin CO2 atmosphere, polar ice caps, Olympus Mons.",
    "jupiter": "Jupiter. Largest planet, Great Red Spot, 95 known moons.",
    "saturn":  "Saturn. Ring system, 146 known moons, lowest density of any planet.",
    "uranus":  "Uranus. Ice giant, rotates on its side (97.8 deg axial tilt).",
    "neptune": "Neptune. Ice giant, strongest winds in the Solar System, 16 moons.",
}


def lookup_content(key: BodyKey | str) -> Optional[str]:
    """Detail text for a body, or None when there is none."""
    return BODY_CONTENT.get(BodyKey.of(key).name)
