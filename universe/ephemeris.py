"""
Ephemeris Provider — Keplerian elements + instant → heliocentric state vector.

Elements are stored in the MPC style (mean anomaly at epoch + argument of
perihelion) instead of the JPL style (mean longitude + longitude of
perihelion). The mean motion is derived from the semi-major axis and μ_sun,
so one Kepler period brings the body exactly back to its starting point:
the orbit traces close on themselves.

Frame: heliocentric ecliptic J2000.
Units: position in km, velocity in km/s.

Usage:
    elems = OrbitalElements(a=1.00000261, e=0.01671123, i=0.0,
                            omega=102.93768193, Om=0.0, M0=357.52688973)
    sv = get_state_vector(elems, Instant.now())
    sv.position   # ndarray (3,), km
    sv.velocity   # ndarray (3,), km/s
"""

from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np
from scipy.spatial.transform import Rotation

from core.astro_time import Instant, J2000_JD, SECONDS_PER_DAY
from core.config import AU_KM, MU_SUN_KM3_S2
from core.errors import DegenerateOrbitError
from core.types import StateVector


# ---------------------------------------------------------------------------
# Orbital Elements
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OrbitalElements:
    """
    Classical Keplerian elements at epoch.

    Units:
        a        : semi-major axis (AU)
        e        : eccentricity (dimensionless)
        i        : inclination (degrees)
        omega    : argument of perihelion (degrees)
        Om       : longitude of ascending node (degrees)
        M0       : mean anomaly at epoch (degrees)
        epoch_jd : Julian Date of the elements (default J2000)
    """
    a:        float
    e:        float
    i:        float
    omega:    float
    Om:       float
    M0:       float
    epoch_jd: float = J2000_JD

    @property
    def a_km(self) -> float:
        return self.a * AU_KM


# ---------------------------------------------------------------------------
# Kepler's third law
# ---------------------------------------------------------------------------

def _check_semi_major_axis(a_km: float) -> None:
    if not math.isfinite(a_km) or a_km <= 0.0:
        raise DegenerateOrbitError(
            f"semi-major axis must be positive and finite, got {a_km!r} km")


def orbital_period_seconds(a_au: float, mu: float = MU_SUN_KM3_S2) -> float:
    """T = 2π·sqrt(a³/μ), a in AU, μ in km³/s². Returns seconds."""
    a_km = a_au * AU_KM
    _check_semi_major_axis(a_km)
    return 2.0 * math.pi * math.sqrt(a_km ** 3 / mu)


def orbital_period_days(a_au: float, mu: float = MU_SUN_KM3_S2) -> float:
    return orbital_period_seconds(a_au, mu) / SECONDS_PER_DAY


def mean_motion(a_au: float, mu: float = MU_SUN_KM3_S2) -> float:
    """Mean motion in rad/s."""
    return 2.0 * math.pi / orbital_period_seconds(a_au, mu)


# ---------------------------------------------------------------------------
# Kepler equation solver
# ---------------------------------------------------------------------------

def solve_kepler(M_deg: float, e: float, tol: float = 1e-12, max_iter: int = 50) -> float:
    """
    Eccentric anomaly E (degrees, in [0, 360)) for mean anomaly M_deg on an
    ellipse of eccentricity e, by Newton iteration on M = E - e·sin(E).

    Raises DegenerateOrbitError for a non-elliptic e, a non-finite M or
    when the iteration does not settle within `max_iter` steps.
    """
    if not (0.0 <= e < 1.0):
        raise DegenerateOrbitError(f"Kepler's equation needs 0 <= e < 1, got {e!r}")
    if not math.isfinite(M_deg):
        raise DegenerateOrbitError(f"mean anomaly must be finite, got {M_deg!r}")

    M = math.radians(M_deg % 360.0)
    # High eccentricity: start from pi, Newton is monotone from there
    E = math.pi if e > 0.8 else M
    for _ in range(max_iter):
        step = (E - e * math.sin(E) - M) / (1.0 - e * math.cos(E))
        E -= step
        if abs(step) < tol:
            return math.degrees(E) % 360.0
    raise DegenerateOrbitError(f"Kepler solver did not converge (M={M_deg}, e={e})")


# ---------------------------------------------------------------------------
# State vector
# ---------------------------------------------------------------------------

def _perifocal_rotation(elements: OrbitalElements) -> Rotation:
    # R = Rz(Om) · Rx(i) · Rz(omega): intrinsic Z-X'-Z''
    return Rotation.from_euler("ZXZ", [elements.Om, elements.i, elements.omega],
                               degrees=True)


def _validate(elements: OrbitalElements) -> None:
    e = elements.e
    if not (0.0 <= e < 1.0):   # also rejects NaN
        raise DegenerateOrbitError(f"eccentricity must be in [0, 1), got {e!r}")
    angles = (elements.i, elements.omega, elements.Om, elements.M0, elements.epoch_jd)
    if not all(math.isfinite(x) for x in angles):
        raise DegenerateOrbitError(f"non-finite orbital element in {elements!r}")


def get_state_vector(elements: OrbitalElements, instant: Instant,
                     mu: float = MU_SUN_KM3_S2) -> StateVector:
    """
    Heliocentric ecliptic position (km) and velocity (km/s) at `instant`.

    Pure function. Raises DegenerateOrbitError for elements that do not
    describe a closed orbit.
    """
    _validate(elements)
    n = mean_motion(elements.a, mu)

    dt_s = (instant.jd - elements.epoch_jd) * SECONDS_PER_DAY
    M = elements.M0 + math.degrees(n * dt_s)
    E_r = math.radians(solve_kepler(M, elements.e))

    a, e = elements.a_km, elements.e
    cos_E, sin_E = math.cos(E_r), math.sin(E_r)
    b_over_a = math.sqrt(1.0 - e * e)

    # Perifocal frame: x towards perihelion, z along angular momentum
    x_orb = a * (cos_E - e)
    y_orb = a * b_over_a * sin_E

    E_dot = n / (1.0 - e * cos_E)
    vx_orb = -a * sin_E * E_dot
    vy_orb = a * b_over_a * cos_E * E_dot

    rot = _perifocal_rotation(elements)
    position = rot.apply(np.array([x_orb, y_orb, 0.0]))
    velocity = rot.apply(np.array([vx_orb, vy_orb, 0.0]))
    return StateVector(position=position, velocity=velocity)
