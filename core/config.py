"""Configuration: orrery defaults with environment-variable overrides."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# Standard gravitational parameter of the Sun (km^3/s^2)
MU_SUN_KM3_S2 = 1.327e11

# Astronomical unit (km)
AU_KM = 149_597_870.7


@dataclass(frozen=True)
class OrreryConfig:
    # Window
    width: int = 1280
    height: int = 800
    fps: int = 60
    title: str = "Orrery - Solar System Snapshot"

    # Display units per km. Shared by marker placement and orbit traces so
    # a trace stays centred on its body.
    display_scale: float = 1.0e-6

    # Planet discs are unreadable at true scale
    body_size_exaggeration: float = 300.0
    min_body_radius: float = 1.5
    max_body_radius: float = 12.0

    trace_samples: int = 256
    highlight_color: int = 0xffff00
    mu_sun_km3_s2: float = MU_SUN_KM3_S2

    catalog_path: Optional[str] = None
    log_level: str = "INFO"


def _parse_override(name: str, raw: str, cast, allow_zero: bool = False):
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a valid %s", name, raw, cast.__name__)
        return None
    if not math.isfinite(value) or value < 0 or (value == 0 and not allow_zero):
        logger.warning("Ignoring %s=%r: must be %s", name, raw,
                       "non-negative" if allow_zero else "positive")
        return None
    return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> OrreryConfig:
    """Return the default config with ORRERY_* environment overrides applied.

    Recognised variables: ORRERY_CATALOG_PATH, ORRERY_LOG_LEVEL,
    ORRERY_TRACE_SAMPLES, ORRERY_DISPLAY_SCALE.
    """
    env = os.environ if environ is None else environ
    overrides = {}

    path = env.get("ORRERY_CATALOG_PATH", "").strip()
    if path:
        overrides["catalog_path"] = path

    level = env.get("ORRERY_LOG_LEVEL", "").strip().upper()
    if level:
        if level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            overrides["log_level"] = level
        else:
            logger.warning("Ignoring ORRERY_LOG_LEVEL=%r: unknown level", level)

    raw = env.get("ORRERY_TRACE_SAMPLES", "").strip()
    if raw:
        samples = _parse_override("ORRERY_TRACE_SAMPLES", raw, int, allow_zero=True)
        if samples is not None:
            overrides["trace_samples"] = samples

    raw = env.get("ORRERY_DISPLAY_SCALE", "").strip()
    if raw:
        scale = _parse_override("ORRERY_DISPLAY_SCALE", raw, float)
        if scale is not None:
            overrides["display_scale"] = scale

    return replace(OrreryConfig(), **overrides)
