"""
Catalogue Loader

Converts the orbital-element record set (JSON text keyed by body name) into
OrbitalElements instances for the propagator. This is the bridge between
the raw data and the ephemeris.

Never raises to the caller: a malformed document yields an empty mapping,
a malformed entry is skipped. A missing key means "use the circular
fallback", never an error.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from core.errors import CatalogParseError
from core.types import BodyKey
from .ephemeris import OrbitalElements

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("a", "e", "i", "omega", "Om", "M0")


def _number(entry: dict, name: str) -> float:
    value = entry[name]
    # bool is an int subclass; "true" is never a valid element
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogParseError(f"field {name!r} is not a number: {value!r}")
    try:
        return float(value)
    except OverflowError as e:
        raise CatalogParseError(f"field {name!r} is out of range") from e


def parse_entry(name: str, entry) -> OrbitalElements:
    """Build OrbitalElements from one record. Raises CatalogParseError."""
    if not isinstance(entry, dict):
        raise CatalogParseError(f"record for {name!r} is not an object")
    missing = [f for f in _REQUIRED_FIELDS if f not in entry]
    if missing:
        raise CatalogParseError(f"record for {name!r} is missing {', '.join(missing)}")

    values = {f: _number(entry, f) for f in _REQUIRED_FIELDS}
    if "epoch_jd" in entry:
        values["epoch_jd"] = _number(entry, "epoch_jd")
    return OrbitalElements(**values)


def parse_orbital_elements(text: str) -> Dict[BodyKey, OrbitalElements]:
    """
    Parse the record text. Raises CatalogParseError if the document as a
    whole is unusable; bad entries are logged and dropped.
    """
    # ValueError covers JSONDecodeError and the int digit limit
    try:
        doc = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise CatalogParseError(f"invalid orbital element JSON: {e}") from e
    if not isinstance(doc, dict):
        raise CatalogParseError("orbital element document must be an object")

    elements: Dict[BodyKey, OrbitalElements] = {}
    for name, entry in doc.items():
        key = BodyKey(name)
        try:
            elems = parse_entry(name, entry)
        except CatalogParseError as e:
            logger.warning("Skipping orbital elements for %r: %s", name, e)
            continue
        if key in elements:
            logger.warning("Duplicate orbital elements for %r; keeping the last", key.name)
        elements[key] = elems
    return elements


def load_orbital_elements(text: Optional[str] = None) -> Dict[BodyKey, OrbitalElements]:
    """
    Load the orbital-element lookup.

    With no argument the embedded record set is used. Any parse failure is
    logged and yields an empty (or partial) mapping.
    """
    if text is None:
        from catalogs.orbital_elements_data import ORBITAL_ELEMENTS_JSON
        text = ORBITAL_ELEMENTS_JSON

    try:
        elements = parse_orbital_elements(text)
    except CatalogParseError as e:
        logger.error("Orbital element catalog unusable, all bodies fall back: %s", e)
        return {}

    logger.info("Loaded orbital elements for %d bodies", len(elements))
    return elements


def load_orbital_elements_file(path: str | Path) -> Dict[BodyKey, OrbitalElements]:
    """Like load_orbital_elements, reading the record text from `path`."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read orbital element catalog %s: %s", path, e)
        return {}
    return load_orbital_elements(text)
