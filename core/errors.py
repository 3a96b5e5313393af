"""
Error types for the orrery core.

None of these are fatal: loaders recover from CatalogParseError by treating
the entry as absent, and the scene isolates DegenerateOrbitError per body.
"""


class OrreryError(Exception):
    """Base class for orrery errors."""


class CatalogParseError(OrreryError, ValueError):
    """Orbital-element record text (or one entry of it) is malformed."""


class DegenerateOrbitError(OrreryError, ArithmeticError):
    """Elements cannot describe a closed Keplerian orbit (a <= 0, e >= 1, NaN)."""
