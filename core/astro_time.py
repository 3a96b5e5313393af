from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone, timedelta

# Lightweight time utilities (no external deps).
# We use UTC internally; naive datetimes are taken as UTC.

J2000_JD = 2451545.0
SECONDS_PER_DAY = 86400.0

_J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def datetime_to_julian_date(dt: datetime) -> float:
    """Convert a datetime (timezone-aware recommended) to Julian Date."""
    if dt.tzinfo is None:
        # assume UTC if naive
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return J2000_JD + (dt - _J2000).total_seconds() / SECONDS_PER_DAY


def julian_date_to_datetime(jd: float) -> datetime:
    """JD -> datetime UTC."""
    return _J2000 + timedelta(seconds=(jd - J2000_JD) * SECONDS_PER_DAY)


@dataclass(frozen=True, slots=True)
class Instant:
    """
    A point in time, stored as a Julian Date.

    Every body in one synchronization pass is evaluated at the same Instant
    so the configuration stays physically consistent.
    """
    jd: float

    @classmethod
    def now(cls) -> "Instant":
        return cls(datetime_to_julian_date(datetime.now(timezone.utc)))

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Instant":
        return cls(datetime_to_julian_date(dt))

    def shifted(self, seconds: float) -> "Instant":
        """Return the instant `seconds` later (negative = earlier)."""
        return Instant(self.jd + seconds / SECONDS_PER_DAY)

    def to_datetime(self) -> datetime:
        return julian_date_to_datetime(self.jd)

    def __str__(self) -> str:
        return self.to_datetime().strftime("%Y-%m-%d %H:%M:%S UTC")
