"""Tests for identity keys, body records and Instant."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from core.astro_time import J2000_JD, Instant, datetime_to_julian_date
from core.types import BodyDefinition, BodyKey, hex_to_rgb


def test_body_key_is_case_and_whitespace_insensitive() -> None:
    """Keys built from differently written names compare and hash equal."""
    assert BodyKey("Earth") == BodyKey(" earth ") == BodyKey("EARTH")
    assert hash(BodyKey("Earth")) == hash(BodyKey("earth"))
    assert {BodyKey("Mars"): 1}[BodyKey("mars")] == 1
    assert str(BodyKey("Venus")) == "venus"


def test_body_key_of_passes_keys_through() -> None:
    key = BodyKey("jupiter")
    assert BodyKey.of(key) is key
    assert BodyKey.of("Jupiter") == key


def test_body_definition_carries_key_and_is_frozen() -> None:
    body = BodyDefinition("Earth", 6371.0, 149.598e6, 365.256, 0x33bb33)
    assert body.key == BodyKey("earth")
    with pytest.raises(AttributeError):
        body.radius_km = 1.0  # type: ignore[misc]


def test_hex_to_rgb() -> None:
    assert hex_to_rgb(0x33bb33) == (0x33, 0xbb, 0x33)
    assert hex_to_rgb(0xbb3333) == (0xbb, 0x33, 0x33)
    assert hex_to_rgb(0x000000) == (0, 0, 0)


def test_j2000_julian_date() -> None:
    assert datetime_to_julian_date(datetime(2000, 1, 1, 12, tzinfo=timezone.utc)) == J2000_JD


def test_naive_datetime_is_utc() -> None:
    naive = datetime(2024, 6, 1, 0, 0)
    aware = datetime(2024, 6, 1, 0, 0, tzinfo=timezone.utc)
    assert Instant.from_datetime(naive) == Instant.from_datetime(aware)


def test_instant_is_timezone_independent() -> None:
    """The same absolute moment in two zones is the same Instant."""
    utc = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    cet = utc.astimezone(timezone(timedelta(hours=2)))
    assert Instant.from_datetime(utc).jd == pytest.approx(Instant.from_datetime(cet).jd, abs=1e-12)


def test_instant_shift_and_difference() -> None:
    t0 = Instant(J2000_JD)
    t1 = t0.shifted(86400.0)
    assert t1.jd == pytest.approx(J2000_JD + 1.0)
    assert t0.shifted(-43200.0).jd == pytest.approx(J2000_JD - 0.5)


def test_instant_datetime_round_trip() -> None:
    dt = datetime(2031, 11, 5, 17, 45, 12, tzinfo=timezone.utc)
    back = Instant.from_datetime(dt).to_datetime()
    assert abs((back - dt).total_seconds()) < 1e-3
    assert str(Instant.from_datetime(dt)).startswith("2031-11-05 17:45")
