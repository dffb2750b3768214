"""Solar position (azimuth and zenith angle) for a time and place on Earth."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone

TWO_PI = 2.0 * math.pi
RAD = math.pi / 180.0
EARTH_MEAN_RADIUS_KM = 6371.01
ASTRONOMICAL_UNIT_KM = 149597890.0
J2000_JULIAN_DAY = 2451545


@dataclass(frozen=True)
class Location:
    """Observer position in degrees; longitude is positive to the east."""

    longitude: float
    latitude: float


@dataclass(frozen=True)
class SunCoordinates:
    """Sun position in degrees as seen by an observer."""

    zenith_angle: float
    azimuth: float

    @property
    def elevation(self) -> float:
        """Elevation above the horizon in degrees."""
        return 90.0 - self.zenith_angle


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _as_utc(when: datetime) -> datetime:
    if when.tzinfo is None:
        return when
    return when.astimezone(timezone.utc).replace(tzinfo=None)


def _decimal_hours(when: datetime) -> float:
    seconds = when.second + when.microsecond / 1_000_000
    return when.hour + (when.minute + seconds / 60.0) / 60.0


def elapsed_julian_days(when: datetime) -> float:
    """Days elapsed since JD 2451545.0 (noon, 1 January 2000 UT).

    Naive datetimes are taken to be in UTC.
    """
    when = _as_utc(when)
    year, month, day = when.year, when.month, when.day
    aux1 = _trunc_div(month - 14, 12)
    julian_day = (
        _trunc_div(1461 * (year + 4800 + aux1), 4)
        + _trunc_div(367 * (month - 2 - 12 * aux1), 12)
        - _trunc_div(3 * _trunc_div(year + 4900 + aux1, 100), 4)
        + day
        - 32075
    )
    return float(julian_day - J2000_JULIAN_DAY) - 0.5 + _decimal_hours(when) / 24.0


def sun_position(when: datetime, location: Location) -> SunCoordinates:
    """Compute the sun's azimuth and parallax-corrected zenith angle."""
    utc = _as_utc(when)
    days = elapsed_julian_days(utc)
    hours = _decimal_hours(utc)

    # Ecliptic coordinates, radians, not reduced to [0, 2*pi).
    omega = 2.1429 - 0.0010394594 * days
    mean_longitude = 4.8950630 + 0.017202791698 * days
    mean_anomaly = 6.2400600 + 0.0172019699 * days
    ecliptic_longitude = (
        mean_longitude
        + 0.03341607 * math.sin(mean_anomaly)
        + 0.00034894 * math.sin(2 * mean_anomaly)
        - 0.0001134
        - 0.0000203 * math.sin(omega)
    )
    ecliptic_obliquity = 0.4090928 - 6.2140e-9 * days + 0.0000396 * math.cos(omega)

    # Celestial coordinates.
    sin_ecliptic_longitude = math.sin(ecliptic_longitude)
    right_ascension = math.atan2(
        math.cos(ecliptic_obliquity) * sin_ecliptic_longitude,
        math.cos(ecliptic_longitude),
    )
    if right_ascension < 0.0:
        right_ascension += TWO_PI
    declination = math.asin(math.sin(ecliptic_obliquity) * sin_ecliptic_longitude)

    # Local coordinates.
    greenwich_sidereal = 6.6974243242 + 0.0657098283 * days + hours
    local_sidereal = (greenwich_sidereal * 15 + location.longitude) * RAD
    hour_angle = local_sidereal - right_ascension
    latitude = location.latitude * RAD
    cos_latitude = math.cos(latitude)
    sin_latitude = math.sin(latitude)
    cos_hour_angle = math.cos(hour_angle)

    cos_zenith = cos_latitude * cos_hour_angle * math.cos(declination) + math.sin(
        declination
    ) * sin_latitude
    zenith = math.acos(max(-1.0, min(1.0, cos_zenith)))

    azimuth = math.atan2(
        -math.sin(hour_angle),
        math.tan(declination) * cos_latitude - sin_latitude * cos_hour_angle,
    )
    if azimuth < 0.0:
        azimuth += TWO_PI

    parallax = (EARTH_MEAN_RADIUS_KM / ASTRONOMICAL_UNIT_KM) * math.sin(zenith)
    return SunCoordinates(
        zenith_angle=(zenith + parallax) / RAD,
        azimuth=azimuth / RAD,
    )