"""
Orbital geometry: the sun's position on the celestial sphere.

References
----------
- Iqbal M., "An Introduction to Solar Radiation", Academic Press, 1983,
  page 3 (day angle).
- Spencer J.W., "Fourier series representation of the position of
  the sun", Search, 2(5):172, 1971 (earth radius vector).
- Michalsky J., "The Astronomical Almanac's algorithm for approximate
  solar position (1950-2050)", Solar Energy, 40(3):227-235, 1988.
"""

from __future__ import annotations

import math

from .record import PositionRecord

# Julian day of 0 JAN 1949 minus 2,400,000; no century leap-year correction
# is needed inside 1950-2050.
_JULIAN_DAY_1949: float = 32916.5
# Noon 1 JAN 2000 (J2000.0) minus 2,400,000
_J2000: float = 51545.0


def day_angle(daynum: int) -> float:
    """Earth's position in its orbit, degrees (0 on 1 January)."""
    return 360.0 * (daynum - 1) / 365.0


def earth_radius_vector(day_angle_deg: float) -> float:
    """Spencer's (mean distance / distance)^2 correction for solar intensity."""
    da = math.radians(day_angle_deg)
    return (
        1.000110
        + 0.034221 * math.cos(da)
        + 0.001280 * math.sin(da)
        + 0.000719 * math.cos(2.0 * da)
        + 0.000077 * math.sin(2.0 * da)
    )


def universal_time(
    hour: int, minute: int, second: int, timezone: float, interval: int = 0
) -> float:
    """Decimal UTC hour at the midpoint of the measurement interval."""
    seconds = hour * 3600.0 + minute * 60.0 + second - interval / 2.0
    return seconds / 3600.0 - timezone


def julian_day(year: int, daynum: int, utime: float) -> float:
    """Julian day minus 2,400,000 (keeps the fractional day precise)."""
    delta = year - 1949
    leap = int(delta / 4.0)
    return _JULIAN_DAY_1949 + delta * 365.0 + leap + daynum + utime / 24.0


def geometry(record: PositionRecord) -> None:
    """Declination, right ascension, sidereal time and hour angle."""
    record.day_angle = day_angle(record.daynum)
    record.erv = earth_radius_vector(record.day_angle)

    record.utime = universal_time(
        record.hour, record.minute, record.second, record.timezone, record.interval
    )
    record.julian_day = julian_day(record.year, record.daynum, record.utime)
    record.ecliptic_time = ectime = record.julian_day - _J2000

    record.mean_longitude = (280.460 + 0.9856474 * ectime) % 360.0
    record.mean_anomaly = (357.528 + 0.9856003 * ectime) % 360.0

    anomaly = math.radians(record.mean_anomaly)
    record.ecliptic_longitude = (
        record.mean_longitude
        + 1.915 * math.sin(anomaly)
        + 0.020 * math.sin(2.0 * anomaly)
    ) % 360.0

    record.obliquity = 23.439 - 4.0e-07 * ectime

    eps = math.radians(record.obliquity)
    lam = math.radians(record.ecliptic_longitude)
    record.declination = math.degrees(math.asin(math.sin(eps) * math.sin(lam)))
    record.right_ascension = (
        math.degrees(math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam))) % 360.0
    )

    record.gmst = (6.697375 + 0.0657098242 * ectime + record.utime) % 24.0
    record.lmst = (record.gmst * 15.0 + record.longitude) % 360.0

    hrang = record.lmst - record.right_ascension
    if hrang < -180.0:
        hrang += 360.0
    elif hrang > 180.0:
        hrang -= 360.0
    record.hour_angle = hrang
