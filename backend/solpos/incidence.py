"""
Incidence on a tilted surface, shadow-band correction and Perez prime factors.

References
----------
- Drummond A.J., "On the measurement of sky radiation", Archiv fur
  Meteorologie Geophysik und Bioklimatologie, Serie B, 7:413-436, 1956.
- Perez R. et al., "Making full use of the clearness index for
  parameterizing hourly insolation conditions", Solar Energy,
  45(2):111-114, 1990.
"""

from __future__ import annotations

import math

from .position import LocalTrig
from .record import PositionRecord

# 2/pi: fraction of the band's angular width seen over the daylight arc
_BAND_GEOMETRY: float = 0.6366198


def cosine_of_incidence(
    zenith: float, azimuth: float, tilt: float, aspect: float
) -> float:
    """Cosine of the angle between the sun and the normal of a tilted surface.

    Parameters
    ----------
    zenith : float
        Solar zenith angle in degrees.
    azimuth : float
        Solar azimuth in degrees clockwise from north.
    tilt : float
        Surface tilt from horizontal in degrees.
    aspect : float
        Surface azimuth in degrees clockwise from north.

    Returns
    -------
    float
        Cosine of incidence; negative when the sun is behind the surface.
    """
    z = math.radians(zenith)
    a = math.radians(azimuth)
    t = math.radians(tilt)
    p = math.radians(aspect)
    return math.cos(z) * math.cos(t) + math.sin(z) * math.sin(t) * (
        math.cos(a) * math.cos(p) + math.sin(a) * math.sin(p)
    )


def shadowband_correction(
    trig: LocalTrig,
    sunset_hour_angle: float,
    band_width: float,
    band_radius: float,
    band_sky: float,
) -> float:
    """Correction factor for diffuse irradiance measured under a shadow band."""
    p = _BAND_GEOMETRY * band_width / band_radius * trig.cd ** 3
    ssha = math.radians(sunset_hour_angle)
    t1 = trig.sl * trig.sd * ssha
    t2 = trig.cl * trig.cd * math.sin(ssha)
    return band_sky + 1.0 / (1.0 - p * (t1 + t2))


def shadowband(record: PositionRecord, trig: LocalTrig | None = None) -> None:
    trig = trig or LocalTrig.from_record(record)
    record.sbcf = shadowband_correction(
        trig,
        record.sunset_hour_angle,
        record.band_width,
        record.band_radius,
        record.band_sky,
    )


def unprime_factor(airmass: float) -> float:
    """Perez factor converting clearness index Kt to the airmass-independent Kt'."""
    return 1.031 * math.exp(-1.4 / (0.9 + 9.4 / airmass)) + 0.1


def prime(record: PositionRecord) -> None:
    record.unprime = unprime_factor(record.airmass)
    record.prime = 1.0 / record.unprime
