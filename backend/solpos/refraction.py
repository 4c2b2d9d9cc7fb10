"""
Atmospheric refraction correction of the solar elevation.

Reference
---------
- Zimmerman J.C., "Sun-pointing programs and their accuracy",
  SAND81-0761, Sandia National Laboratories, 1981.
"""

from __future__ import annotations

import math

from .record import STANDARD_PRESSURE, PositionRecord

# Near the zenith the series diverges and refraction is negligible
NO_REFRACTION_ABOVE: float = 85.0
# Elevation thresholds (deg) separating the empirical branches
HIGH_BRANCH_MIN: float = 5.0
LOW_BRANCH_MIN: float = -0.575
# Refracted elevation is limited to 9 degrees below the horizon
MIN_ELEVATION_REF: float = -9.0


def refraction_correction(elevation: float, pressure: float, temperature: float) -> float:
    """Refraction (degrees) to add to the unrefracted elevation.

    Parameters
    ----------
    elevation : float
        Unrefracted solar elevation in degrees.
    pressure : float
        Surface pressure in millibars.
    temperature : float
        Ambient temperature in degrees Celsius.
    """
    if elevation > NO_REFRACTION_ABOVE:
        return 0.0

    tanelev = math.tan(math.radians(elevation))
    if elevation >= HIGH_BRANCH_MIN:
        refcor = 58.1 / tanelev - 0.07 / tanelev ** 3 + 0.000086 / tanelev ** 5
    elif elevation >= LOW_BRANCH_MIN:
        refcor = 1735.0 + elevation * (
            -518.2 + elevation * (103.4 + elevation * (-12.79 + elevation * 0.711))
        )
    else:
        refcor = -20.774 / tanelev

    prestemp = (pressure * 283.0) / (STANDARD_PRESSURE * (273.0 + temperature))
    return refcor * prestemp / 3600.0


def refract(record: PositionRecord) -> None:
    """Refracted elevation and zenith, and the cosine of the refracted zenith."""
    elevref = record.elevation_etr + refraction_correction(
        record.elevation_etr, record.pressure, record.temperature
    )
    record.elevation_ref = max(elevref, MIN_ELEVATION_REF)
    record.zenith_ref = 90.0 - record.elevation_ref
    record.cos_zenith = math.cos(math.radians(record.zenith_ref))
