"""
Relative and pressure-corrected optical airmass.

Reference
---------
- Kasten F. and Young A.T., "Revised optical air mass tables and
  approximation formula", Applied Optics, 28:4735-4738, 1989.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .record import STANDARD_PRESSURE, PositionRecord

# Airmass reported for a refracted zenith at or below the horizon: the
# formula's value at 90 degrees.
AIRMASS_CEILING: float = 1.0 / (0.50572 * (96.07995 - 90.0) ** -1.6364)


def relative_airmass(zenith_ref: ArrayLike) -> NDArray[np.float64] | float:
    """Relative optical airmass for a refracted zenith angle (degrees).

    Finite for every input: zenith angles at or beyond 90 degrees return
    :data:`AIRMASS_CEILING`.  Scalars in, float out; arrays in, arrays out.
    """
    z = np.asarray(zenith_ref, dtype=np.float64)
    below = z >= 90.0
    z_safe = np.where(below, 90.0, z)

    am = 1.0 / (
        np.cos(np.radians(z_safe)) + 0.50572 * (96.07995 - z_safe) ** -1.6364
    )
    am = np.where(below, AIRMASS_CEILING, am)
    if am.ndim == 0:
        return float(am)
    return am


def pressure_airmass(
    airmass: ArrayLike, pressure: ArrayLike
) -> NDArray[np.float64] | float:
    """Scale relative airmass to the local surface pressure (mb)."""
    am = np.asarray(airmass, dtype=np.float64) * np.asarray(pressure, dtype=np.float64)
    am = am / STANDARD_PRESSURE
    if am.ndim == 0:
        return float(am)
    return am


def airmass(record: PositionRecord) -> None:
    """Airmass stage.

    Reads only ``zenith_ref`` and ``pressure``, so it can be run as a
    primitive stage on a record where the caller set the refracted zenith
    directly.  No range checking is done in that mode.
    """
    record.airmass = relative_airmass(record.zenith_ref)
    record.airmass_pressure = pressure_airmass(record.airmass, record.pressure)
