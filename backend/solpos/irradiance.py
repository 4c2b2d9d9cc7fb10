"""Extraterrestrial irradiance on normal, horizontal and tilted surfaces."""

from __future__ import annotations

from .incidence import cosine_of_incidence
from .record import PositionRecord


def extraterrestrial(record: PositionRecord) -> None:
    """Normal and horizontal extraterrestrial irradiance (W/m^2).

    Both are zero while the refracted sun is at or below the horizon.
    """
    if record.cos_zenith > 0.0:
        record.etrn = record.solar_constant * record.erv
        record.etr = record.etrn * record.cos_zenith
    else:
        record.etrn = 0.0
        record.etr = 0.0


def tilted(record: PositionRecord) -> None:
    """Cosine of incidence and extraterrestrial irradiance on the tilted surface."""
    record.cos_incidence = cosine_of_incidence(
        record.zenith_ref, record.azimuth, record.tilt, record.aspect
    )
    if record.cos_incidence > 0.0:
        record.etr_tilt = record.etrn * record.cos_incidence
    else:
        record.etr_tilt = 0.0
