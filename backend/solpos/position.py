"""
Local solar position: zenith, azimuth and true solar time for an observer.

All stages read the declination and hour angle written by
:func:`solpos.orbit.geometry` together with the observer's latitude.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .record import PositionRecord

# Unrefracted zenith is limited to 9 degrees below the horizon
MAX_ZENITH_ETR: float = 99.0
# Below this cos(elevation)*cos(latitude) the azimuth is undefined
_DEGENERATE_COS: float = 0.001
# Azimuth reported at the poles or with the sun overhead
UNDEFINED_AZIMUTH: float = 180.0


@dataclass(frozen=True)
class LocalTrig:
    """Sines and cosines shared by the zenith, azimuth, sunset and shadow-band stages."""

    sd: float  # sin(declination)
    cd: float  # cos(declination)
    sl: float  # sin(latitude)
    cl: float  # cos(latitude)
    ch: float  # cos(hour angle)

    @classmethod
    def from_record(cls, record: PositionRecord) -> LocalTrig:
        dec = math.radians(record.declination)
        lat = math.radians(record.latitude)
        ch = math.nan if record.hour_angle is None else math.cos(math.radians(record.hour_angle))
        return cls(
            sd=math.sin(dec),
            cd=math.cos(dec),
            sl=math.sin(lat),
            cl=math.cos(lat),
            ch=ch,
        )


def zenith(record: PositionRecord, trig: LocalTrig | None = None) -> None:
    """Unrefracted solar zenith and elevation."""
    trig = trig or LocalTrig.from_record(record)
    cz = trig.sd * trig.sl + trig.cd * trig.cl * trig.ch
    cz = max(-1.0, min(1.0, cz))

    record.zenith_etr = min(math.degrees(math.acos(cz)), MAX_ZENITH_ETR)
    record.elevation_etr = 90.0 - record.zenith_etr


def azimuth(record: PositionRecord, trig: LocalTrig | None = None) -> None:
    """Solar azimuth, degrees clockwise from north."""
    trig = trig or LocalTrig.from_record(record)
    elev = math.radians(record.elevation_etr)
    ce = math.cos(elev)
    se = math.sin(elev)

    cecl = ce * trig.cl
    if abs(cecl) < _DEGENERATE_COS:
        record.azimuth = UNDEFINED_AZIMUTH
        return

    ca = (se * trig.sl - trig.sd) / cecl
    ca = max(-1.0, min(1.0, ca))
    azim = 180.0 - math.degrees(math.acos(ca))
    if record.hour_angle > 0:
        azim = 360.0 - azim
    record.azimuth = azim


def solar_time(record: PositionRecord) -> None:
    """True solar time, its offset from clock time, and the equation of time.

    All three are in minutes.  ``tst_fix`` is referenced to the midpoint of
    the measurement interval and bounded to +/- 720 minutes.
    """
    record.true_solar_time = (180.0 + record.hour_angle) * 4.0

    tst_fix = (
        record.true_solar_time
        - record.hour * 60.0
        - record.minute
        - record.second / 60.0
        + record.interval / 120.0
    )
    while tst_fix > 720.0:
        tst_fix -= 1440.0
    while tst_fix < -720.0:
        tst_fix += 1440.0
    record.tst_fix = tst_fix

    record.equation_of_time = tst_fix + 60.0 * record.timezone - 4.0 * record.longitude
