"""
Sunset hour angle and local sunrise/sunset times.

Times are minutes from local (standard time) midnight and refer to the
geometric horizon: no refraction is applied at the horizon crossing.
Days without a crossing are reported through ``polar_condition`` and the
``NO_SUNRISE``/``NO_SUNSET`` sentinels.
"""

from __future__ import annotations

import math

from .position import LocalTrig
from .record import PolarCondition, PositionRecord

# Below this cos(declination)*cos(latitude) the hour angle is degenerate
_DEGENERATE_COS: float = 0.001
# Sunset hour angles within a degree of 0 or 180 mean no crossing
POLAR_NIGHT_MAX_SSHA: float = 1.0
POLAR_DAY_MIN_SSHA: float = 179.0
# Sentinel minute values used when the sun does not cross the horizon
NO_CROSSING: float = 2999.0


def sunset_hour_angle(trig: LocalTrig, declination: float, latitude: float) -> float:
    """Hour angle (degrees) at which the sun reaches the geometric horizon."""
    cdcl = trig.cd * trig.cl
    if abs(cdcl) >= _DEGENERATE_COS:
        cssha = -trig.sl * trig.sd / cdcl
        if cssha < -1.0:
            return 180.0
        if cssha > 1.0:
            return 0.0
        return math.degrees(math.acos(cssha))

    same_hemisphere = (declination >= 0.0 and latitude > 0.0) or (
        declination < 0.0 and latitude < 0.0
    )
    return 180.0 if same_hemisphere else 0.0


def ssha(record: PositionRecord, trig: LocalTrig | None = None) -> None:
    trig = trig or LocalTrig.from_record(record)
    record.sunset_hour_angle = sunset_hour_angle(trig, record.declination, record.latitude)


def sunrise_sunset(record: PositionRecord) -> None:
    """Sunrise and sunset, minutes from local midnight.

    Requires the sunset hour angle and ``tst_fix`` from the solar time stage.
    """
    if record.sunset_hour_angle <= POLAR_NIGHT_MAX_SSHA:
        record.polar_condition = PolarCondition.POLAR_NIGHT
        record.sunrise = NO_CROSSING
        record.sunset = -NO_CROSSING
    elif record.sunset_hour_angle >= POLAR_DAY_MIN_SSHA:
        record.polar_condition = PolarCondition.POLAR_DAY
        record.sunrise = -NO_CROSSING
        record.sunset = NO_CROSSING
    else:
        record.polar_condition = None
        record.sunrise = 720.0 - 4.0 * record.sunset_hour_angle - record.tst_fix
        record.sunset = 720.0 + 4.0 * record.sunset_hour_angle - record.tst_fix
