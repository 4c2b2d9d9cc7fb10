"""
Range checks for the inputs read by a resolved set of stages.

Validation never aborts a computation.  Each bad input sets its
``InputError`` bit and is replaced in the record (clamped to the nearest
bound, or substituted when unset) so the stages can still produce a
best-effort result.  The accumulated flags are the call's return code.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import Any

from .dates import days_in_month, days_in_year
from .errors import InputError
from .record import (
    DEFAULT_ASPECT,
    DEFAULT_BAND_RADIUS,
    DEFAULT_BAND_SKY,
    DEFAULT_BAND_WIDTH,
    DEFAULT_TILT,
    STANDARD_PRESSURE,
    STANDARD_TEMPERATURE,
    PositionRecord,
)
from .request import DateInput, Stage

logger = logging.getLogger(__name__)

MIN_YEAR: int = 1950
MAX_YEAR: int = 2050
MAX_INTERVAL: int = 28800  # seconds (8 hours)

# Values used in place of unset required inputs
_UNSET_SUBSTITUTES: dict[str, Any] = {
    "year": 2000,
    "month": 1,
    "day": 1,
    "daynum": 1,
    "hour": 0,
    "minute": 0,
    "second": 0,
    "latitude": 0.0,
    "longitude": 0.0,
    "timezone": 0.0,
}


def _check(
    record: PositionRecord,
    name: str,
    low: float,
    high: float,
    flag: InputError,
    substitute: Any = None,
) -> InputError:
    value = getattr(record, name)
    if substitute is None:
        substitute = _UNSET_SUBSTITUTES[name]

    if value is None or (isinstance(value, float) and math.isnan(value)):
        logger.warning("%s is unset; computing with %s", name, substitute)
        setattr(record, name, substitute)
        return flag

    if low <= value <= high:
        return InputError(0)

    clamped = min(max(value, low), high)
    logger.warning(
        "%s=%s outside [%s, %s]; computing with %s", name, value, low, high, clamped
    )
    setattr(record, name, clamped)
    return flag


def validate(
    record: PositionRecord,
    stages: Iterable[Stage],
    date_input: DateInput = DateInput.DAY_OF_YEAR,
) -> InputError:
    """Check (and repair) every input the given stages read.

    Primitive stages are checked by the same rules as their composite
    counterparts; stages without a rule (airmass, prime, ...) read values
    the caller is responsible for.
    """
    stages = frozenset(stages)
    code = InputError(0)

    if Stage.DATE in stages or Stage.GEOMETRY in stages:
        code |= _check(record, "year", MIN_YEAR, MAX_YEAR, InputError.YEAR)
        if Stage.DATE in stages and date_input is DateInput.MONTH_DAY:
            code |= _check(record, "month", 1, 12, InputError.MONTH)
            code |= _check(
                record, "day", 1, days_in_month(record.year, record.month), InputError.DAY
            )
        else:
            code |= _check(
                record, "daynum", 1, days_in_year(record.year), InputError.DAY_OF_YEAR
            )

    if Stage.GEOMETRY in stages:
        code |= _check(record, "hour", 0, 24, InputError.HOUR)
        code |= _check(record, "minute", 0, 59, InputError.MINUTE)
        code |= _check(record, "second", 0, 59, InputError.SECOND)
        if record.hour == 24 and record.minute > 0:
            logger.warning("hour 24 with minute=%s; computing with 24:00", record.minute)
            code |= InputError.HOUR | InputError.MINUTE
            record.minute = 0
        if record.hour == 24 and record.second > 0:
            logger.warning("hour 24 with second=%s; computing with 24:00", record.second)
            code |= InputError.HOUR | InputError.SECOND
            record.second = 0
        code |= _check(record, "timezone", -12.0, 12.0, InputError.TIMEZONE)
        code |= _check(record, "interval", 0, MAX_INTERVAL, InputError.INTERVAL, 0)
        if record.interval > 0 and record.second > 0:
            logger.warning(
                "interval=%s with second=%s; computing with second=0",
                record.interval,
                record.second,
            )
            code |= InputError.SECOND_INTERVAL
            record.second = 0
        code |= _check(record, "longitude", -180.0, 180.0, InputError.LONGITUDE)
        code |= _check(record, "latitude", -90.0, 90.0, InputError.LATITUDE)

    if Stage.REFRACTION in stages:
        code |= _check(
            record, "temperature", -100.0, 100.0, InputError.TEMPERATURE, STANDARD_TEMPERATURE
        )
        code |= _check(
            record, "pressure", 0.0, 2000.0, InputError.PRESSURE, STANDARD_PRESSURE
        )

    if Stage.TILT in stages:
        code |= _check(record, "tilt", 0.0, 180.0, InputError.TILT, DEFAULT_TILT)
        code |= _check(record, "aspect", -360.0, 360.0, InputError.ASPECT, DEFAULT_ASPECT)

    if Stage.SHADOWBAND in stages:
        code |= _check(
            record, "band_width", 1.0, 100.0, InputError.BAND_WIDTH, DEFAULT_BAND_WIDTH
        )
        code |= _check(
            record, "band_radius", 1.0, 100.0, InputError.BAND_RADIUS, DEFAULT_BAND_RADIUS
        )
        code |= _check(record, "band_sky", -1.0, 1.0, InputError.BAND_SKY, DEFAULT_BAND_SKY)

    return code
