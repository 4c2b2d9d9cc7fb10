"""
Engine entry point: validate the inputs, then run the requested stages.

``solpos()`` resolves a :class:`~solpos.request.Request` into an ordered
stage list, checks only the inputs those stages read, and executes the
stages against the caller's record.  Stages that share trigonometric
terms reuse a single :class:`~solpos.position.LocalTrig`, computed the
first time one of them needs it (after the geometry stage has run).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import cached_property

from . import airmass, dates, incidence, irradiance, orbit, position, refraction, sunrise
from .errors import InputError
from .position import LocalTrig
from .record import PositionRecord
from .request import Request, Stage
from .validate import validate

logger = logging.getLogger(__name__)


class _Call:
    """Per-call state shared between stages."""

    def __init__(self, record: PositionRecord, request: Request):
        self.record = record
        self.request = request

    @cached_property
    def trig(self) -> LocalTrig:
        return LocalTrig.from_record(self.record)


_STAGES: dict[Stage, Callable[[_Call], None]] = {
    Stage.DATE: lambda c: dates.normalize_date(c.record, c.request.date_input),
    Stage.GEOMETRY: lambda c: orbit.geometry(c.record),
    Stage.ZENITH: lambda c: position.zenith(c.record, c.trig),
    Stage.AZIMUTH: lambda c: position.azimuth(c.record, c.trig),
    Stage.SOLAR_TIME: lambda c: position.solar_time(c.record),
    Stage.REFRACTION: lambda c: refraction.refract(c.record),
    Stage.AIRMASS: lambda c: airmass.airmass(c.record),
    Stage.PRIME: lambda c: incidence.prime(c.record),
    Stage.ETR: lambda c: irradiance.extraterrestrial(c.record),
    Stage.TILT: lambda c: irradiance.tilted(c.record),
    Stage.SUNSET_HOUR_ANGLE: lambda c: sunrise.ssha(c.record, c.trig),
    Stage.SHADOWBAND: lambda c: incidence.shadowband(c.record, c.trig),
    Stage.SUNRISE_SUNSET: lambda c: sunrise.sunrise_sunset(c.record),
}


def solpos(record: PositionRecord, request: Request | None = None) -> InputError:
    """Compute the requested solar position outputs in place.

    Parameters
    ----------
    record : PositionRecord
        Inputs for the call; outputs are written back into it.
    request : Request, optional
        Output groups and date representation.  Defaults to every output
        with day-of-year date input.

    Returns
    -------
    InputError
        Flags for every input that was out of range or unset (and was
        clamped or substituted before computing).  ``InputError(0)`` when
        all checked inputs were valid.
    """
    request = request or Request()
    stages = request.resolve()
    logger.debug("Running stages: %s", ", ".join(s.value for s in stages))

    code = validate(record, stages, request.date_input)
    if code:
        logger.info("solpos input errors: %s", code)

    call = _Call(record, request)
    for stage in stages:
        _STAGES[stage](call)
    return code
