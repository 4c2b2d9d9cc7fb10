"""
Selection of the outputs a ``solpos()`` call should compute.

Callers ask for named output groups (``Output``); a small dependency table
expands each group into the primitive ``Stage`` objects that must run,
including everything upstream.  Advanced callers may also request
primitive stages directly, in which case nothing upstream is added and the
caller must have filled in every input that stage reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from functools import lru_cache


class Stage(Enum):
    """Primitive engine stages, declared in execution order."""

    DATE = "date"
    GEOMETRY = "geometry"
    ZENITH = "zenith"
    AZIMUTH = "azimuth"
    SOLAR_TIME = "solar_time"
    REFRACTION = "refraction"
    AIRMASS = "airmass"
    PRIME = "prime"
    ETR = "etr"
    TILT = "tilt"
    SUNSET_HOUR_ANGLE = "sunset_hour_angle"
    SHADOWBAND = "shadowband"
    SUNRISE_SUNSET = "sunrise_sunset"


class Output(str, Enum):
    """Composite output groups; each implies its upstream stages."""

    DATE = "date"
    GEOMETRY = "geometry"
    ZENITH = "zenith"
    AZIMUTH = "azimuth"
    SOLAR_TIME = "solar_time"
    REFRACTION = "refraction"
    AIRMASS = "airmass"
    PRIME = "prime"
    ETR = "etr"
    TILT = "tilt"
    SUNSET_HOUR_ANGLE = "sunset_hour_angle"
    SHADOWBAND = "shadowband"
    SUNRISE_SUNSET = "sunrise_sunset"
    ALL = "all"


class DateInput(str, Enum):
    """Which date representation is authoritative for a call."""

    DAY_OF_YEAR = "day_of_year"
    MONTH_DAY = "month_day"


_STAGE_ORDER: dict[Stage, int] = {stage: i for i, stage in enumerate(Stage)}

# composite -> upstream composites (its own stage shares its name)
_DEPENDS: dict[Output, tuple[Output, ...]] = {
    Output.DATE: (),
    Output.GEOMETRY: (Output.DATE,),
    Output.ZENITH: (Output.GEOMETRY,),
    Output.AZIMUTH: (Output.ZENITH,),
    Output.SOLAR_TIME: (Output.GEOMETRY,),
    Output.REFRACTION: (Output.ZENITH,),
    Output.AIRMASS: (Output.REFRACTION,),
    Output.PRIME: (Output.AIRMASS,),
    Output.ETR: (Output.REFRACTION,),
    Output.TILT: (Output.AZIMUTH, Output.REFRACTION, Output.ETR),
    Output.SUNSET_HOUR_ANGLE: (Output.GEOMETRY,),
    Output.SHADOWBAND: (Output.SUNSET_HOUR_ANGLE,),
    Output.SUNRISE_SUNSET: (Output.SUNSET_HOUR_ANGLE, Output.SOLAR_TIME),
}


@lru_cache(maxsize=None)
def stages_for(output: Output) -> frozenset[Stage]:
    """All primitive stages needed to produce ``output``."""
    if output is Output.ALL:
        return frozenset(Stage)
    stages = {Stage(output.value)}
    for upstream in _DEPENDS[output]:
        stages |= stages_for(upstream)
    return frozenset(stages)


@dataclass(frozen=True)
class Request:
    """What a single ``solpos()`` call should compute.

    ``Request()`` asks for every output with day-of-year date input.
    Requests combine with ``|``.
    """

    outputs: frozenset[Output] = field(default_factory=lambda: frozenset({Output.ALL}))
    stages: frozenset[Stage] = frozenset()
    date_input: DateInput = DateInput.DAY_OF_YEAR

    @classmethod
    def of(
        cls,
        *outputs: Output | str,
        date_input: DateInput | str = DateInput.DAY_OF_YEAR,
    ) -> Request:
        return cls(
            outputs=frozenset(Output(o) for o in outputs),
            date_input=DateInput(date_input),
        )

    @classmethod
    def primitive(cls, *stages: Stage) -> Request:
        """Run exactly ``stages``; the caller supplies every input they read."""
        return cls(outputs=frozenset(), stages=frozenset(stages))

    def with_date_input(self, date_input: DateInput | str) -> Request:
        return replace(self, date_input=DateInput(date_input))

    def __or__(self, other: Request) -> Request:
        if not isinstance(other, Request):
            return NotImplemented
        date_input = self.date_input
        if not self.outputs:
            date_input = other.date_input
        elif other.outputs and other.date_input is not self.date_input:
            raise ValueError(
                f"Cannot combine requests with date inputs "
                f"{self.date_input.value!r} and {other.date_input.value!r}"
            )
        return Request(
            outputs=self.outputs | other.outputs,
            stages=self.stages | other.stages,
            date_input=date_input,
        )

    def resolve(self) -> tuple[Stage, ...]:
        """Ordered, de-duplicated stages to execute."""
        return _resolve(self.outputs, self.stages)


@lru_cache(maxsize=256)
def _resolve(outputs: frozenset[Output], stages: frozenset[Stage]) -> tuple[Stage, ...]:
    needed = set(stages)
    for output in outputs:
        needed |= stages_for(output)
    return tuple(sorted(needed, key=_STAGE_ORDER.__getitem__))
