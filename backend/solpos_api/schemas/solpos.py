from pydantic import BaseModel, Field

from solpos import DateInput, Output, PolarCondition, PositionRecord, Request
from solpos.record import (
    DEFAULT_ASPECT,
    DEFAULT_BAND_RADIUS,
    DEFAULT_BAND_SKY,
    DEFAULT_BAND_WIDTH,
    DEFAULT_TILT,
    SOLAR_CONSTANT,
    STANDARD_PRESSURE,
    STANDARD_TEMPERATURE,
)


class PositionInput(BaseModel):
    """Inputs for one solar position computation.

    Range problems are not rejected here: the engine clamps them and reports
    them in ``error_code`` / ``errors`` of the response.
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None
    daynum: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    latitude: float | None = None
    longitude: float | None = None
    timezone: float | None = Field(default=None, description="Hours from UTC, standard time")

    interval: int = Field(default=0, description="Measurement interval ending at the time stamp (s)")
    pressure: float = STANDARD_PRESSURE
    temperature: float = STANDARD_TEMPERATURE
    tilt: float = DEFAULT_TILT
    aspect: float = DEFAULT_ASPECT
    solar_constant: float = SOLAR_CONSTANT
    band_width: float = DEFAULT_BAND_WIDTH
    band_radius: float = DEFAULT_BAND_RADIUS
    band_sky: float = DEFAULT_BAND_SKY

    outputs: list[Output] = Field(
        default_factory=lambda: [Output.ALL],
        description="Output groups to compute; upstream groups are added automatically.",
    )
    date_input: DateInput = DateInput.DAY_OF_YEAR

    def to_record(self) -> PositionRecord:
        return PositionRecord(**self.model_dump(exclude={"outputs", "date_input"}))

    def to_request(self) -> Request:
        return Request.of(*self.outputs, date_input=self.date_input)


class PositionResult(BaseModel):
    error_code: int = Field(description="Input error flags; 0 when every checked input was valid")
    errors: list[str] = Field(default_factory=list)

    year: int | None = None
    month: int | None = None
    day: int | None = None
    daynum: int | None = None

    declination: float | None = None
    right_ascension: float | None = None
    hour_angle: float | None = None
    equation_of_time: float | None = None
    zenith_etr: float | None = None
    elevation_etr: float | None = None
    azimuth: float | None = None
    zenith_ref: float | None = None
    elevation_ref: float | None = None
    cos_zenith: float | None = None
    airmass: float | None = None
    airmass_pressure: float | None = None
    etrn: float | None = None
    etr: float | None = None
    cos_incidence: float | None = None
    etr_tilt: float | None = None
    unprime: float | None = None
    prime: float | None = None
    sbcf: float | None = None
    sunset_hour_angle: float | None = None
    sunrise: float | None = None
    sunset: float | None = None
    polar_condition: PolarCondition | None = None


class BatchRequest(BaseModel):
    positions: list[PositionInput] = Field(min_length=1)


class BatchResult(BaseModel):
    results: list[PositionResult]


class AirmassRequest(BaseModel):
    zenith_ref: float = Field(description="Refracted solar zenith angle (deg)")
    pressure: float = Field(default=STANDARD_PRESSURE, ge=0.0, le=2000.0)


class AirmassResult(BaseModel):
    zenith_ref: float
    pressure: float
    airmass: float
    airmass_pressure: float
