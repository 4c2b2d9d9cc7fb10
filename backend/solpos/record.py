"""
Position record shared by every stage of the solar position engine.

A ``PositionRecord`` is created by the caller, mutated in place by the
stages of a single ``solpos()`` call, and discarded afterwards.  Required
inputs default to ``None`` (unset); the validator flags and substitutes
them.  Optional inputs default to nominal values.  Output fields stay
``None`` until the stage that owns them runs, so fields of stages that
were not requested are undefined for that call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Nominal values for the optional inputs
# ---------------------------------------------------------------------------

STANDARD_PRESSURE: float = 1013.0      # mb
STANDARD_TEMPERATURE: float = 10.0     # degC
SOLAR_CONSTANT: float = 1367.0         # W/m^2
DEFAULT_TILT: float = 0.0              # horizontal
DEFAULT_ASPECT: float = 180.0          # south-facing
# Eppley shadow band geometry
DEFAULT_BAND_WIDTH: float = 7.6        # cm
DEFAULT_BAND_RADIUS: float = 31.7      # cm
DEFAULT_BAND_SKY: float = 0.04         # drummond factor for partly cloudy skies


class PolarCondition(str, Enum):
    """Sun never crosses the horizon on the computed day."""

    POLAR_DAY = "polar_day"
    POLAR_NIGHT = "polar_night"


@dataclass
class PositionRecord:
    """Inputs, intermediates and outputs of one solar position computation."""

    # --- Required inputs (None = unset) ---
    year: int | None = None          # four-digit year, 1950-2050
    month: int | None = None         # 1-12 (input when date_input is MONTH_DAY)
    day: int | None = None           # day of month (input when MONTH_DAY)
    daynum: int | None = None        # day of year (input when DAY_OF_YEAR)
    hour: int | None = None          # local standard time, 0-24
    minute: int | None = None        # 0-59
    second: int | None = None        # 0-59
    latitude: float | None = None    # degrees, north positive
    longitude: float | None = None   # degrees, east positive
    timezone: float | None = None    # hours from UTC, west negative

    # --- Optional inputs ---
    interval: int = 0                # measurement interval ending at the time stamp (s)
    pressure: float = STANDARD_PRESSURE
    temperature: float = STANDARD_TEMPERATURE
    tilt: float = DEFAULT_TILT       # surface tilt from horizontal (deg)
    aspect: float = DEFAULT_ASPECT   # surface azimuth, clockwise from north (deg)
    solar_constant: float = SOLAR_CONSTANT
    band_width: float = DEFAULT_BAND_WIDTH
    band_radius: float = DEFAULT_BAND_RADIUS
    band_sky: float = DEFAULT_BAND_SKY

    # --- Orbital geometry ---
    day_angle: float | None = None           # deg
    erv: float | None = None                 # earth radius vector factor (solar distance)^-2
    utime: float | None = None               # universal time, decimal hours
    julian_day: float | None = None          # julian day minus 2,400,000
    ecliptic_time: float | None = None       # days from noon 1 JAN 2000
    mean_longitude: float | None = None      # deg
    mean_anomaly: float | None = None        # deg
    ecliptic_longitude: float | None = None  # deg
    obliquity: float | None = None           # obliquity of the ecliptic (deg)
    declination: float | None = None         # deg
    right_ascension: float | None = None     # deg
    gmst: float | None = None                # greenwich mean sidereal time (h)
    lmst: float | None = None                # local mean sidereal time (deg)
    hour_angle: float | None = None          # deg, negative before solar noon

    # --- Local position ---
    zenith_etr: float | None = None          # unrefracted zenith (deg)
    elevation_etr: float | None = None       # unrefracted elevation (deg)
    azimuth: float | None = None             # clockwise from north (deg)
    true_solar_time: float | None = None     # minutes
    tst_fix: float | None = None             # true solar time minus clock time (min)
    equation_of_time: float | None = None    # minutes

    # --- Refraction / airmass ---
    elevation_ref: float | None = None       # refracted elevation (deg)
    zenith_ref: float | None = None          # refracted zenith (deg)
    cos_zenith: float | None = None          # cosine of refracted zenith
    airmass: float | None = None             # relative optical airmass
    airmass_pressure: float | None = None    # pressure-corrected airmass

    # --- Irradiance / incidence ---
    etrn: float | None = None                # extraterrestrial normal (W/m^2)
    etr: float | None = None                 # extraterrestrial horizontal (W/m^2)
    cos_incidence: float | None = None       # on the tilted surface
    etr_tilt: float | None = None            # extraterrestrial on the tilted surface (W/m^2)
    unprime: float | None = None             # Perez factor: Kt -> Kt'
    prime: float | None = None               # Perez factor: Kt' -> Kt
    sbcf: float | None = None                # shadow-band correction factor

    # --- Sunrise / sunset ---
    sunset_hour_angle: float | None = None   # deg
    sunrise: float | None = None             # minutes from local midnight
    sunset: float | None = None              # minutes from local midnight
    polar_condition: PolarCondition | None = None
