"""
Solar position and intensity engine.

Computes the apparent position of the sun (zenith, azimuth, hour angle,
declination), refraction-corrected elevation, optical airmass,
extraterrestrial irradiance on normal, horizontal and tilted surfaces,
shadow-band correction factors and sunrise/sunset times for an observer
location and local standard time.  Derived from NREL's SOLPOS 2.0.
"""

from .airmass import AIRMASS_CEILING, pressure_airmass, relative_airmass
from .dates import day_of_year, month_day
from .dispatch import solpos
from .errors import InputError, describe_errors
from .incidence import cosine_of_incidence
from .record import PolarCondition, PositionRecord
from .refraction import refraction_correction
from .request import DateInput, Output, Request, Stage
from .sunrise import NO_CROSSING
from .validate import validate

__all__ = [
    # engine
    "solpos",
    "validate",
    # record / request
    "PositionRecord",
    "PolarCondition",
    "Request",
    "Output",
    "Stage",
    "DateInput",
    # errors
    "InputError",
    "describe_errors",
    # formulas
    "AIRMASS_CEILING",
    "relative_airmass",
    "pressure_airmass",
    "refraction_correction",
    "cosine_of_incidence",
    "day_of_year",
    "month_day",
    "NO_CROSSING",
]
