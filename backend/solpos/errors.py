"""Input error flags returned by the solar position engine.

Each bit corresponds to one out-of-range (or unset) input parameter.  Bits
are independent and accumulate, so a single call can report several bad
inputs at once.  A result of ``InputError(0)`` means every checked input
was valid.
"""

from __future__ import annotations

from enum import IntFlag
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .record import PositionRecord


class InputError(IntFlag):
    YEAR = 1 << 0
    MONTH = 1 << 1
    DAY = 1 << 2
    DAY_OF_YEAR = 1 << 3
    HOUR = 1 << 4
    MINUTE = 1 << 5
    SECOND = 1 << 6
    TIMEZONE = 1 << 7
    INTERVAL = 1 << 8
    SECOND_INTERVAL = 1 << 9
    LATITUDE = 1 << 10
    LONGITUDE = 1 << 11
    TEMPERATURE = 1 << 12
    PRESSURE = 1 << 13
    TILT = 1 << 14
    ASPECT = 1 << 15
    BAND_WIDTH = 1 << 16
    BAND_RADIUS = 1 << 17
    BAND_SKY = 1 << 18


_MESSAGES: dict[InputError, str] = {
    InputError.YEAR: "Please fix the year: computed with {r.year} [1950-2050]",
    InputError.MONTH: "Please fix the month: computed with {r.month}",
    InputError.DAY: "Please fix the day of month: computed with {r.day}",
    InputError.DAY_OF_YEAR: "Please fix the day-of-year: computed with {r.daynum}",
    InputError.HOUR: "Please fix the hour: computed with {r.hour}",
    InputError.MINUTE: "Please fix the minute: computed with {r.minute}",
    InputError.SECOND: "Please fix the second: computed with {r.second}",
    InputError.TIMEZONE: "Please fix the time zone: computed with {r.timezone}",
    InputError.INTERVAL: "Please fix the interval: computed with {r.interval} [0-28800]",
    InputError.SECOND_INTERVAL: (
        "Interval ({r.interval}) and second may not both be non-zero; "
        "second was treated as 0"
    ),
    InputError.LATITUDE: "Please fix the latitude: computed with {r.latitude}",
    InputError.LONGITUDE: "Please fix the longitude: computed with {r.longitude}",
    InputError.TEMPERATURE: "Please fix the temperature: computed with {r.temperature}",
    InputError.PRESSURE: "Please fix the pressure: computed with {r.pressure}",
    InputError.TILT: "Please fix the tilt: computed with {r.tilt}",
    InputError.ASPECT: "Please fix the aspect: computed with {r.aspect}",
    InputError.BAND_WIDTH: "Please fix the shadowband width: computed with {r.band_width}",
    InputError.BAND_RADIUS: "Please fix the shadowband radius: computed with {r.band_radius}",
    InputError.BAND_SKY: "Please fix the shadowband sky factor: computed with {r.band_sky}",
}


def describe_errors(code: InputError | int, record: PositionRecord) -> list[str]:
    """Translate an error code into one human-readable line per set bit.

    The record is expected to be the one the code was produced for; the
    messages quote the value that was actually used for the computation
    (after clamping or substitution).
    """
    code = InputError(code)
    return [
        message.format(r=record)
        for flag, message in _MESSAGES.items()
        if flag in code
    ]
