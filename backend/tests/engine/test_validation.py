"""Tests for solpos.validate: range checks, clamping and error messages."""

from __future__ import annotations

import logging
import math

from solpos import DateInput, InputError, Output, Request, describe_errors, solpos


class TestDateChecks:
    def test_day_366_in_common_year(self, make_record):
        record = make_record(daynum=366)
        code = solpos(record)
        assert code == InputError.DAY_OF_YEAR
        assert record.daynum == 365
        assert (record.month, record.day) == (12, 31)

    def test_day_366_in_leap_year(self, make_record):
        record = make_record(year=2000, daynum=366)
        assert solpos(record) == 0

    def test_month_day_mode_checks_month_and_day(self, make_record):
        record = make_record(year=1999, month=2, day=30, daynum=None)
        code = solpos(record, Request().with_date_input(DateInput.MONTH_DAY))
        assert code == InputError.DAY
        assert record.day == 28
        assert record.daynum == 59

    def test_day_of_year_mode_ignores_month(self, make_record):
        record = make_record(month=13, day=40)
        assert solpos(record) == 0
        assert (record.month, record.day) == (7, 22)

    def test_year_range(self, make_record):
        record = make_record(year=2051)
        assert solpos(record, Request.of(Output.DATE)) == InputError.YEAR
        assert record.year == 2050


class TestTimeChecks:
    def test_hour_24_with_minutes(self, make_record):
        record = make_record(hour=24, minute=10, second=0)
        code = solpos(record)
        assert code == InputError.HOUR | InputError.MINUTE
        assert record.minute == 0

    def test_hour_24_exactly(self, make_record):
        record = make_record(hour=24, minute=0, second=0)
        assert solpos(record) == 0

    def test_interval_with_seconds(self, make_record):
        record = make_record(interval=60)
        code = solpos(record)
        assert code == InputError.SECOND_INTERVAL
        assert record.second == 0

    def test_interval_range(self, make_record):
        record = make_record(interval=30000, second=0)
        assert solpos(record) == InputError.INTERVAL
        assert record.interval == 28800

    def test_timezone_range(self, make_record):
        record = make_record(timezone=-13.0)
        assert solpos(record) == InputError.TIMEZONE
        assert record.timezone == -12.0


class TestOptionalInputs:
    def test_nan_latitude_is_substituted(self, make_record):
        record = make_record(latitude=math.nan)
        code = solpos(record)
        assert code == InputError.LATITUDE
        assert record.latitude == 0.0
        assert math.isfinite(record.zenith_ref)

    def test_pressure_range(self, make_record):
        record = make_record(pressure=-5.0)
        assert solpos(record, Request.of(Output.REFRACTION)) == InputError.PRESSURE
        assert record.pressure == 0.0

    def test_shadowband_inputs(self, make_record):
        record = make_record(band_width=0.5, band_radius=150.0, band_sky=2.0)
        code = solpos(record, Request.of(Output.SHADOWBAND))
        assert code == InputError.BAND_WIDTH | InputError.BAND_RADIUS | InputError.BAND_SKY
        assert (record.band_width, record.band_radius, record.band_sky) == (1.0, 100.0, 1.0)

    def test_unrequested_inputs_not_checked(self, make_record):
        """Tilt and aspect are only read by the tilt stage."""
        record = make_record(tilt=500.0, aspect=-720.0)
        assert solpos(record, Request.of(Output.AIRMASS)) == 0
        assert record.tilt == 500.0

    def test_aspect_checked_for_tilt(self, make_record):
        record = make_record(aspect=-720.0)
        assert solpos(record, Request.of(Output.TILT)) == InputError.ASPECT
        assert record.aspect == -360.0


class TestReporting:
    def test_describe_errors_quotes_used_value(self, make_record):
        record = make_record(year=99)
        code = solpos(record)
        assert describe_errors(code, record) == [
            "Please fix the year: computed with 1950 [1950-2050]"
        ]

    def test_describe_errors_one_line_per_flag(self, make_record):
        record = make_record(latitude=95.0, longitude=200.0)
        code = solpos(record)
        messages = describe_errors(code, record)
        assert len(messages) == 2
        assert "latitude: computed with 90.0" in messages[0]
        assert "longitude: computed with 180.0" in messages[1]

    def test_describe_no_errors(self, atlanta):
        assert describe_errors(solpos(atlanta), atlanta) == []

    def test_clamping_is_logged(self, make_record, caplog):
        with caplog.at_level(logging.WARNING, logger="solpos.validate"):
            solpos(make_record(temperature=150.0))
        assert any("temperature=150.0" in r.getMessage() for r in caplog.records)
