"""Tests for solpos.dates: day-of-year and month/day conversions."""

from __future__ import annotations

from solpos import DateInput, PositionRecord, Request, Output, solpos
from solpos.dates import day_of_year, days_in_year, month_day


class TestConversions:
    def test_benchmark_day(self):
        assert month_day(1999, 203) == (7, 22)
        assert day_of_year(1999, 7, 22) == 203

    def test_leap_day(self):
        assert month_day(2000, 60) == (2, 29)
        assert day_of_year(2000, 3, 1) == 61
        assert day_of_year(1999, 3, 1) == 60

    def test_year_bounds(self):
        assert month_day(1999, 1) == (1, 1)
        assert month_day(1999, 365) == (12, 31)
        assert month_day(2000, 366) == (12, 31)

    def test_century_rule(self):
        assert days_in_year(2000) == 366
        assert days_in_year(2100) == 365


class TestDateStage:
    """The date stage overwrites whichever representation was not the input."""

    def test_round_trip_through_solpos(self):
        """daynum -> (month, day) -> daynum with the date toggle flipped."""
        forward = PositionRecord(year=2000, daynum=250)
        assert solpos(forward, Request.of(Output.DATE)) == 0

        back = PositionRecord(year=2000, month=forward.month, day=forward.day, daynum=-1)
        request = Request.of(Output.DATE, date_input=DateInput.MONTH_DAY)
        assert solpos(back, request) == 0
        assert back.daynum == 250

    def test_month_day_overwrites_daynum(self):
        record = PositionRecord(year=1999, month=12, day=31, daynum=1)
        solpos(record, Request.of(Output.DATE, date_input=DateInput.MONTH_DAY))
        assert record.daynum == 365
