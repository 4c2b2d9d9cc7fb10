"""Tests for solpos.request: output groups and stage resolution."""

from __future__ import annotations

import pytest

from solpos import DateInput, Output, Request, Stage
from solpos.request import stages_for


class TestResolve:
    """Composite outputs expand to ordered, de-duplicated stage lists."""

    def test_default_request_runs_everything_in_order(self):
        assert Request().resolve() == tuple(Stage)

    def test_geometry_needs_date(self):
        assert Request.of(Output.GEOMETRY).resolve() == (Stage.DATE, Stage.GEOMETRY)

    def test_refraction_chain(self):
        assert Request.of(Output.REFRACTION).resolve() == (
            Stage.DATE,
            Stage.GEOMETRY,
            Stage.ZENITH,
            Stage.REFRACTION,
        )

    def test_shadowband_skips_zenith(self):
        assert Request.of(Output.SHADOWBAND).resolve() == (
            Stage.DATE,
            Stage.GEOMETRY,
            Stage.SUNSET_HOUR_ANGLE,
            Stage.SHADOWBAND,
        )

    def test_tilt_dependencies(self):
        stages = stages_for(Output.TILT)
        assert {Stage.AZIMUTH, Stage.REFRACTION, Stage.ETR, Stage.TILT} <= stages
        assert Stage.AIRMASS not in stages

    def test_sunrise_needs_solar_time(self):
        stages = Request.of(Output.SUNRISE_SUNSET).resolve()
        assert Stage.SOLAR_TIME in stages
        assert Stage.SUNSET_HOUR_ANGLE in stages
        assert stages.index(Stage.SUNRISE_SUNSET) == len(stages) - 1

    def test_primitive_runs_only_named_stages(self):
        assert Request.primitive(Stage.AIRMASS).resolve() == (Stage.AIRMASS,)

    def test_primitive_stages_sorted(self):
        assert Request.primitive(Stage.PRIME, Stage.AIRMASS).resolve() == (
            Stage.AIRMASS,
            Stage.PRIME,
        )

    def test_outputs_from_strings(self):
        assert Request.of("airmass").resolve() == Request.of(Output.AIRMASS).resolve()

    def test_unknown_output_rejected(self):
        with pytest.raises(ValueError):
            Request.of("moon_phase")


class TestCombine:
    """Requests combine with ``|`` like the bitmasks they replace."""

    def test_union_of_outputs(self):
        combined = Request.of(Output.REFRACTION) | Request.of(Output.SHADOWBAND)
        stages = combined.resolve()
        assert Stage.REFRACTION in stages
        assert Stage.SHADOWBAND in stages
        assert Stage.AIRMASS not in stages

    def test_date_toggle(self):
        request = Request.of(Output.REFRACTION, Output.SHADOWBAND)
        month_day = request.with_date_input(DateInput.MONTH_DAY)
        assert month_day.date_input is DateInput.MONTH_DAY
        assert month_day.resolve() == request.resolve()
        assert month_day.with_date_input("day_of_year") == request

    def test_primitive_adopts_composite_date_input(self):
        composite = Request.of(Output.GEOMETRY, date_input=DateInput.MONTH_DAY)
        combined = Request.primitive(Stage.AIRMASS) | composite
        assert combined.date_input is DateInput.MONTH_DAY

    def test_conflicting_date_inputs(self):
        with pytest.raises(ValueError, match="date inputs"):
            Request.of(Output.GEOMETRY) | Request.of(
                Output.AIRMASS, date_input=DateInput.MONTH_DAY
            )
