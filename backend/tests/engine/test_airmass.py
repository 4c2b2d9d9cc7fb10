"""Tests for solpos.airmass: Kasten-Young relative and pressure airmass."""

from __future__ import annotations

import math

import numpy as np
import pytest

from solpos import AIRMASS_CEILING, pressure_airmass, relative_airmass
from solpos.incidence import unprime_factor


# Relative airmass at standard pressure for zenith 90, 80, ..., 0 degrees
_SWEEP = [37.92, 5.59, 2.90, 1.99, 1.55, 1.30, 1.15, 1.06, 1.02, 1.00]


class TestRelativeAirmass:
    @pytest.mark.parametrize(
        "zenith,expected", [(90.0 - 10.0 * i, am) for i, am in enumerate(_SWEEP)]
    )
    def test_zenith_sweep(self, zenith, expected):
        assert relative_airmass(zenith) == pytest.approx(expected, abs=0.02)

    def test_ceiling_at_horizon(self):
        assert relative_airmass(90.0) == pytest.approx(AIRMASS_CEILING)

    def test_finite_below_horizon(self):
        """Zenith beyond 90 degrees never produces inf or nan."""
        for zenith in (90.5, 93.0, 99.0, 180.0):
            am = relative_airmass(zenith)
            assert math.isfinite(am)
            assert am == AIRMASS_CEILING

    def test_scalar_returns_float(self):
        assert isinstance(relative_airmass(45.0), float)

    def test_array_input(self):
        zenith = np.linspace(0.0, 95.0, 20)
        am = relative_airmass(zenith)
        assert am.shape == zenith.shape
        assert np.all(np.isfinite(am))
        assert np.all(np.diff(am) >= 0.0)


class TestPressureAirmass:
    def test_standard_pressure_is_identity(self):
        assert pressure_airmass(1.5, 1013.0) == pytest.approx(1.5)

    def test_linear_in_pressure(self):
        assert pressure_airmass(2.0, 506.5) == pytest.approx(1.0)
        assert pressure_airmass(2.0, 0.0) == 0.0


class TestPrimeFactors:
    def test_unprime_at_zenith(self):
        assert unprime_factor(1.0) == pytest.approx(
            1.031 * math.exp(-1.4 / 10.3) + 0.1
        )

    def test_unprime_falls_with_airmass(self):
        assert unprime_factor(AIRMASS_CEILING) < unprime_factor(1.0)
