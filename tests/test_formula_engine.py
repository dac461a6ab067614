"""Tests for the formula engine — decay, spin-filter figures, build-up.

Reference values: n = 2.687e19 cm⁻³, σ0 = 5333 b at 1.8 Å,
λ = 1.8 Å, P_He = 0.70, d = 10 amagat·cm.
"""

import math

import numpy as np
import pytest

from he3calc.core.formula_engine import (
    buildup_polarization,
    common_factor,
    evaluate_filter,
    figure_of_merit,
    he3_decay,
    neutron_polarization,
    neutron_transmission,
)
from he3calc.core.physical_constants import DEFAULT_CONSTANTS, PhysicalConstants


class TestCommonFactor:
    def test_reference_wavelength_exact(self):
        c = DEFAULT_CONSTANTS
        assert common_factor(1.8) == c.number_density * c.sigma0_barn * c.barn_to_cm2

    def test_reference_value(self):
        assert common_factor(1.8) == pytest.approx(0.14329771, rel=1e-6)

    def test_linear_in_wavelength(self):
        assert common_factor(3.6) == pytest.approx(2 * common_factor(1.8))

    def test_zero_wavelength(self):
        assert common_factor(0.0) == 0.0

    def test_custom_constants(self):
        c = PhysicalConstants(number_density=1e20)
        assert common_factor(1.8, c) == pytest.approx(1e20 * 5333 * 1e-24)

    def test_array(self):
        result = common_factor(np.array([1.8, 3.6]))
        assert result.shape == (2,)


class TestHe3Decay:
    def test_initial_value(self):
        assert he3_decay(0.0, 70.0, 100.0) == 70.0

    def test_one_time_constant(self):
        assert he3_decay(100.0, 70.0, 100.0) == pytest.approx(70.0 / math.e)

    def test_monotonic_decrease(self):
        times = np.linspace(0.0, 48.0, 50)
        values = he3_decay(times, 70.0, 100.0)
        assert np.all(np.diff(values) < 0)

    def test_zero_relaxation_time_not_raising(self):
        result = he3_decay(np.array([0.0, 1.0]), 70.0, 0.0)
        assert math.isnan(result[0])
        assert result[1] == 0.0

    def test_not_clamped(self):
        assert he3_decay(0.0, 120.0, 10.0) == 120.0

    def test_negative_time_grows(self):
        assert he3_decay(-10.0, 50.0, 10.0) > 50.0


class TestNeutronPolarization:
    def test_reference_scenario(self):
        assert neutron_polarization(1.8, 0.7, 10.0) == pytest.approx(76.29, rel=1e-3)

    def test_matches_closed_form(self):
        expected = math.tanh(common_factor(5.0) * 0.7 * 10.0) * 100.0
        assert neutron_polarization(5.0, 0.7, 10.0) == pytest.approx(expected, rel=1e-12)

    def test_unpolarized_gas(self):
        assert neutron_polarization(5.0, 0.0, 10.0) == 0.0

    def test_bounded(self):
        lam = np.linspace(0.1, 50.0, 100)
        pn = neutron_polarization(lam, 0.9, 30.0)
        assert np.all(pn <= 100.0)
        assert np.all(pn >= 0.0)

    def test_increases_with_wavelength(self):
        lam = np.linspace(0.5, 10.0, 40)
        assert np.all(np.diff(neutron_polarization(lam, 0.7, 10.0)) > 0)


class TestNeutronTransmission:
    def test_reference_scenario(self):
        assert neutron_transmission(1.8, 0.7, 10.0) == pytest.approx(36.90, rel=1e-3)

    def test_unpolarized_gas(self):
        expected = math.exp(-common_factor(1.8) * 10.0) * 100.0
        assert neutron_transmission(1.8, 0.0, 10.0) == pytest.approx(expected, rel=1e-12)

    def test_empty_cell(self):
        assert neutron_transmission(5.0, 0.7, 0.0) == pytest.approx(100.0)

    def test_full_polarization_limit(self):
        # exp(-x)·cosh(x) → 1/2 for large x
        assert neutron_transmission(20.0, 1.0, 50.0) == pytest.approx(50.0, rel=1e-6)


class TestFigureOfMerit:
    def test_reference_scenario(self):
        assert figure_of_merit(1.8, 0.7, 10.0) == pytest.approx(21.48, rel=1e-3)

    def test_consistent_with_components(self):
        pn = neutron_polarization(4.0, 0.65, 12.0) / 100.0
        tn = neutron_transmission(4.0, 0.65, 12.0) / 100.0
        assert figure_of_merit(4.0, 0.65, 12.0) == pytest.approx(pn * pn * tn * 100.0, rel=1e-12)

    def test_zero_polarization(self):
        assert figure_of_merit(5.0, 0.0, 10.0) == 0.0

    def test_overflow_is_not_an_error(self):
        result = figure_of_merit(1e6, 0.7, 1e6)
        assert not np.isfinite(result) or result >= 0.0


class TestBuildUp:
    def test_starts_at_zero(self):
        assert buildup_polarization(0.0, 70.0, 30.0, 120.0) == 0.0

    def test_one_pumping_constant(self):
        expected = 70.0 * (1 - math.exp(-1.0)) * math.exp(-30.0 / 120.0)
        assert buildup_polarization(30.0, 70.0, 30.0, 120.0) == pytest.approx(expected)

    def test_no_relaxation_saturates(self):
        assert buildup_polarization(1e4, 70.0, 30.0, math.inf) == pytest.approx(70.0)

    def test_array(self):
        t = np.array([0.0, 30.0, 60.0])
        assert buildup_polarization(t, 70.0, 30.0, 120.0).shape == (3,)


class TestEvaluateFilter:
    def test_fields(self):
        perf = evaluate_filter(1.8, 0.7, 10.0)
        assert perf.wavelength == 1.8
        assert perf.energy == pytest.approx(81.81 / 1.8 ** 2)
        assert perf.absorption_factor == pytest.approx(0.14329771, rel=1e-6)
        assert perf.neutron_polarization == pytest.approx(76.29, rel=1e-3)
        assert perf.neutron_transmission == pytest.approx(36.90, rel=1e-3)
        assert perf.figure_of_merit == pytest.approx(21.48, rel=1e-3)
