"""Formula engine — He-3 relaxation and neutron spin-filter performance.

Closed-form expressions only. Polarization arguments of the neutron
functions are fractions [0–1]; every result is in percent.

    σ(λ)  = σ0 · λ / 1.8 Å
    f(λ)  = n · σ(λ)                       [per amagat·cm]
    P_He  = P0 · exp(-t / T1)
    P_n   = tanh(f · P_He · d)
    T_n   = exp(-f·d) · cosh(f·d · P_He)
    FOM   = P_n² · T_n

All functions accept floats or NumPy arrays. Invalid arithmetic (T1 = 0,
λ = 0, overflow) yields inf/NaN rather than an exception so that one bad
sample never aborts a whole series.
"""

from __future__ import annotations

import numpy as np

from he3calc.core.physical_constants import DEFAULT_CONSTANTS, PhysicalConstants
from he3calc.core.units import (
    FloatOrArray,
    as_float_array,
    as_output,
    energy_from_wavelength,
    wavelength_from_energy,
)
from he3calc.models.results import FilterPerformance

__all__ = [
    "common_factor",
    "he3_decay",
    "buildup_polarization",
    "neutron_polarization",
    "neutron_transmission",
    "figure_of_merit",
    "evaluate_filter",
    "energy_from_wavelength",
    "wavelength_from_energy",
]


def common_factor(
    wavelength: FloatOrArray,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> FloatOrArray:
    """Absorption factor n·σ(λ) with σ scaled linearly from 1.8 Å.

    Args:
        wavelength: Neutron wavelength [Å].
        constants: Physical constant set.

    Returns:
        n·σ(λ) [cm⁻¹ per amagat·cm of gas thickness].
    """
    lam = as_float_array(wavelength)
    with np.errstate(all="ignore"):
        sigma = constants.sigma0_barn * (lam / constants.reference_wavelength)
        return as_output(constants.number_density * sigma * constants.barn_to_cm2)


def he3_decay(
    time: FloatOrArray,
    initial_polarization: FloatOrArray,
    relaxation_time: FloatOrArray,
) -> FloatOrArray:
    """He-3 polarization after free relaxation.

    P(t) = P0 · exp(-t / T1). Not clamped; negative t is accepted.

    Args:
        time: Elapsed time (same unit as relaxation_time).
        initial_polarization: P0 [%].
        relaxation_time: T1.

    Returns:
        Polarization in the unit of P0 [%].
    """
    t = as_float_array(time)
    p0 = as_float_array(initial_polarization)
    t1 = as_float_array(relaxation_time)
    with np.errstate(all="ignore"):
        return as_output(p0 * np.exp(-t / t1))


def buildup_polarization(
    time: FloatOrArray,
    max_polarization: FloatOrArray,
    pumping_time: FloatOrArray,
    relaxation_time: FloatOrArray,
) -> FloatOrArray:
    """Polarization during optical pumping, limited by relaxation.

    P(t) = Pmax · (1 - exp(-t / τp)) · exp(-t / T1)

    Args:
        time: Pumping time [min].
        max_polarization: Pmax [%].
        pumping_time: Pumping time constant τp [min].
        relaxation_time: T1 [min].

    Returns:
        Polarization [%].
    """
    t = as_float_array(time)
    p_max = as_float_array(max_polarization)
    tau = as_float_array(pumping_time)
    t1 = as_float_array(relaxation_time)
    with np.errstate(all="ignore"):
        growth = p_max * (1.0 - np.exp(-t / tau))
        return as_output(growth * np.exp(-t / t1))


def neutron_polarization(
    wavelength: FloatOrArray,
    he3_polarization: FloatOrArray,
    gas_thickness: FloatOrArray,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> FloatOrArray:
    """Neutron beam polarization behind the cell.

    P_n = tanh(f(λ) · P_He · d) · 100

    Args:
        wavelength: Neutron wavelength [Å].
        he3_polarization: P_He [fraction].
        gas_thickness: d [amagat·cm].
        constants: Physical constant set.

    Returns:
        P_n [%], in (-100, 100).
    """
    cf = as_float_array(common_factor(wavelength, constants))
    p_he = as_float_array(he3_polarization)
    d = as_float_array(gas_thickness)
    with np.errstate(all="ignore"):
        return as_output(np.tanh(cf * p_he * d) * 100.0)


def neutron_transmission(
    wavelength: FloatOrArray,
    he3_polarization: FloatOrArray,
    gas_thickness: FloatOrArray,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> FloatOrArray:
    """Unpolarized-beam transmission through the cell.

    T_n = exp(-f(λ)·d) · cosh(f(λ)·d · P_He) · 100

    Args:
        wavelength: Neutron wavelength [Å].
        he3_polarization: P_He [fraction].
        gas_thickness: d [amagat·cm].
        constants: Physical constant set.

    Returns:
        T_n [%].
    """
    cf = as_float_array(common_factor(wavelength, constants))
    p_he = as_float_array(he3_polarization)
    d = as_float_array(gas_thickness)
    with np.errstate(all="ignore"):
        factor = cf * d
        return as_output(np.exp(-factor) * np.cosh(factor * p_he) * 100.0)


def figure_of_merit(
    wavelength: FloatOrArray,
    he3_polarization: FloatOrArray,
    gas_thickness: FloatOrArray,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> FloatOrArray:
    """Spin-filter figure of merit P_n² · T_n.

    Args:
        wavelength: Neutron wavelength [Å].
        he3_polarization: P_He [fraction].
        gas_thickness: d [amagat·cm].
        constants: Physical constant set.

    Returns:
        FOM [%].
    """
    cf = as_float_array(common_factor(wavelength, constants))
    p_he = as_float_array(he3_polarization)
    d = as_float_array(gas_thickness)
    with np.errstate(all="ignore"):
        factor = cf * d
        pn = np.tanh(cf * p_he * d)
        tn = np.exp(-factor) * np.cosh(factor * p_he)
        return as_output(pn * pn * tn * 100.0)


def evaluate_filter(
    wavelength: float,
    he3_polarization: float,
    gas_thickness: float,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> FilterPerformance:
    """All spin-filter figures at one wavelength.

    Args:
        wavelength: Neutron wavelength [Å].
        he3_polarization: P_He [fraction].
        gas_thickness: d [amagat·cm].
        constants: Physical constant set.

    Returns:
        FilterPerformance with percent values.
    """
    return FilterPerformance(
        wavelength=float(wavelength),
        energy=float(energy_from_wavelength(
            wavelength, constants.energy_wavelength_constant,
        )),
        absorption_factor=float(common_factor(wavelength, constants)),
        neutron_polarization=float(neutron_polarization(
            wavelength, he3_polarization, gas_thickness, constants,
        )),
        neutron_transmission=float(neutron_transmission(
            wavelength, he3_polarization, gas_thickness, constants,
        )),
        figure_of_merit=float(figure_of_merit(
            wavelength, he3_polarization, gas_thickness, constants,
        )),
    )
