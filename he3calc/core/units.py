"""Unit conversion module — single conversion point for the calculation core.

CRITICAL: All unit conversions MUST go through this module.

Internal (core) units:
    Wavelength  : Å
    Energy      : meV
    Time        : hour (decay chart), minute (build-up chart, CSV)
    Polarization: percent at the API boundary, fraction inside the
                  neutron formulas

Every function accepts a float or a NumPy array. Division by zero and
square roots of negative values return inf/NaN instead of raising.
"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import NDArray

from he3calc.core.physical_constants import DEFAULT_CONSTANTS


FloatOrArray = Union[float, NDArray[np.float64]]


def as_output(value: NDArray[np.float64]) -> FloatOrArray:
    """0-d result → Python float, anything else stays an array."""
    if np.ndim(value) == 0:
        return float(value)
    return value


def as_float_array(value: FloatOrArray) -> NDArray[np.float64]:
    """Coerce scalar or sequence input to a float64 array."""
    return np.asarray(value, dtype=np.float64)


# ---------------------------------------------------------------------------
# Energy ↔ wavelength
# ---------------------------------------------------------------------------

def energy_from_wavelength(
    wavelength: FloatOrArray,
    constant: float = DEFAULT_CONSTANTS.energy_wavelength_constant,
) -> FloatOrArray:
    """Wavelength [Å] → neutron energy [meV].

    E = 81.81 / λ²
    """
    lam = as_float_array(wavelength)
    with np.errstate(all="ignore"):
        return as_output(constant / (lam * lam))


def wavelength_from_energy(
    energy: FloatOrArray,
    constant: float = DEFAULT_CONSTANTS.energy_wavelength_constant,
) -> FloatOrArray:
    """Neutron energy [meV] → wavelength [Å].

    λ = sqrt(81.81 / E)
    """
    e = as_float_array(energy)
    with np.errstate(all="ignore"):
        return as_output(np.sqrt(constant / e))


# ---------------------------------------------------------------------------
# Polarization
# ---------------------------------------------------------------------------

def percent_to_fraction(percent: FloatOrArray) -> FloatOrArray:
    """Percent (0–100) → fraction (0–1). Not clamped."""
    return as_output(as_float_array(percent) / 100.0)


def fraction_to_percent(fraction: FloatOrArray) -> FloatOrArray:
    """Fraction (0–1) → percent (0–100). Not clamped."""
    return as_output(as_float_array(fraction) * 100.0)


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------

def hours_to_minutes(hours: FloatOrArray) -> FloatOrArray:
    """hour → minute."""
    return as_output(as_float_array(hours) * 60.0)


def minutes_to_hours(minutes: FloatOrArray) -> FloatOrArray:
    """minute → hour."""
    return as_output(as_float_array(minutes) / 60.0)
