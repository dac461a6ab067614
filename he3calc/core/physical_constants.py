"""Physical constants for the He-3 neutron spin filter.

One authoritative set. Gas thickness is expressed in amagat·cm, so the number
density is the Loschmidt constant (1 amagat at 0 °C, 1 atm).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicalConstants:
    """Constants entering the absorption factor n·σ(λ).

    Attributes:
        number_density: He-3 number density per unit thickness [cm⁻³].
        sigma0_barn: Absorption cross-section at the reference wavelength [barn].
        reference_wavelength: Wavelength at which sigma0 applies [Å].
        barn_to_cm2: Barn → cm² conversion.
        energy_wavelength_constant: E·λ² for the neutron [meV·Å²].
    """
    number_density: float = 2.687e19
    sigma0_barn: float = 5333.0
    reference_wavelength: float = 1.8
    barn_to_cm2: float = 1e-24
    energy_wavelength_constant: float = 81.81


DEFAULT_CONSTANTS = PhysicalConstants()
