"""Formula reference — the expressions shown on the Function Reference tab."""

from __future__ import annotations

from dataclasses import dataclass, field

from he3calc.core.i18n import t
from he3calc.core.physical_constants import DEFAULT_CONSTANTS, PhysicalConstants


@dataclass(frozen=True)
class FormulaParameter:
    symbol: str
    description: str


@dataclass(frozen=True)
class FormulaInfo:
    """One formula entry.

    Attributes:
        name: Display title.
        formula: Plain-text (Unicode) expression.
        description: Optional one-line explanation.
        parameters: Symbols used in the formula.
    """
    name: str
    formula: str
    description: str = ""
    parameters: tuple[FormulaParameter, ...] = field(default_factory=tuple)


def formula_reference() -> list[FormulaInfo]:
    """Formula entries in display order, translated to the active language."""
    return [
        FormulaInfo(
            name=t("reference.he3.name", "He-3 Polarization"),
            formula="P_He(t) = P₀ · exp(−t / τ)",
            parameters=(
                FormulaParameter("P₀", t("reference.he3.p0", "Initial He-3 polarization")),
                FormulaParameter("τ", t("reference.he3.tau", "Relaxation time constant")),
            ),
        ),
        FormulaInfo(
            name=t("reference.pn.name", "Neutron Polarization"),
            formula="P_n = tanh(ρd · σ · P_He)",
            parameters=(
                FormulaParameter(
                    "ρd",
                    t("reference.pn.rho_d",
                      "He-3 gas thickness (amagat cm): number density times gas length"),
                ),
                FormulaParameter(
                    "σ",
                    t("reference.pn.sigma",
                      "Neutron absorption cross section (barn), σ₀·λ/1.8 Å"),
                ),
                FormulaParameter("P_He", t("reference.pn.p_he", "He-3 polarization")),
            ),
        ),
        FormulaInfo(
            name=t("reference.tn.name", "Neutron Transmission"),
            formula="T_n = exp(−ρd · σ) · cosh(ρd · σ · P_He)",
        ),
        FormulaInfo(
            name=t("reference.fom.name", "Figure Of Merit"),
            formula="FOM = P_n² · T_n",
        ),
        FormulaInfo(
            name=t("reference.buildup.name", "Pumping Build-up"),
            formula="P(t) = P_max · (1 − exp(−t / τ_p)) · exp(−t / T₁)",
            description=t(
                "reference.buildup.description",
                "Growth toward the maximum polarization during optical pumping, "
                "limited by relaxation.",
            ),
            parameters=(
                FormulaParameter("P_max", t("reference.buildup.pmax", "Maximum polarization")),
                FormulaParameter("τ_p", t("reference.buildup.tau_p", "Pumping time constant")),
                FormulaParameter("T₁", t("reference.buildup.t1", "Relaxation time")),
            ),
        ),
        FormulaInfo(
            name=t("reference.energy.name", "Energy / Wavelength"),
            formula="E [meV] = 81.81 / λ² [Å²]",
        ),
    ]


def constants_summary(constants: PhysicalConstants = DEFAULT_CONSTANTS) -> str:
    """One-line description of the constant set in use."""
    return (
        f"n = {constants.number_density:.4g} cm⁻³, "
        f"σ₀ = {constants.sigma0_barn:g} b @ {constants.reference_wavelength:g} Å, "
        f"1 b = {constants.barn_to_cm2:g} cm², "
        f"E·λ² = {constants.energy_wavelength_constant:g} meV·Å²"
    )
