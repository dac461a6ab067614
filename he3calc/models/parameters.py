"""Calculation parameter data models.

Committed values are frozen dataclasses and are only ever replaced whole.
Drafts are separate, mutable text buffers that the parameter panels edit;
ParameterStore turns a draft into committed values in one step.

Units: polarization in %, decay times in hours, build-up times in minutes,
gas thickness in amagat·cm, wavelength in Å, energy in meV.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from he3calc.constants import (
    DEFAULT_BUILDUP_RANGE,
    DEFAULT_BUILDUP_T1_MIN,
    DEFAULT_GAS_THICKNESS,
    DEFAULT_HE3_POLARIZATION,
    DEFAULT_HE3_RANGE,
    DEFAULT_INITIAL_POLARIZATION,
    DEFAULT_MAX_POLARIZATION,
    DEFAULT_NEUTRON_RANGE,
    DEFAULT_PUMPING_TIME_MIN,
    DEFAULT_RELAXATION_TIME_H,
    DEFAULT_WAVELENGTH,
)


class XAxisUnit(Enum):
    """Swept variable of the neutron chart."""
    WAVELENGTH = "wavelength"
    ENERGY = "energy"


class AxisScale(Enum):
    LINEAR = "linear"
    LOG = "log"


class ChartId(Enum):
    HE3 = "he3"
    NEUTRON = "neutron"
    BUILDUP = "buildup"


# ── Committed values ──


@dataclass(frozen=True)
class NeutronParams:
    """Spin-filter cell and beam parameters.

    Attributes:
        gas_thickness: He-3 gas thickness [amagat·cm].
        he3_polarization: He-3 polarization for the neutron sweep [%].
        wavelength: Representative wavelength for the He-3 chart [Å].
    """
    gas_thickness: float = DEFAULT_GAS_THICKNESS
    he3_polarization: float = DEFAULT_HE3_POLARIZATION
    wavelength: float = DEFAULT_WAVELENGTH


@dataclass(frozen=True)
class CalculationParams:
    """Committed parameter set driving the He-3 and neutron charts.

    Attributes:
        initial_polarization: P0 at t = 0 [%]. Not clamped.
        relaxation_time: T1 [hour]. Expected > 0, not enforced.
        neutron: Neutron/cell parameters.
        x_axis_unit: Swept variable of the neutron chart.
    """
    initial_polarization: float = DEFAULT_INITIAL_POLARIZATION
    relaxation_time: float = DEFAULT_RELAXATION_TIME_H
    neutron: NeutronParams = field(default_factory=NeutronParams)
    x_axis_unit: XAxisUnit = XAxisUnit.WAVELENGTH


@dataclass(frozen=True)
class BuildUpParams:
    """Optical pumping build-up parameters.

    Attributes:
        max_polarization: Saturation polarization [%].
        pumping_time: Pumping time constant [min].
        relaxation_time: T1 during pumping [min].
    """
    max_polarization: float = DEFAULT_MAX_POLARIZATION
    pumping_time: float = DEFAULT_PUMPING_TIME_MIN
    relaxation_time: float = DEFAULT_BUILDUP_T1_MIN


@dataclass(frozen=True)
class AxisRange:
    """Chart axis limits as typed by the user (parsed at use)."""
    x_min: str = "0"
    x_max: str = "0"
    y_min: str = "0"
    y_max: str = "0"


def _default_range(values: tuple[str, str, str, str]) -> AxisRange:
    return AxisRange(*values)


@dataclass(frozen=True)
class AxisRanges:
    """Axis limits of every chart."""
    he3: AxisRange = field(default_factory=lambda: _default_range(DEFAULT_HE3_RANGE))
    neutron: AxisRange = field(default_factory=lambda: _default_range(DEFAULT_NEUTRON_RANGE))
    buildup: AxisRange = field(default_factory=lambda: _default_range(DEFAULT_BUILDUP_RANGE))

    def get(self, chart: ChartId) -> AxisRange:
        return getattr(self, chart.value)

    def with_field(self, chart: ChartId, name: str, text: str) -> AxisRanges:
        """Copy with one field of one chart replaced.

        Raises:
            ValueError: If name is not an AxisRange field.
        """
        if name not in AxisRange.__dataclass_fields__:
            raise ValueError(f"Unknown axis field: {name}")
        updated = replace(self.get(chart), **{name: text})
        return replace(self, **{chart.value: updated})


DEFAULT_AXIS_RANGES = AxisRanges()


@dataclass(frozen=True)
class SweepConfig:
    """Immutable snapshot consumed by the series generator.

    Attributes:
        params: Committed He-3 / neutron parameters.
        buildup: Committed build-up parameters.
        ranges: Axis limits of every chart.
        scale: Neutron chart x-axis spacing.
    """
    params: CalculationParams = field(default_factory=CalculationParams)
    buildup: BuildUpParams = field(default_factory=BuildUpParams)
    ranges: AxisRanges = field(default_factory=AxisRanges)
    scale: AxisScale = AxisScale.LINEAR


# ── Drafts (edit buffers) ──


@dataclass
class He3Draft:
    initial_polarization: str = ""
    relaxation_time: str = ""


@dataclass
class NeutronDraft:
    gas_thickness: str = ""
    he3_polarization: str = ""
    wavelength: str = ""


@dataclass
class BuildUpDraft:
    max_polarization: str = ""
    pumping_time: str = ""
    relaxation_time: str = ""
