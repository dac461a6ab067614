"""Parameter store — committed calculation state and axis ranges.

Holds the values the charts are computed from. Drafts never touch this
state until committed; axis ranges, x-axis unit and scale apply at once.
Every mutation replaces whole frozen objects, so a snapshot taken at any
moment is internally consistent. Pure Python class (no Qt dependency).

Usage::

    store = ParameterStore()
    draft = store.he3_draft()
    draft.initial_polarization = "65"
    store.commit_he3(draft)
    config = store.snapshot()
"""

from __future__ import annotations

import logging
from dataclasses import replace

from he3calc.core.parsing import parse_lenient
from he3calc.models.parameters import (
    AxisRanges,
    AxisScale,
    BuildUpDraft,
    BuildUpParams,
    CalculationParams,
    ChartId,
    He3Draft,
    NeutronDraft,
    NeutronParams,
    SweepConfig,
    XAxisUnit,
)

logger = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    """Committed number → draft text ("70.0" → "70")."""
    return f"{value:g}"


class ParameterStore:
    """Committed parameters plus axis-range configuration.

    Created with the hard-coded session defaults; discarded with the session.
    """

    def __init__(self) -> None:
        self._params = CalculationParams()
        self._buildup = BuildUpParams()
        self._ranges = AxisRanges()
        self._scale = AxisScale.LINEAR

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def params(self) -> CalculationParams:
        return self._params

    @property
    def buildup(self) -> BuildUpParams:
        return self._buildup

    @property
    def ranges(self) -> AxisRanges:
        return self._ranges

    @property
    def scale(self) -> AxisScale:
        return self._scale

    def snapshot(self) -> SweepConfig:
        """Immutable configuration for the series generator."""
        return SweepConfig(
            params=self._params,
            buildup=self._buildup,
            ranges=self._ranges,
            scale=self._scale,
        )

    # ------------------------------------------------------------------
    # Drafts
    # ------------------------------------------------------------------

    def he3_draft(self) -> He3Draft:
        """Edit buffer pre-filled with the committed He-3 values."""
        return He3Draft(
            initial_polarization=_fmt(self._params.initial_polarization),
            relaxation_time=_fmt(self._params.relaxation_time),
        )

    def neutron_draft(self) -> NeutronDraft:
        """Edit buffer pre-filled with the committed neutron values."""
        n = self._params.neutron
        return NeutronDraft(
            gas_thickness=_fmt(n.gas_thickness),
            he3_polarization=_fmt(n.he3_polarization),
            wavelength=_fmt(n.wavelength),
        )

    def buildup_draft(self) -> BuildUpDraft:
        """Edit buffer pre-filled with the committed build-up values."""
        b = self._buildup
        return BuildUpDraft(
            max_polarization=_fmt(b.max_polarization),
            pumping_time=_fmt(b.pumping_time),
            relaxation_time=_fmt(b.relaxation_time),
        )

    # ------------------------------------------------------------------
    # Commit actions
    # ------------------------------------------------------------------

    def commit_he3(self, draft: He3Draft) -> CalculationParams:
        """Replace initial polarization and T1 from the draft.

        Invalid or empty text commits as 0.
        """
        self._params = replace(
            self._params,
            initial_polarization=parse_lenient(draft.initial_polarization),
            relaxation_time=parse_lenient(draft.relaxation_time),
        )
        logger.info(
            "He-3 parameters committed: P0=%g %%, T1=%g h",
            self._params.initial_polarization, self._params.relaxation_time,
        )
        return self._params

    def commit_neutron(self, draft: NeutronDraft) -> CalculationParams:
        """Replace the whole neutron parameter group from the draft."""
        neutron = NeutronParams(
            gas_thickness=parse_lenient(draft.gas_thickness),
            he3_polarization=parse_lenient(draft.he3_polarization),
            wavelength=parse_lenient(draft.wavelength),
        )
        self._params = replace(self._params, neutron=neutron)
        logger.info(
            "Neutron parameters committed: d=%g, P_He=%g %%, lambda=%g A",
            neutron.gas_thickness, neutron.he3_polarization, neutron.wavelength,
        )
        return self._params

    def commit_buildup(self, draft: BuildUpDraft) -> BuildUpParams:
        """Replace the build-up parameters from the draft."""
        self._buildup = BuildUpParams(
            max_polarization=parse_lenient(draft.max_polarization),
            pumping_time=parse_lenient(draft.pumping_time),
            relaxation_time=parse_lenient(draft.relaxation_time),
        )
        logger.info(
            "Build-up parameters committed: Pmax=%g %%, tau=%g min, T1=%g min",
            self._buildup.max_polarization,
            self._buildup.pumping_time,
            self._buildup.relaxation_time,
        )
        return self._buildup

    # ------------------------------------------------------------------
    # Immediate settings
    # ------------------------------------------------------------------

    def set_axis_range(self, chart: ChartId, name: str, text: str) -> AxisRanges:
        """Set one axis limit (x_min, x_max, y_min or y_max) as typed.

        Raises:
            ValueError: If name is not an axis field.
        """
        self._ranges = self._ranges.with_field(chart, name, text)
        logger.debug("Axis range %s.%s = %r", chart.value, name, text)
        return self._ranges

    def set_x_axis_unit(self, unit: XAxisUnit) -> None:
        if unit is self._params.x_axis_unit:
            return
        self._params = replace(self._params, x_axis_unit=unit)
        logger.info("Neutron x-axis unit: %s", unit.value)

    def set_scale(self, scale: AxisScale) -> None:
        if scale is self._scale:
            return
        self._scale = scale
        logger.info("Neutron x-axis scale: %s", scale.value)

    def reset(self) -> None:
        """Restore session defaults."""
        self._params = CalculationParams()
        self._buildup = BuildUpParams()
        self._ranges = AxisRanges()
        self._scale = AxisScale.LINEAR
        logger.info("Parameters reset to defaults")
