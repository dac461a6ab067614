"""Neutron chart — P_n, T_n and FOM vs wavelength or energy."""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtWidgets import QWidget

from he3calc.core.i18n import t
from he3calc.core.series_generator import series_columns
from he3calc.models.parameters import AxisScale, XAxisUnit
from he3calc.models.results import DataPoint
from he3calc.ui.charts.base_chart import BaseChart
from he3calc.ui.styles.colors import SERIES_COLORS


def x_axis_label(unit: XAxisUnit) -> str:
    if unit is XAxisUnit.WAVELENGTH:
        return t("neutron.wavelength_axis", "Wavelength (Å)")
    return t("neutron.energy_axis", "Energy (meV)")


class NeutronChart(BaseChart):
    """Spin-filter performance vs incident neutron wavelength/energy."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent=parent)
        self._unit = XAxisUnit.WAVELENGTH
        self.retranslate_ui()

    def label_texts(self) -> tuple[str, str, str]:
        return (
            t("neutron.chart_title", "Neutron Polarization & Transmission"),
            x_axis_label(self._unit),
            t("neutron.value_axis", "Value (%)"),
        )

    def update_series(
        self,
        points: Sequence[DataPoint],
        unit: XAxisUnit,
        scale: AxisScale,
        limits: tuple[float, float, float, float],
    ) -> None:
        self.clear_curves()
        self._unit = unit
        self.set_labels("", x_axis_label(unit), "")
        self.set_log_x(scale is AxisScale.LOG)

        x_name = "wavelength" if unit is XAxisUnit.WAVELENGTH else "energy"
        x, pn, tn, fom = series_columns(
            points, x_name, "neutron_polarization",
            "neutron_transmission", "figure_of_merit",
        )
        self.add_curve(
            x, pn, name=t("series.pn", "Neutron Polarization"),
            color=SERIES_COLORS["neutron_polarization"],
        )
        self.add_curve(
            x, tn, name=t("series.tn", "Neutron Transmission"),
            color=SERIES_COLORS["neutron_transmission"],
        )
        self.add_curve(
            x, fom, name=t("series.fom", "Figure of Merit"),
            color=SERIES_COLORS["figure_of_merit"],
        )
        self.set_limits(*limits)
