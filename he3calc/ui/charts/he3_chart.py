"""He-3 chart — He-3 polarization decay vs time.

Neutron polarization and transmission at the representative wavelength
are drawn dashed on the same percent axis.
"""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget

from he3calc.core.i18n import t
from he3calc.core.series_generator import series_columns
from he3calc.models.results import DataPoint
from he3calc.ui.charts.base_chart import BaseChart
from he3calc.ui.styles.colors import SERIES_COLORS


class He3Chart(BaseChart):
    """He-3 polarization vs time [hour]."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent=parent)
        self.retranslate_ui()

    def label_texts(self) -> tuple[str, str, str]:
        return (
            t("he3.chart_title", "He-3 Polarization"),
            t("he3.time_axis", "Time (hour)"),
            t("he3.polarization_axis", "Polarization (%)"),
        )

    def update_series(
        self,
        points: Sequence[DataPoint],
        limits: tuple[float, float, float, float],
    ) -> None:
        self.clear_curves()
        time, he3, pn, tn = series_columns(
            points, "time", "he3_polarization",
            "neutron_polarization", "neutron_transmission",
        )
        self.add_curve(
            time, he3, name=t("series.he3", "He-3 Polarization"),
            color=SERIES_COLORS["he3_polarization"],
        )
        self.add_curve(
            time, pn, name=t("series.pn", "Neutron Polarization"),
            color=SERIES_COLORS["neutron_polarization"], width=1,
            style=Qt.PenStyle.DashLine,
        )
        self.add_curve(
            time, tn, name=t("series.tn", "Neutron Transmission"),
            color=SERIES_COLORS["neutron_transmission"], width=1,
            style=Qt.PenStyle.DashLine,
        )
        self.set_limits(*limits)
