"""Build-up chart — theoretical pumping curve with measured points overlaid."""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtWidgets import QWidget

from he3calc.core.i18n import t
from he3calc.core.series_generator import series_columns
from he3calc.models.results import MeasuredPoint
from he3calc.ui.charts.base_chart import BaseChart
from he3calc.ui.styles.colors import SERIES_COLORS


class BuildUpChart(BaseChart):
    """He-3 polarization vs pumping time [min]."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent=parent)
        self.retranslate_ui()

    def label_texts(self) -> tuple[str, str, str]:
        return (
            t("buildup.chart_title", "Pumping Build-up"),
            t("buildup.time_axis", "Time (min)"),
            t("buildup.polarization_axis", "Polarization (%)"),
        )

    def update_series(
        self,
        theory: Sequence[MeasuredPoint],
        measured: Sequence[MeasuredPoint],
        limits: tuple[float, float, float, float],
    ) -> None:
        self.clear_curves()
        time, pol = series_columns(theory, "time", "polarization")
        self.add_curve(
            time, pol, name=t("series.theory", "Theory"),
            color=SERIES_COLORS["buildup"],
        )
        if measured:
            m_time, m_pol = series_columns(measured, "time", "polarization")
            self.add_scatter(
                m_time, m_pol, name=t("series.measured", "Measured"),
                color=SERIES_COLORS["measured"],
            )
        self.set_limits(*limits)
