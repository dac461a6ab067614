"""Build-up panel — optical pumping parameters and measured data summary."""

from __future__ import annotations

from PyQt6.QtCore import QSignalBlocker
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QPushButton, QLabel,
)

from he3calc.core.i18n import t
from he3calc.models.parameters import ChartId
from he3calc.ui.calculation_controller import CalculationController
from he3calc.ui.panels.base import ParameterPanel

_FIELDS = ("max_polarization", "pumping_time", "relaxation_time")
_LABELS = {
    "max_polarization": "Max Polarization (%)",
    "pumping_time": "Pumping Time Constant (min)",
    "relaxation_time": "Relaxation Time T1 (min)",
}


class BuildUpPanel(ParameterPanel):
    """Draft editor for Pmax / τp / T1 (minutes) plus the build-up chart range."""

    def __init__(
        self,
        controller: CalculationController,
        parent: QWidget | None = None,
    ):
        super().__init__(controller, ChartId.BUILDUP, parent)
        self._draft = controller.store.buildup_draft()
        self._edits = {}
        self._build_ui()
        controller.params_reset.connect(self._on_reset)
        controller.measured_data_changed.connect(self._on_measured_changed)

    def _x_unit(self) -> str:
        return t("units.minute", "min")

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        layout.addWidget(self._section_label("panels.parameters", "Parameters"))
        frame = self._make_frame()
        grid = QGridLayout(frame)
        grid.setContentsMargins(6, 4, 6, 4)
        for row, name in enumerate(_FIELDS):
            edit = self._add_field(
                grid, row, f"buildup.{name}", _LABELS[name], getattr(self._draft, name),
            )
            edit.textEdited.connect(
                lambda text, n=name: setattr(self._draft, n, text)
            )
            self._edits[name] = edit
        layout.addWidget(frame)

        self._build_range_section(layout)

        self._measured_label = QLabel()
        self._on_measured_changed(self._controller.measured_points)
        layout.addWidget(self._measured_label)

        row = QHBoxLayout()
        row.addStretch()
        self._btn_commit = self._translated(
            QPushButton(), "panels.set_parameters", "Set Parameters",
        )
        self._btn_commit.clicked.connect(self._on_commit)
        row.addWidget(self._btn_commit)
        layout.addLayout(row)
        layout.addStretch()

    def _on_commit(self) -> None:
        self._controller.commit_buildup(self._draft)

    def _on_measured_changed(self, points) -> None:
        self._measured_label.setText(
            t("buildup.measured_count", "Measured points: {count}").format(count=len(points))
        )

    def retranslate_ui(self) -> None:
        super().retranslate_ui()
        self._on_measured_changed(self._controller.measured_points)

    def _on_reset(self) -> None:
        self._draft = self._controller.store.buildup_draft()
        for name, edit in self._edits.items():
            with QSignalBlocker(edit):
                edit.setText(getattr(self._draft, name))
        self.refresh_ranges()
