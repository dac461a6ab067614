"""He-3 panel — initial polarization and relaxation time."""

from __future__ import annotations

from PyQt6.QtCore import QSignalBlocker
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QPushButton,
)

from he3calc.core.i18n import t
from he3calc.models.parameters import ChartId
from he3calc.ui.calculation_controller import CalculationController
from he3calc.ui.panels.base import ParameterPanel


class He3Panel(ParameterPanel):
    """Draft editor for P0 / T1 plus the He-3 chart range."""

    def __init__(
        self,
        controller: CalculationController,
        parent: QWidget | None = None,
    ):
        super().__init__(controller, ChartId.HE3, parent)
        self._draft = controller.store.he3_draft()
        self._build_ui()
        controller.params_reset.connect(self._on_reset)

    def _x_unit(self) -> str:
        return t("units.hour", "hour")

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        layout.addWidget(self._section_label("panels.parameters", "Parameters"))
        frame = self._make_frame()
        grid = QGridLayout(frame)
        grid.setContentsMargins(6, 4, 6, 4)
        self._edit_p0 = self._add_field(
            grid, 0, "he3.initial_polarization", "Initial Polarization (%)",
            self._draft.initial_polarization,
        )
        self._edit_t1 = self._add_field(
            grid, 1, "he3.relaxation_time", "Relaxation Time (hour)",
            self._draft.relaxation_time,
        )
        self._edit_p0.textEdited.connect(
            lambda text: setattr(self._draft, "initial_polarization", text)
        )
        self._edit_t1.textEdited.connect(
            lambda text: setattr(self._draft, "relaxation_time", text)
        )
        layout.addWidget(frame)

        self._build_range_section(layout)

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
        self._controller.commit_he3(self._draft)

    def _on_reset(self) -> None:
        self._draft = self._controller.store.he3_draft()
        with QSignalBlocker(self._edit_p0):
            self._edit_p0.setText(self._draft.initial_polarization)
        with QSignalBlocker(self._edit_t1):
            self._edit_t1.setText(self._draft.relaxation_time)
        self.refresh_ranges()
