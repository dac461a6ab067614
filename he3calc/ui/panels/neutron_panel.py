"""Neutron panel — spin-filter cell parameters, x-axis unit and scale.

Unit and scale radio buttons apply immediately. The performance readout
shows P_n, T_n and FOM at the committed wavelength and He-3 polarization.
"""

from __future__ import annotations

from PyQt6.QtCore import QSignalBlocker
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QPushButton, QLabel,
    QRadioButton, QButtonGroup,
)

from he3calc.core.i18n import t
from he3calc.models.parameters import AxisScale, ChartId, XAxisUnit
from he3calc.ui.calculation_controller import CalculationController
from he3calc.ui.panels.base import ParameterPanel

_FIELDS = ("he3_polarization", "gas_thickness", "wavelength")
_LABELS = {
    "he3_polarization": "He-3 Polarization (%)",
    "gas_thickness": "Gas Thickness (amagat·cm)",
    "wavelength": "Wavelength (Å)",
}


class NeutronPanel(ParameterPanel):
    """Draft editor for P_He / d / λ plus neutron chart settings."""

    def __init__(
        self,
        controller: CalculationController,
        parent: QWidget | None = None,
    ):
        super().__init__(controller, ChartId.NEUTRON, parent)
        self._draft = controller.store.neutron_draft()
        self._edits = {}
        self._build_ui()
        controller.params_changed.connect(self._on_params_changed)
        controller.params_reset.connect(self._on_reset)

    def _x_unit(self) -> str:
        if self._controller.store.params.x_axis_unit is XAxisUnit.ENERGY:
            return t("units.mev", "meV")
        return t("units.angstrom", "Å")

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
                grid, row, f"neutron.{name}", _LABELS[name], getattr(self._draft, name),
            )
            edit.textEdited.connect(
                lambda text, n=name: setattr(self._draft, n, text)
            )
            self._edits[name] = edit
        layout.addWidget(frame)

        # X-axis unit
        layout.addWidget(self._section_label("neutron.x_axis", "X Axis"))
        unit_row = QHBoxLayout()
        self._unit_group = QButtonGroup(self)
        self._rb_wavelength = self._translated(
            QRadioButton(), "neutron.unit_wavelength", "Wavelength (Å)",
        )
        self._rb_energy = self._translated(
            QRadioButton(), "neutron.unit_energy", "Energy (meV)",
        )
        for rb in (self._rb_wavelength, self._rb_energy):
            self._unit_group.addButton(rb)
            unit_row.addWidget(rb)
        unit_row.addStretch()
        layout.addLayout(unit_row)
        self._rb_wavelength.toggled.connect(self._on_unit_toggled)

        # Scale
        scale_row = QHBoxLayout()
        self._scale_group = QButtonGroup(self)
        self._rb_linear = self._translated(
            QRadioButton(), "neutron.scale_linear", "Linear",
        )
        self._rb_log = self._translated(QRadioButton(), "neutron.scale_log", "Log")
        for rb in (self._rb_linear, self._rb_log):
            self._scale_group.addButton(rb)
            scale_row.addWidget(rb)
        scale_row.addStretch()
        layout.addLayout(scale_row)
        self._rb_linear.toggled.connect(self._on_scale_toggled)
        self._sync_radio_buttons()

        self._build_range_section(layout)

        # Performance readout
        layout.addWidget(self._section_label("neutron.performance", "Performance"))
        self._perf_label = QLabel()
        self._perf_label.setProperty("cssClass", "readout")
        layout.addWidget(self._perf_label)
        self._update_performance()

        row = QHBoxLayout()
        row.addStretch()
        self._btn_commit = self._translated(
            QPushButton(), "panels.set_parameters", "Set Parameters",
        )
        self._btn_commit.clicked.connect(self._on_commit)
        row.addWidget(self._btn_commit)
        layout.addLayout(row)
        layout.addStretch()

    def _sync_radio_buttons(self) -> None:
        unit = self._controller.store.params.x_axis_unit
        scale = self._controller.store.scale
        for rb, checked in (
            (self._rb_wavelength, unit is XAxisUnit.WAVELENGTH),
            (self._rb_energy, unit is XAxisUnit.ENERGY),
            (self._rb_linear, scale is AxisScale.LINEAR),
            (self._rb_log, scale is AxisScale.LOG),
        ):
            with QSignalBlocker(rb):
                rb.setChecked(checked)

    def _update_performance(self) -> None:
        perf = self._controller.performance()
        self._perf_label.setText(
            t(
                "neutron.performance_text",
                "λ = {wavelength:.3g} Å ({energy:.3g} meV)\n"
                "P_n = {pn:.2f} %   T_n = {tn:.2f} %   FOM = {fom:.2f} %",
            ).format(
                wavelength=perf.wavelength,
                energy=perf.energy,
                pn=perf.neutron_polarization,
                tn=perf.neutron_transmission,
                fom=perf.figure_of_merit,
            )
        )

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_commit(self) -> None:
        self._controller.commit_neutron(self._draft)

    def _on_unit_toggled(self, checked: bool) -> None:
        unit = XAxisUnit.WAVELENGTH if checked else XAxisUnit.ENERGY
        self._controller.set_x_axis_unit(unit)

    def _on_scale_toggled(self, checked: bool) -> None:
        scale = AxisScale.LINEAR if checked else AxisScale.LOG
        self._controller.set_scale(scale)

    def retranslate_ui(self) -> None:
        super().retranslate_ui()
        self._update_performance()

    def _on_params_changed(self) -> None:
        self.refresh_range_labels()
        self._update_performance()

    def _on_reset(self) -> None:
        self._draft = self._controller.store.neutron_draft()
        for name, edit in self._edits.items():
            with QSignalBlocker(edit):
                edit.setText(getattr(self._draft, name))
        self._sync_radio_buttons()
        self.refresh_ranges()
        self.refresh_range_labels()
