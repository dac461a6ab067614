"""Parameter panel base — shared form helpers and the axis range section.

Parameter fields edit a local draft and only reach the controller when
the "Set Parameters" button commits it. Axis range fields are sent to
the controller on every edit.
"""

from __future__ import annotations

from PyQt6.QtCore import QSignalBlocker
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QLabel, QLineEdit, QFrame,
    QAbstractButton,
)

from he3calc.core.i18n import t
from he3calc.models.parameters import ChartId
from he3calc.ui.calculation_controller import CalculationController

RANGE_FIELDS = ("x_min", "x_max", "y_min", "y_max")


class ParameterPanel(QWidget):
    """Base for the He-3, neutron and build-up parameter panels."""

    def __init__(
        self,
        controller: CalculationController,
        chart: ChartId,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._controller = controller
        self._chart = chart
        self._range_edits: dict[str, QLineEdit] = {}
        self._range_labels: dict[str, QLabel] = {}
        self._texts: list[tuple[QLabel | QAbstractButton, str, str]] = []

    # ------------------------------------------------------------------
    # Widget helpers
    # ------------------------------------------------------------------

    def _translated(self, widget, key: str, default: str):
        """Set ``widget`` text from the catalogue and keep it for retranslate_ui."""
        widget.setText(t(key, default))
        self._texts.append((widget, key, default))
        return widget

    def _section_label(self, key: str, default: str) -> QLabel:
        lbl = self._translated(QLabel(), key, default)
        lbl.setProperty("cssClass", "section-label")
        return lbl

    def _make_frame(self) -> QFrame:
        frame = QFrame()
        frame.setProperty("cssClass", "prop-frame")
        return frame

    def _add_field(
        self, grid: QGridLayout, row: int, key: str, default: str, text: str,
    ) -> QLineEdit:
        grid.addWidget(self._translated(QLabel(), key, default), row, 0)
        edit = QLineEdit(text)
        edit.setFixedWidth(96)
        grid.addWidget(edit, row, 1)
        return edit

    # ------------------------------------------------------------------
    # Axis range section
    # ------------------------------------------------------------------

    def _x_unit(self) -> str:
        return ""

    def _range_label_text(self, name: str) -> str:
        texts = {
            "x_min": t("range.x_min", "X Min"),
            "x_max": t("range.x_max", "X Max"),
            "y_min": t("range.y_min", "Y Min (%)"),
            "y_max": t("range.y_max", "Y Max (%)"),
        }
        text = texts[name]
        if name.startswith("x") and self._x_unit():
            text = f"{text} ({self._x_unit()})"
        return text

    def _build_range_section(self, layout: QVBoxLayout) -> None:
        layout.addWidget(self._section_label("range.title", "Graph Range"))
        frame = self._make_frame()
        grid = QGridLayout(frame)
        grid.setContentsMargins(6, 4, 6, 4)
        axis_range = self._controller.store.ranges.get(self._chart)
        for i, name in enumerate(RANGE_FIELDS):
            label = QLabel(self._range_label_text(name))
            edit = QLineEdit(getattr(axis_range, name))
            edit.setFixedWidth(80)
            edit.textEdited.connect(
                lambda text, n=name: self._controller.set_axis_range(self._chart, n, text)
            )
            grid.addWidget(label, i // 2, (i % 2) * 2)
            grid.addWidget(edit, i // 2, (i % 2) * 2 + 1)
            self._range_labels[name] = label
            self._range_edits[name] = edit
        layout.addWidget(frame)

    def refresh_range_labels(self) -> None:
        for name, label in self._range_labels.items():
            label.setText(self._range_label_text(name))

    def retranslate_ui(self) -> None:
        """Re-label the panel after a language change."""
        for widget, key, default in self._texts:
            widget.setText(t(key, default))
        self.refresh_range_labels()

    def refresh_ranges(self) -> None:
        """Show the store's axis range text (after reset)."""
        axis_range = self._controller.store.ranges.get(self._chart)
        for name, edit in self._range_edits.items():
            with QSignalBlocker(edit):
                edit.setText(getattr(axis_range, name))
