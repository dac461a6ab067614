"""Base chart widget — pyqtgraph-based with dark theme.

Common API for all chart widgets: add_curve, add_scatter, clear, axis limits.
Non-finite samples (from T1 = 0, λ = 0, log of non-positive bounds) are
dropped here, not in the calculation core.
"""

from __future__ import annotations

import math

import numpy as np
import pyqtgraph as pg
from PyQt6.QtWidgets import QWidget, QVBoxLayout
from PyQt6.QtCore import Qt

from he3calc.constants import LOG_SCALE_FLOOR
from he3calc.ui.styles.colors import BACKGROUND, PANEL_BG, TEXT_SECONDARY, BORDER


def finite_xy(x: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Drop samples where either coordinate is inf/NaN."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    mask = np.isfinite(x) & np.isfinite(y)
    return x[mask], y[mask]


class BaseChart(QWidget):
    """pyqtgraph PlotWidget wrapper with dark theme and utility methods."""

    def __init__(
        self,
        title: str = "",
        x_label: str = "",
        y_label: str = "",
        log_x: bool = False,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._curves: list[pg.PlotDataItem] = []
        self._log_x = log_x

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground(BACKGROUND)
        self.plot_widget.showGrid(x=True, y=True, alpha=0.15)
        layout.addWidget(self.plot_widget)

        plot_item = self.plot_widget.getPlotItem()
        self.set_labels(title, x_label, y_label)

        for axis_name in ("bottom", "left", "top", "right"):
            axis = plot_item.getAxis(axis_name)
            axis.setPen(pg.mkPen(BORDER))
            axis.setTextPen(pg.mkPen(TEXT_SECONDARY))

        self.plot_widget.setLogMode(x=log_x, y=False)

        self._legend = plot_item.addLegend(
            offset=(10, 10),
            labelTextColor=TEXT_SECONDARY,
            brush=pg.mkBrush(PANEL_BG),
            pen=pg.mkPen(BORDER),
        )

    def label_texts(self) -> tuple[str, str, str]:
        """(title, x label, y label) in the current language."""
        return "", "", ""

    def retranslate_ui(self) -> None:
        self.set_labels(*self.label_texts())

    @property
    def curve_count(self) -> int:
        return len(self._curves)

    def set_labels(self, title: str, x_label: str, y_label: str) -> None:
        plot_item = self.plot_widget.getPlotItem()
        if title:
            plot_item.setTitle(title, color=TEXT_SECONDARY, size="10pt")
        if x_label:
            plot_item.setLabel("bottom", x_label, color=TEXT_SECONDARY)
        if y_label:
            plot_item.setLabel("left", y_label, color=TEXT_SECONDARY)

    def add_curve(
        self,
        x: np.ndarray,
        y: np.ndarray,
        name: str = "",
        color: str = "#3B82F6",
        width: int = 2,
        style: Qt.PenStyle = Qt.PenStyle.SolidLine,
    ) -> pg.PlotDataItem:
        """Add a line curve (non-finite samples removed)."""
        x, y = finite_xy(x, y)
        pen = pg.mkPen(color=color, width=width, style=style)
        curve = self.plot_widget.plot(x, y, pen=pen, name=name)
        self._curves.append(curve)
        return curve

    def add_scatter(
        self,
        x: np.ndarray,
        y: np.ndarray,
        name: str = "",
        color: str = "#EF5350",
        size: int = 7,
    ) -> pg.PlotDataItem:
        """Add unconnected point markers (non-finite samples removed)."""
        x, y = finite_xy(x, y)
        curve = self.plot_widget.plot(
            x, y, pen=None, symbol="o", symbolSize=size,
            symbolBrush=pg.mkBrush(color), symbolPen=pg.mkPen(color),
            name=name,
        )
        self._curves.append(curve)
        return curve

    def clear_curves(self) -> None:
        """Remove all curves and legend entries."""
        for curve in self._curves:
            self.plot_widget.removeItem(curve)
        self._curves.clear()
        if self._legend is not None:
            self._legend.clear()

    def set_log_x(self, enabled: bool) -> None:
        """Toggle logarithmic x axis."""
        self._log_x = enabled
        self.plot_widget.setLogMode(x=enabled, y=False)

    def set_limits(
        self, x_min: float, x_max: float, y_min: float, y_max: float,
    ) -> None:
        """Apply axis limits; invalid limits fall back to auto-range."""
        vb = self.plot_widget.getPlotItem().getViewBox()
        if self._log_x:
            if x_max > 0:
                x_min = math.log10(max(x_min, LOG_SCALE_FLOOR))
                x_max = math.log10(x_max)
            else:
                x_min = x_max = math.nan
        xs = sorted((x_min, x_max))
        ys = sorted((y_min, y_max))
        if all(math.isfinite(v) for v in xs) and xs[0] < xs[1]:
            vb.setXRange(xs[0], xs[1], padding=0)
        else:
            vb.enableAutoRange(axis=pg.ViewBox.XAxis)
        if all(math.isfinite(v) for v in ys) and ys[0] < ys[1]:
            vb.setYRange(ys[0], ys[1], padding=0)
        else:
            vb.enableAutoRange(axis=pg.ViewBox.YAxis)
