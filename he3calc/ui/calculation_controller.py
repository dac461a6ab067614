"""Calculation controller — central mediator between parameters and charts.

Owns the ParameterStore, the current chart series and the measured data
set. All mutations go through this controller, which recomputes every
series synchronously from a fresh SweepConfig and emits Qt signals for
chart/panel refresh.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from he3calc.core.formula_engine import evaluate_filter
from he3calc.core.parameter_store import ParameterStore
from he3calc.core.parsing import resolve_range
from he3calc.core.series_generator import compute_series, decay_as_measured
from he3calc.core.units import percent_to_fraction
from he3calc.export.csv_export import CsvExporter
from he3calc.export.csv_import import CsvImporter
from he3calc.models.parameters import (
    DEFAULT_AXIS_RANGES,
    AxisScale,
    BuildUpDraft,
    ChartId,
    He3Draft,
    NeutronDraft,
    XAxisUnit,
)
from he3calc.models.results import (
    FilterPerformance,
    ImportResult,
    MeasuredPoint,
    SeriesSet,
)

logger = logging.getLogger(__name__)


class CalculationController(QObject):
    """Mediator between ParameterStore and the chart/panel widgets.

    Series are replaced wholesale on every change; listeners always
    receive complete tuples.
    """

    # tuple[DataPoint, ...]
    he3_series_changed = pyqtSignal(object)
    neutron_series_changed = pyqtSignal(object)
    # tuple[MeasuredPoint, ...]
    buildup_series_changed = pyqtSignal(object)
    measured_data_changed = pyqtSignal(object)
    # Committed values, unit or scale changed
    params_changed = pyqtSignal()
    # Defaults restored (panels refill their drafts)
    params_reset = pyqtSignal()

    def __init__(
        self,
        store: ParameterStore | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._store = store or ParameterStore()
        self._series: SeriesSet = compute_series(self._store.snapshot())
        self._measured: tuple[MeasuredPoint, ...] = ()
        self._exporter = CsvExporter()
        self._importer = CsvImporter()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def store(self) -> ParameterStore:
        return self._store

    @property
    def series(self) -> SeriesSet:
        return self._series

    @property
    def measured_points(self) -> tuple[MeasuredPoint, ...]:
        return self._measured

    def limits(self, chart: ChartId) -> tuple[float, float, float, float]:
        """Parsed (x_min, x_max, y_min, y_max) of a chart."""
        return resolve_range(
            self._store.ranges.get(chart), DEFAULT_AXIS_RANGES.get(chart),
        )

    def performance(self) -> FilterPerformance:
        """Filter figures at the representative wavelength and committed P_He."""
        n = self._store.params.neutron
        return evaluate_filter(
            n.wavelength,
            percent_to_fraction(n.he3_polarization),
            n.gas_thickness,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def commit_he3(self, draft: He3Draft) -> None:
        self._store.commit_he3(draft)
        self._on_params_changed()

    def commit_neutron(self, draft: NeutronDraft) -> None:
        self._store.commit_neutron(draft)
        self._on_params_changed()

    def commit_buildup(self, draft: BuildUpDraft) -> None:
        self._store.commit_buildup(draft)
        self._on_params_changed()

    def set_axis_range(self, chart: ChartId, name: str, text: str) -> None:
        """Axis edits apply immediately, no commit step."""
        self._store.set_axis_range(chart, name, text)
        self.recompute()

    def set_x_axis_unit(self, unit: XAxisUnit) -> None:
        self._store.set_x_axis_unit(unit)
        self._on_params_changed()

    def set_scale(self, scale: AxisScale) -> None:
        self._store.set_scale(scale)
        self._on_params_changed()

    def reset(self) -> None:
        """Restore defaults and drop measured data."""
        self._store.reset()
        self._measured = ()
        self.measured_data_changed.emit(self._measured)
        self._on_params_changed()
        self.params_reset.emit()

    def recompute(self) -> None:
        """Recompute every series from a fresh snapshot and notify."""
        self._series = compute_series(self._store.snapshot())
        self.he3_series_changed.emit(self._series.he3)
        self.neutron_series_changed.emit(self._series.neutron)
        self.buildup_series_changed.emit(self._series.buildup)

    def _on_params_changed(self) -> None:
        self.recompute()
        self.params_changed.emit()

    # ------------------------------------------------------------------
    # Measured data / CSV
    # ------------------------------------------------------------------

    def import_measured(self, path: str) -> ImportResult:
        """Merge a measured-data CSV into the current set.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not text.
        """
        result = self._importer.import_file(path, existing=self._measured)
        self._measured = result.points
        self.measured_data_changed.emit(self._measured)
        return result

    def clear_measured(self) -> None:
        self._measured = ()
        logger.info("Measured data cleared")
        self.measured_data_changed.emit(self._measured)

    def export_measured(self, path: str) -> int:
        return self._exporter.export_polarization(self._measured, path)

    def export_buildup(self, path: str) -> int:
        """Export the theoretical build-up curve."""
        return self._exporter.export_polarization(self._series.buildup, path)

    def export_decay(self, path: str) -> int:
        """Export the He-3 decay curve with time converted to minutes."""
        return self._exporter.export_polarization(
            decay_as_measured(self._series.he3), path,
        )
