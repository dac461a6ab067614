"""Widget tests — panels, charts and main window wiring.

Runs headless (QT_QPA_PLATFORM=offscreen, see conftest.py).
"""

import sys

import numpy as np
import pytest
from PyQt6.QtWidgets import QApplication

from he3calc.core.i18n import Translator
from he3calc.main_window import MainWindow
from he3calc.models.parameters import AxisScale, ChartId, XAxisUnit
from he3calc.models.results import MeasuredPoint
from he3calc.ui.calculation_controller import CalculationController
from he3calc.ui.charts import BuildUpChart, He3Chart, NeutronChart
from he3calc.ui.charts.base_chart import BaseChart, finite_xy
from he3calc.ui.panels import BuildUpPanel, He3Panel, NeutronPanel
from he3calc.ui.panels.reference_panel import render_reference_html

_app = QApplication.instance() or QApplication(sys.argv)


def _type(edit, text):
    edit.setText(text)
    edit.textEdited.emit(text)


class TestFiniteXY:
    def test_drops_non_finite(self):
        x, y = finite_xy(np.array([0.0, 1.0, 2.0, np.inf]),
                         np.array([np.nan, 1.0, 4.0, 9.0]))
        np.testing.assert_array_equal(x, [1.0, 2.0])
        np.testing.assert_array_equal(y, [1.0, 4.0])


class TestCharts:
    def test_base_chart_curves(self):
        chart = BaseChart()
        chart.add_curve(np.arange(3.0), np.arange(3.0))
        chart.add_scatter(np.arange(3.0), np.arange(3.0))
        assert chart.curve_count == 2
        chart.clear_curves()
        assert chart.curve_count == 0

    def test_set_limits_tolerates_bad_values(self):
        chart = BaseChart(log_x=True)
        chart.set_limits(0.0, -1.0, 10.0, 10.0)
        chart.set_limits(0.0, 10.0, 0.0, 100.0)

    def test_he3_chart(self):
        ctrl = CalculationController()
        chart = He3Chart()
        chart.update_series(ctrl.series.he3, ctrl.limits(ChartId.HE3))
        assert chart.curve_count == 3

    def test_neutron_chart_log(self):
        ctrl = CalculationController()
        ctrl.set_scale(AxisScale.LOG)
        chart = NeutronChart()
        chart.update_series(
            ctrl.series.neutron, XAxisUnit.WAVELENGTH, AxisScale.LOG,
            ctrl.limits(ChartId.NEUTRON),
        )
        assert chart.curve_count == 3

    def test_buildup_chart_measured(self):
        ctrl = CalculationController()
        chart = BuildUpChart()
        chart.update_series(ctrl.series.buildup, (), ctrl.limits(ChartId.BUILDUP))
        assert chart.curve_count == 1
        chart.update_series(
            ctrl.series.buildup, (MeasuredPoint(10.0, 20.0),),
            ctrl.limits(ChartId.BUILDUP),
        )
        assert chart.curve_count == 2


class TestPanels:
    def setup_method(self):
        self.ctrl = CalculationController()

    def test_he3_commit_only_on_button(self):
        panel = He3Panel(self.ctrl)
        _type(panel._edit_p0, "40")
        assert self.ctrl.store.params.initial_polarization == 70.0
        panel._btn_commit.click()
        assert self.ctrl.store.params.initial_polarization == 40.0

    def test_range_applies_immediately(self):
        panel = He3Panel(self.ctrl)
        _type(panel._range_edits["x_max"], "48")
        assert self.ctrl.store.ranges.he3.x_max == "48"
        assert self.ctrl.series.he3[-1].time == pytest.approx(48.0)

    def test_neutron_unit_radio(self):
        panel = NeutronPanel(self.ctrl)
        panel._rb_energy.setChecked(True)
        assert self.ctrl.store.params.x_axis_unit is XAxisUnit.ENERGY
        assert "meV" in panel._range_labels["x_min"].text()

    def test_neutron_scale_radio(self):
        panel = NeutronPanel(self.ctrl)
        panel._rb_log.setChecked(True)
        assert self.ctrl.store.scale is AxisScale.LOG

    def test_neutron_commit(self):
        panel = NeutronPanel(self.ctrl)
        _type(panel._edits["wavelength"], "2")
        panel._btn_commit.click()
        assert self.ctrl.performance().wavelength == 2.0
        assert "2 Å" in panel._perf_label.text()

    def test_reset_refills_fields(self):
        panel = BuildUpPanel(self.ctrl)
        _type(panel._edits["pumping_time"], "5")
        panel._btn_commit.click()
        self.ctrl.reset()
        assert panel._edits["pumping_time"].text() == "30"
        assert self.ctrl.store.buildup.pumping_time == 30.0

    def test_reference_html(self):
        html = render_reference_html()
        assert "tanh" in html
        assert "5333" in html


class TestMainWindow:
    @pytest.fixture(autouse=True)
    def english(self):
        Translator.init("en")
        yield
        Translator.reset()

    def test_builds(self):
        window = MainWindow(CalculationController())
        assert window._tabs.count() == 2
        assert window._he3_chart.curve_count == 3
        assert window._buildup_chart.curve_count == 1

    def test_measured_data_redraws(self, tmp_path):
        ctrl = CalculationController()
        window = MainWindow(ctrl)
        path = tmp_path / "m.csv"
        path.write_text("t,p\n10,20\n", encoding="utf-8")
        ctrl.import_measured(str(path))
        assert window._buildup_chart.curve_count == 2

    def test_language_menu_relabels_window(self):
        window = MainWindow(CalculationController())
        window._language_actions["ja"].trigger()

        assert Translator.instance().lang == "ja"
        assert window._language_actions["ja"].isChecked()
        assert window._tabs.tabText(0) == "可視化"
        assert window._he3_panel._btn_commit.text() == "パラメータ設定"
        assert "分" in window._buildup_panel._range_labels["x_min"].text()
        titles = [item.title() for item, _key, _default in window._menu_texts
                  if hasattr(item, "title")]
        assert "表示(&V)" in titles

        window._language_actions["en"].trigger()
        assert window._tabs.tabText(0) == "Visualization"
        assert window._he3_panel._btn_commit.text() == "Set Parameters"

    def test_language_switch_keeps_drafts_and_curves(self):
        window = MainWindow(CalculationController())
        _type(window._he3_panel._edit_p0, "55")
        Translator.instance().set_language("ja")
        assert window._he3_panel._edit_p0.text() == "55"
        assert window._he3_chart.curve_count == 3
        assert window._neutron_chart.label_texts()[0] == "中性子偏極度と透過率"

    def test_neutron_chart_label_follows_unit_after_switch(self):
        ctrl = CalculationController()
        window = MainWindow(ctrl)
        ctrl.set_x_axis_unit(XAxisUnit.ENERGY)
        Translator.instance().set_language("ja")
        assert window._neutron_chart.label_texts()[1] == "エネルギー (meV)"

    def test_close_removes_language_listener(self, monkeypatch):
        monkeypatch.setattr(MainWindow, "_save_state", lambda self: None)
        window = MainWindow(CalculationController())
        assert Translator.listener_count() == 1
        window.close()
        assert Translator.listener_count() == 0
