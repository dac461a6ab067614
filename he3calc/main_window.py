"""Main window — parameter panels, charts and the function reference.

Layout:
  Menu:   File (import / export / reset / quit), View (language),
          Help (about)
  Center: QTabWidget
            Visualization       He-3, Neutron and Build-up rows
                                (parameter panel left, chart right)
            Function Reference  formula listing
  Footer: QStatusBar
"""

from __future__ import annotations

import csv
import logging

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QTabWidget,
    QScrollArea, QFileDialog, QMessageBox, QFrame, QMenu,
)
from PyQt6.QtCore import Qt, QSettings
from PyQt6.QtGui import QAction, QActionGroup, QKeySequence

from he3calc.constants import (
    APP_NAME, APP_VERSION, MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT,
)
from he3calc.core.i18n import LANGUAGE_NAMES, Translator, available_languages, t
from he3calc.models.parameters import ChartId
from he3calc.ui.calculation_controller import CalculationController
from he3calc.ui.charts import BuildUpChart, He3Chart, NeutronChart
from he3calc.ui.panels import BuildUpPanel, He3Panel, NeutronPanel, ReferencePanel

logger = logging.getLogger(__name__)

_CSV_ERRORS = (OSError, UnicodeDecodeError, ValueError, csv.Error)

LANGUAGE_SETTING = "ui/language"


class MainWindow(QMainWindow):
    """Application main window."""

    def __init__(self, controller: CalculationController | None = None):
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)

        self._controller = controller or CalculationController(parent=self)

        self._build_ui()
        self._build_menu()
        self._connect_signals()
        self._restore_state()

        self._redraw_all()
        self.statusBar().showMessage(t("status.ready", "Ready"))

        Translator.on_language_changed(self.retranslate_ui)

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        self._tabs = QTabWidget()
        self.setCentralWidget(self._tabs)

        # Visualization tab
        self._he3_panel = He3Panel(self._controller)
        self._he3_chart = He3Chart()
        self._neutron_panel = NeutronPanel(self._controller)
        self._neutron_chart = NeutronChart()
        self._buildup_panel = BuildUpPanel(self._controller)
        self._buildup_chart = BuildUpChart()

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(8, 8, 8, 8)
        content_layout.setSpacing(12)
        for panel, chart in (
            (self._he3_panel, self._he3_chart),
            (self._neutron_panel, self._neutron_chart),
            (self._buildup_panel, self._buildup_chart),
        ):
            content_layout.addWidget(self._chart_row(panel, chart))

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setStyleSheet("QScrollArea { border: none; }")
        scroll.setWidget(content)
        self._tabs.addTab(scroll, t("tabs.visualization", "Visualization"))

        # Function reference tab
        self._reference_panel = ReferencePanel()
        self._tabs.addTab(self._reference_panel, t("tabs.reference", "Function Reference"))

    def _chart_row(self, panel: QWidget, chart: QWidget) -> QFrame:
        row = QFrame()
        row.setProperty("cssClass", "chart-row")
        layout = QHBoxLayout(row)
        layout.setContentsMargins(4, 4, 4, 4)
        panel.setFixedWidth(340)
        chart.setMinimumHeight(320)
        layout.addWidget(panel)
        layout.addWidget(chart, stretch=1)
        return row

    def _menu(self, parent, key: str, default: str) -> QMenu:
        menu = parent.addMenu(t(key, default))
        self._menu_texts.append((menu, key, default))
        return menu

    def _action(self, menu: QMenu, key: str, default: str, slot) -> QAction:
        action = QAction(t(key, default), self)
        action.triggered.connect(slot)
        menu.addAction(action)
        self._menu_texts.append((action, key, default))
        return action

    def _build_menu(self) -> None:
        self._menu_texts: list[tuple[QMenu | QAction, str, str]] = []
        bar = self.menuBar()

        file_menu = self._menu(bar, "menu.file", "&File")
        self._act_import = self._action(
            file_menu, "menu.import_measured", "Import Measured Data...",
            self._on_import_measured,
        )
        self._act_import.setShortcut(QKeySequence.StandardKey.Open)
        self._act_clear = self._action(
            file_menu, "menu.clear_measured", "Clear Measured Data",
            self._controller.clear_measured,
        )
        file_menu.addSeparator()

        export_menu = self._menu(file_menu, "menu.export", "Export CSV")
        for key, default, exporter in (
            ("menu.export_buildup", "Build-up Curve...", self._controller.export_buildup),
            ("menu.export_decay", "He-3 Decay Curve...", self._controller.export_decay),
            ("menu.export_measured", "Measured Data...", self._controller.export_measured),
        ):
            self._action(
                export_menu, key, default,
                lambda _checked=False, fn=exporter: self._on_export(fn),
            )
        file_menu.addSeparator()

        self._action(file_menu, "menu.reset", "Reset to Defaults", self._on_reset)
        act_quit = self._action(file_menu, "menu.quit", "Quit", self.close)
        act_quit.setShortcut(QKeySequence.StandardKey.Quit)

        view_menu = self._menu(bar, "menu.view", "&View")
        lang_menu = self._menu(view_menu, "menu.language", "Language")
        self._language_group = QActionGroup(self)
        self._language_actions: dict[str, QAction] = {}
        current = Translator.instance().lang
        for lang in available_languages():
            # Language names are not translated.
            action = QAction(LANGUAGE_NAMES.get(lang, lang), self)
            action.setCheckable(True)
            action.setChecked(lang == current)
            action.triggered.connect(
                lambda _checked=False, code=lang: self._on_language_selected(code)
            )
            self._language_group.addAction(action)
            lang_menu.addAction(action)
            self._language_actions[lang] = action

        help_menu = self._menu(bar, "menu.help", "&Help")
        self._action(help_menu, "menu.about", "About", self._on_about)

    def _connect_signals(self) -> None:
        c = self._controller
        c.he3_series_changed.connect(self._redraw_he3)
        c.neutron_series_changed.connect(self._redraw_neutron)
        c.buildup_series_changed.connect(self._redraw_buildup)
        c.measured_data_changed.connect(self._redraw_buildup)

    # ------------------------------------------------------------------
    # Chart refresh
    # ------------------------------------------------------------------

    def _redraw_all(self) -> None:
        self._redraw_he3()
        self._redraw_neutron()
        self._redraw_buildup()

    def _redraw_he3(self, *_args) -> None:
        c = self._controller
        self._he3_chart.update_series(c.series.he3, c.limits(ChartId.HE3))

    def _redraw_neutron(self, *_args) -> None:
        c = self._controller
        self._neutron_chart.update_series(
            c.series.neutron,
            c.store.params.x_axis_unit,
            c.store.scale,
            c.limits(ChartId.NEUTRON),
        )

    def _redraw_buildup(self, *_args) -> None:
        c = self._controller
        self._buildup_chart.update_series(
            c.series.buildup, c.measured_points, c.limits(ChartId.BUILDUP),
        )

    # ------------------------------------------------------------------
    # File menu handlers
    # ------------------------------------------------------------------

    def _on_import_measured(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self,
            t("dialogs.import_title", "Import Measured Data"),
            "",
            t("dialogs.csv_filter", "CSV Files (*.csv)"),
        )
        if not path:
            return
        try:
            result = self._controller.import_measured(path)
        except _CSV_ERRORS as e:
            logger.warning("Import failed: %s", e)
            QMessageBox.warning(
                self, t("dialogs.import_error_title", "Import Error"), str(e)
            )
            return
        self.statusBar().showMessage(
            t(
                "status.import_done",
                "Imported {imported} points ({skipped} rows skipped)",
            ).format(imported=result.imported, skipped=result.skipped)
        )

    def _on_export(self, exporter) -> None:
        path, _ = QFileDialog.getSaveFileName(
            self,
            t("dialogs.export_title", "Export CSV"),
            "",
            t("dialogs.csv_filter", "CSV Files (*.csv)"),
        )
        if not path:
            return
        if not path.lower().endswith(".csv"):
            path += ".csv"
        try:
            rows = exporter(path)
        except _CSV_ERRORS as e:
            logger.warning("Export failed: %s", e)
            QMessageBox.warning(
                self, t("dialogs.export_error_title", "Export Error"), str(e)
            )
            return
        self.statusBar().showMessage(
            t("status.export_done", "Exported {rows} rows: {path}").format(
                rows=rows, path=path,
            )
        )

    def _on_reset(self) -> None:
        self._controller.reset()
        self.statusBar().showMessage(t("status.reset", "Parameters reset to defaults"))

    # ------------------------------------------------------------------
    # Language
    # ------------------------------------------------------------------

    def _on_language_selected(self, lang: str) -> None:
        Translator.instance().set_language(lang)

    def retranslate_ui(self) -> None:
        """Update all translatable UI strings on language change."""
        for item, key, default in self._menu_texts:
            if isinstance(item, QMenu):
                item.setTitle(t(key, default))
            else:
                item.setText(t(key, default))
        lang = Translator.instance().lang
        if lang in self._language_actions:
            self._language_actions[lang].setChecked(True)

        self._tabs.setTabText(0, t("tabs.visualization", "Visualization"))
        self._tabs.setTabText(1, t("tabs.reference", "Function Reference"))

        for widget in (
            self._he3_panel, self._neutron_panel, self._buildup_panel,
            self._he3_chart, self._neutron_chart, self._buildup_chart,
            self._reference_panel,
        ):
            widget.retranslate_ui()

        # Legend names
        self._redraw_all()
        self.statusBar().showMessage(t("status.ready", "Ready"))

    def _on_about(self) -> None:
        from he3calc.ui.dialogs.about_dialog import AboutDialog
        dlg = AboutDialog(self)
        dlg.exec()

    # ------------------------------------------------------------------
    # Window state
    # ------------------------------------------------------------------

    def closeEvent(self, event):
        Translator.remove_listener(self.retranslate_ui)
        self._save_state()
        super().closeEvent(event)

    def _save_state(self) -> None:
        settings = QSettings()
        settings.setValue("mainwindow/geometry", self.saveGeometry())
        settings.setValue(LANGUAGE_SETTING, Translator.instance().lang)

    def _restore_state(self) -> None:
        settings = QSettings()
        geometry = settings.value("mainwindow/geometry")
        if geometry:
            self.restoreGeometry(geometry)
