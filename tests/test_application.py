"""Tests for QApplication setup helpers."""

import logging

from PyQt6.QtCore import QtMsgType

from he3calc.application import STYLESHEET_PATH, load_stylesheet, qt_log_level


class TestQtLogLevel:
    def test_warning(self):
        assert qt_log_level(QtMsgType.QtWarningMsg) == logging.WARNING

    def test_critical_and_fatal(self):
        assert qt_log_level(QtMsgType.QtCriticalMsg) == logging.ERROR
        assert qt_log_level(QtMsgType.QtFatalMsg) == logging.CRITICAL

    def test_debug(self):
        assert qt_log_level(QtMsgType.QtDebugMsg) == logging.DEBUG


class TestStylesheet:
    def test_theme_loads(self):
        assert STYLESHEET_PATH.exists()
        assert "QLineEdit" in load_stylesheet()

    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="he3calc.application"):
            assert load_stylesheet(tmp_path / "none.qss") == ""
        assert "Stylesheet not loaded" in caplog.text
