"""QApplication setup: identity, plotting defaults, theme and Qt log routing."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pyqtgraph as pg
from PyQt6.QtCore import QtMsgType, qInstallMessageHandler
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QApplication

from he3calc.constants import APP_NAME, APP_ORGANIZATION, APP_VERSION

logger = logging.getLogger(__name__)

STYLESHEET_PATH = Path(__file__).parent / "ui" / "styles" / "dark_theme.qss"

_QT_LOG_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def qt_log_level(msg_type: QtMsgType) -> int:
    return _QT_LOG_LEVELS.get(msg_type, logging.DEBUG)


def _route_qt_message(msg_type, context, message):
    category = getattr(context, "category", None) or "qt"
    logger.log(qt_log_level(msg_type), "[%s] %s", category, message)


def _log_uncaught(exc_type, exc, tb):
    # Exceptions raised inside Qt slots would otherwise only reach stderr.
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return
    logger.critical("Uncaught exception", exc_info=(exc_type, exc, tb))


def load_stylesheet(path: Path = STYLESHEET_PATH) -> str:
    """Theme QSS text, or "" (Qt default look) when it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Stylesheet not loaded (%s): %s", path, e)
        return ""


def create_application(argv: list[str]) -> QApplication:
    """Create the QApplication used by the calculator window."""
    qInstallMessageHandler(_route_qt_message)
    sys.excepthook = _log_uncaught

    # Curves are thin lines over a dark background.
    pg.setConfigOptions(antialias=True)

    app = QApplication(argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(APP_ORGANIZATION)

    font = QFont("Segoe UI", 10)
    font.setStyleHint(QFont.StyleHint.SansSerif)
    app.setFont(font)
    app.setStyleSheet(load_stylesheet())

    logger.debug("QApplication ready (Qt platform: %s)", app.platformName())
    return app
