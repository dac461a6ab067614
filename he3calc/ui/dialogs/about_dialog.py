"""About dialog — application info and tech stack."""

from __future__ import annotations

import sys

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QDialogButtonBox,
)
from PyQt6.QtCore import Qt

from he3calc.constants import APP_NAME, APP_VERSION, APP_ORGANIZATION
from he3calc.core.i18n import t
from he3calc.core.physical_constants import DEFAULT_CONSTANTS
from he3calc.core.formula_reference import constants_summary
from he3calc.ui.styles.colors import ACCENT, TEXT_DISABLED, TEXT_MUTED, TEXT_PRIMARY


class AboutDialog(QDialog):
    """Simple 'About' dialog showing app info and the constant set."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(t("about.title", "About"))
        self.setFixedSize(440, 300)

        layout = QVBoxLayout(self)
        layout.setSpacing(8)

        title = QLabel(APP_NAME)
        title.setStyleSheet(f"font-size: 16pt; font-weight: bold; color: {ACCENT};")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        ver = QLabel(t("about.version", "Version {version}").format(version=APP_VERSION))
        ver.setStyleSheet(f"font-size: 11pt; color: {TEXT_MUTED};")
        ver.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(ver)

        org = QLabel(APP_ORGANIZATION)
        org.setStyleSheet(f"font-size: 10pt; color: {TEXT_PRIMARY};")
        org.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(org)

        layout.addSpacing(12)

        tech = QLabel(
            "Python {py_ver} | PyQt6 | NumPy | pyqtgraph".format(
                py_ver=f"{sys.version_info.major}.{sys.version_info.minor}",
            )
        )
        tech.setStyleSheet(f"font-size: 9pt; color: {TEXT_MUTED};")
        tech.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(tech)

        constants = QLabel(constants_summary(DEFAULT_CONSTANTS))
        constants.setWordWrap(True)
        constants.setStyleSheet(f"font-size: 9pt; color: {TEXT_DISABLED};")
        constants.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(constants)

        desc = QLabel(t(
            "about.description",
            "He-3 neutron spin filter polarization and\ntransmission calculator.",
        ))
        desc.setStyleSheet(f"font-size: 9pt; color: {TEXT_DISABLED};")
        desc.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(desc)

        layout.addStretch()

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
