"""Function reference panel — read-only formula and constant listing."""

from __future__ import annotations

import html

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QTextBrowser

from he3calc.core.formula_reference import constants_summary, formula_reference
from he3calc.core.i18n import t


def render_reference_html() -> str:
    """Formula reference as a small HTML document."""
    parts = [f"<h2>{html.escape(t('reference.title', 'Function Reference'))}</h2>"]
    for info in formula_reference():
        parts.append(f"<h3>{html.escape(info.name)}</h3>")
        parts.append(f"<p><code>{html.escape(info.formula)}</code></p>")
        if info.description:
            parts.append(f"<p>{html.escape(info.description)}</p>")
        if info.parameters:
            items = "".join(
                f"<li><b>{html.escape(p.symbol)}</b>: {html.escape(p.description)}</li>"
                for p in info.parameters
            )
            parts.append(f"<ul>{items}</ul>")
    parts.append(f"<h3>{html.escape(t('reference.constants', 'Constants'))}</h3>")
    parts.append(f"<p>{html.escape(constants_summary())}</p>")
    return "\n".join(parts)


class ReferencePanel(QWidget):
    """Formula listing; re-rendered when the language changes."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        self._browser = QTextBrowser()
        self._browser.setOpenExternalLinks(False)
        self._browser.setHtml(render_reference_html())
        layout.addWidget(self._browser)

    def retranslate_ui(self) -> None:
        self._browser.setHtml(render_reference_html())
