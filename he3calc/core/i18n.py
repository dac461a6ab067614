"""UI string catalogue with live language switching.

translations/<lang>.json holds nested sections that are flattened to
dotted keys ("he3.chart_title"). Every lookup passes the English text as
its default, so a missing file or key never blanks a label.

Widgets re-label themselves through a callback registered with
``Translator.on_language_changed``; the View → Language menu calls
``Translator.instance().set_language()``.

    from he3calc.core.i18n import Translator, t

    Translator.init("ja")
    label.setText(t("he3.chart_title", "He-3 Polarization"))
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, ClassVar

logger = logging.getLogger(__name__)

TRANSLATIONS_DIR = Path(__file__).resolve().parents[2] / "translations"

DEFAULT_LANGUAGE = "en"

# Menu captions are shown in their own language.
LANGUAGE_NAMES = {
    "en": "English",
    "ja": "日本語",
}

Listener = Callable[[], None]


def available_languages(directory: Path = TRANSLATIONS_DIR) -> list[str]:
    """Language codes with a catalogue file, default language first."""
    codes = sorted(p.stem for p in directory.glob("*.json"))
    if DEFAULT_LANGUAGE in codes:
        codes.remove(DEFAULT_LANGUAGE)
    return [DEFAULT_LANGUAGE] + codes


def flatten_keys(data: dict) -> dict[str, str]:
    """{"he3": {"title": "He-3"}} -> {"he3.title": "He-3"}"""
    flat: dict[str, str] = {}
    pending = [("", data)]
    while pending:
        prefix, node = pending.pop()
        for name, value in node.items():
            key = f"{prefix}.{name}" if prefix else str(name)
            if isinstance(value, dict):
                pending.append((key, value))
            else:
                flat[key] = str(value)
    return flat


def load_catalogue(lang: str, directory: Path = TRANSLATIONS_DIR) -> dict[str, str]:
    """Flattened strings for ``lang``; empty when the file is missing or broken."""
    path = directory / f"{lang}.json"
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("No translations for %r, showing English text", lang)
        return {}
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Cannot read %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: top level is not an object", path)
        return {}
    return flatten_keys(data)


class Translator:
    """Active catalogue plus the widgets waiting for language changes."""

    _instance: ClassVar[Translator | None] = None

    def __init__(self, lang: str = DEFAULT_LANGUAGE):
        self.lang = lang
        self._strings = load_catalogue(lang)
        self._listeners: list[Listener] = []

    def get(self, key: str, default: str = "") -> str:
        return self._strings.get(key, default)

    def set_language(self, lang: str) -> bool:
        """Load ``lang`` and re-label registered widgets.

        Returns:
            False when ``lang`` is already active (listeners not called).
        """
        if lang == self.lang:
            return False
        logger.info("UI language: %s -> %s", self.lang, lang)
        self.lang = lang
        self._strings = load_catalogue(lang)
        for callback in list(self._listeners):
            callback()
        return True

    @classmethod
    def instance(cls) -> Translator:
        if cls._instance is None:
            cls._instance = cls(DEFAULT_LANGUAGE)
        return cls._instance

    @classmethod
    def init(cls, lang: str = DEFAULT_LANGUAGE) -> Translator:
        """Replace the active translator; registered listeners carry over."""
        listeners = cls._instance._listeners if cls._instance else []
        cls._instance = cls(lang)
        cls._instance._listeners = listeners
        return cls._instance

    @classmethod
    def on_language_changed(cls, callback: Listener) -> None:
        cls.instance()._listeners.append(callback)

    @classmethod
    def remove_listener(cls, callback: Listener) -> None:
        listeners = cls.instance()._listeners
        if callback in listeners:
            listeners.remove(callback)

    @classmethod
    def listener_count(cls) -> int:
        return len(cls.instance()._listeners)

    @classmethod
    def reset(cls) -> None:
        """Forget the active translator and its listeners (tests)."""
        cls._instance = None


def t(key: str, default: str = "") -> str:
    """Translated text for ``key``, or ``default`` (English)."""
    return Translator.instance().get(key, default)
