"""Tests for internationalization (i18n) system."""

import json
from pathlib import Path

import pytest

from he3calc.core.i18n import (
    Translator, available_languages, flatten_keys, load_catalogue, t,
)

TRANSLATIONS_DIR = Path(__file__).parent.parent / "translations"


@pytest.fixture(autouse=True)
def reset_manager():
    """Drop the active translator between tests."""
    Translator.reset()
    yield
    Translator.reset()


class TestFlatten:
    def test_flat_dict(self):
        assert flatten_keys({"a": "1", "b": "2"}) == {"a": "1", "b": "2"}

    def test_nested_dict(self):
        d = {"he3": {"chart_title": "He-3", "time_axis": "Time"}}
        assert flatten_keys(d) == {"he3.chart_title": "He-3", "he3.time_axis": "Time"}

    def test_deeply_nested(self):
        assert flatten_keys({"a": {"b": {"c": "deep"}}}) == {"a.b.c": "deep"}

    def test_non_string_values(self):
        assert flatten_keys({"num": 42}) == {"num": "42"}


class TestTranslator:
    def test_default_is_english(self):
        mgr = Translator.instance()
        assert mgr.lang == "en"
        assert mgr.get("tabs.visualization") == "Visualization"

    def test_init_ja(self):
        mgr = Translator.init("ja")
        assert mgr.lang == "ja"
        assert mgr.get("buildup.pumping_time") == "偏極時定数 (分)"

    def test_missing_key_falls_back(self):
        Translator.init("ja")
        assert t("no.such.key", "Fallback") == "Fallback"

    def test_unknown_language(self):
        mgr = Translator.init("xx")
        assert mgr.get("tabs.visualization", "Visualization") == "Visualization"

    def test_set_language_notifies(self):
        calls = []
        Translator.init("en")
        Translator.on_language_changed(lambda: calls.append(1))
        Translator.instance().set_language("ja")
        assert calls == [1]
        assert t("tabs.visualization") == "可視化"

    def test_same_language_is_noop(self):
        calls = []
        Translator.init("en")
        Translator.on_language_changed(lambda: calls.append(1))
        assert Translator.instance().set_language("en") is False
        assert calls == []

    def test_remove_listener(self):
        calls = []

        def on_change():
            calls.append(Translator.instance().lang)

        Translator.on_language_changed(on_change)
        Translator.instance().set_language("ja")
        Translator.remove_listener(on_change)
        Translator.instance().set_language("en")
        assert calls == ["ja"]
        assert Translator.listener_count() == 0

    def test_remove_unknown_listener(self):
        Translator.remove_listener(lambda: None)
        assert Translator.listener_count() == 0

    def test_init_keeps_listeners(self):
        Translator.on_language_changed(lambda: None)
        Translator.init("ja")
        assert Translator.listener_count() == 1


class TestCatalogue:
    def test_available_languages(self):
        assert available_languages() == ["en", "ja"]

    def test_available_languages_default_first(self, tmp_path):
        for lang in ("de", "en", "ja"):
            (tmp_path / f"{lang}.json").write_text("{}", encoding="utf-8")
        assert available_languages(tmp_path) == ["en", "de", "ja"]

    def test_broken_file_is_empty(self, tmp_path):
        (tmp_path / "xx.json").write_text("{not json", encoding="utf-8")
        assert load_catalogue("xx", tmp_path) == {}

    def test_non_object_file_is_empty(self, tmp_path):
        (tmp_path / "xx.json").write_text("[1, 2]", encoding="utf-8")
        assert load_catalogue("xx", tmp_path) == {}

    def test_missing_file_is_empty(self, tmp_path):
        assert load_catalogue("xx", tmp_path) == {}


class TestTranslationFiles:
    def _keys(self, lang: str) -> set[str]:
        data = json.loads((TRANSLATIONS_DIR / f"{lang}.json").read_text(encoding="utf-8"))
        return set(flatten_keys(data))

    def test_same_keys(self):
        assert self._keys("en") == self._keys("ja")

    def test_format_placeholders_match(self):
        en = flatten_keys(json.loads((TRANSLATIONS_DIR / "en.json").read_text(encoding="utf-8")))
        ja = flatten_keys(json.loads((TRANSLATIONS_DIR / "ja.json").read_text(encoding="utf-8")))
        for key, text in en.items():
            if "{" in text:
                names = sorted(part.split("}")[0].split(":")[0]
                               for part in text.split("{")[1:])
                ja_names = sorted(part.split("}")[0].split(":")[0]
                                  for part in ja[key].split("{")[1:])
                assert names == ja_names, key
