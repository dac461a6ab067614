"""He-3 Polarization Calculator — Entry Point."""
import argparse
import logging
import sys

from PyQt6.QtCore import QSettings

from he3calc.application import create_application
from he3calc.core.i18n import DEFAULT_LANGUAGE, Translator, available_languages
from he3calc.logging_config import setup_logging
from he3calc.main_window import LANGUAGE_SETTING, MainWindow


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="He-3 neutron spin filter calculator")
    parser.add_argument(
        "--lang", choices=available_languages(), default=None,
        help="UI language (default: last used, else en)",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser.parse_args(argv)


def main():
    args = parse_args()
    setup_logging(getattr(logging, args.log_level), args.log_file)

    app = create_application(sys.argv[:1])
    lang = args.lang or QSettings().value(LANGUAGE_SETTING, DEFAULT_LANGUAGE)
    if lang not in available_languages():
        lang = DEFAULT_LANGUAGE
    Translator.init(lang)

    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
