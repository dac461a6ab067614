"""Shared pytest setup: headless Qt platform for widget tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
