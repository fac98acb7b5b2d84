"""The package must import without the plugin runtime."""

import importlib
import sys


def test_core_modules_do_not_import_extism():
    for name in ("watchbot", "watchbot.config", "watchbot.events", "watchbot.host",
                 "watchbot.ignore", "watchbot.router"):
        importlib.import_module(name)
    assert "extism" not in sys.modules
