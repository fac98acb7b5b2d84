"""Tests for plugin configuration."""

import logging

import pytest

from watchbot.config import PluginConfig, configure_logging


def test_defaults():
    config = PluginConfig()

    assert config.reply_text == "i know you are but what am i"
    assert config.shush_token == "\U0001f92b"
    assert config.ack_token == "✔️"
    assert config.ignore_key == "ignore"
    assert config.match == "exact"
    assert config.max_entries is None


def test_from_mapping():
    config = PluginConfig.from_mapping({
        "reply_text": "takes one to know one",
        "ignore_match": "Substring",
        "ignore_max_entries": " 50 ",
        "ack_token": "",
        "unrelated": "x",
    })

    assert config.reply_text == "takes one to know one"
    assert config.match == "substring"
    assert config.max_entries == 50
    assert config.ack_token == "✔️"


def test_blank_and_missing_values_use_defaults():
    assert PluginConfig.from_mapping({"reply_text": "   ", "log_level": None}) == PluginConfig()


@pytest.mark.parametrize("mapping", [
    {"ignore_match": "fuzzy"},
    {"ignore_max_entries": "lots"},
    {"ignore_max_entries": "0"},
])
def test_rejects_bad_values(mapping):
    with pytest.raises(ValueError):
        PluginConfig.from_mapping(mapping)


def test_configure_logging_sets_package_level():
    configure_logging("debug")
    assert logging.getLogger("watchbot").level == logging.DEBUG
    configure_logging("INFO")
    assert logging.getLogger("watchbot").level == logging.INFO
