"""Shared fixtures for plugin tests."""

import pytest

from watchbot.config import PluginConfig
from watchbot.host import MemoryVarStore, RecordingGateway
from watchbot.router import EventRouter


@pytest.fixture
def store():
    return MemoryVarStore()


@pytest.fixture
def gateway():
    return RecordingGateway()


@pytest.fixture
def config():
    return PluginConfig()


@pytest.fixture
def router(store, gateway, config):
    return EventRouter.create(store, gateway, config)
