"""Shared fixtures."""

import pytest

from emitkit import EventEmitter
from emitkit.config.settings import get_settings


@pytest.fixture
def emitter() -> EventEmitter:
    return EventEmitter()


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
