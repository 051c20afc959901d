from __future__ import annotations

import logging

import pytest

from requests_mock import Mocker

from thermometer.sinks import RecordingSink


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def restore_logging(monkeypatch):
    from thermometer import logging_config

    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    monkeypatch.setattr(logging_config, "_configured", False)
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
