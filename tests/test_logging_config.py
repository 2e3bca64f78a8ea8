"""Tests for backend logging setup."""

import logging

import pytest

from ecosim_backend.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_levels():
    names = ("ecosim", "ecosim_backend", "ecosim.test.extra")
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_explicit_level() -> None:
    logger = configure_logging(level="debug")
    assert logger.name == "ecosim"
    assert logger.level == logging.DEBUG
    assert logging.getLogger("ecosim_backend").level == logging.DEBUG


def test_level_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("ECOSIM_LOG_LEVEL", "warning")
    logger = configure_logging(extra_loggers=["ecosim.test.extra"])
    assert logger.level == logging.WARNING
    assert logging.getLogger("ecosim.test.extra").level == logging.WARNING


def test_defaults_to_info(monkeypatch) -> None:
    monkeypatch.delenv("ECOSIM_LOG_LEVEL", raising=False)
    assert configure_logging().level == logging.INFO
