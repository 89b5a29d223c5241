"""Shared pytest fixtures and sample identifiers for kennitala tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from kennitala.config.settings import KennitalaSettings
from kennitala.services.validate import ValidationService

# Check digits below were computed by hand from the weights 3,2,7,6,5,4,3,2.
PERSON = "0101901269"  # 1 January 1990, sum 60 -> check 6
PERSON_1974 = "1201743399"  # 12 January 1974, sum 79 -> check 9
PERSON_ZERO_CHECK = "0101900109"  # sum 55 -> check 0
PERSON_1880 = "0101801208"  # 1 January 1880
PERSON_LEAP_2000 = "2902001210"  # 29 February 2000
COMPANY = "4101692159"  # founded 1 January 1969 (day stored as 41)
SYSTEM = "8101901249"  # system number, no birthdate
NO_CHECK_DIGIT = "0101901009"  # sum 56, remainder 1 -> no valid check digit

_ENV_VARS = (
    "KENNITALA_VERBOSE",
    "KENNITALA_LOG_JSON",
    "KENNITALA_VALIDATION",
    "KENNITALA_VALIDATION__DEFAULT_CATEGORY",
    "KENNITALA_VALIDATION__ACCEPT_SEPARATOR",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every KENNITALA_* variable the settings object reads."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env: pytest.MonkeyPatch) -> KennitalaSettings:
    return KennitalaSettings()


@pytest.fixture
def service(settings: KennitalaSettings) -> ValidationService:
    return ValidationService(settings)


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Restore root and package logger state after a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("kennitala")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
