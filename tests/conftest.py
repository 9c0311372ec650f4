"""Shared pytest fixtures for all tests."""

import pytest

from typeguess.core.config import get_settings
from typeguess.culture import get_culture
from typeguess.guesser import Guesser
from typeguess.settings import GuessSettings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Re-read application settings for every test so env overrides don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def guesser() -> Guesser:
    """Guesser with default settings."""
    return Guesser(GuessSettings())


@pytest.fixture
def german() -> GuessSettings:
    """Settings using the de-DE culture (comma decimal separator, day first)."""
    return GuessSettings(culture=get_culture("de-DE"))
