"""Shared fixtures: value cells and clean global state."""

import pytest
import structlog

from form_validator.config import get_settings
from form_validator.services.reactive import Cell


@pytest.fixture(autouse=True)
def _reset_globals():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def person_values():
    return Cell({"name": "John", "age": 25})


@pytest.fixture
def profile_values():
    return Cell({"name": "John Doe", "age": "30"})
