"""Shared fixtures for ferry departures tests."""

import pytest

from ferry_departures.adapters.config import RouteCatalogLoader
from ferry_departures.adapters.timetable import StaticTimetableStore
from ferry_departures.domain.models import RouteCatalog


@pytest.fixture(scope="session")
def catalog() -> RouteCatalog:
    """The bundled route catalog."""
    return RouteCatalogLoader.load()


@pytest.fixture
def store(catalog: RouteCatalog) -> StaticTimetableStore:
    return StaticTimetableStore(catalog)
