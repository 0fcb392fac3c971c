"""Shared fixtures: every test gets a fresh directory built from the packaged seed."""

import pytest
from fastapi.testclient import TestClient

from airport_directory_api.app.core.config import DEFAULT_SEED_PATH, Settings
from airport_directory_api.app.main import create_app
from airport_directory_api.app.services.airport_service import AirportDirectory


@pytest.fixture
def directory():
    return AirportDirectory.from_seed(DEFAULT_SEED_PATH)


@pytest.fixture
def settings():
    return Settings(api_prefix="", default_page_size=10)


@pytest.fixture
def client(settings, directory):
    app = create_app(settings=settings, directory=directory)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def martha():
    """A valid airport payload with only the required fields."""
    return {"icao": "MLS", "name": "Martha's airport", "city": "Birkenhead"}
