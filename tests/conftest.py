"""Pytest configuration and shared fixtures."""

import os

# keep test runs local: no export to Logfire, no span console output
os.environ.setdefault("LOGFIRE_SEND_TO_LOGFIRE", "false")
os.environ.setdefault("LOGFIRE_CONSOLE", "false")

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def app():
    from main import app as fastapi_app

    return fastapi_app


@pytest.fixture
def client(app):
    """TestClient with the app lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def weekly_shots_params():
    return {"targetWeeklyDose": "100", "testosteroneStrength": "200", "shotsPerWeek": "2"}
