"""
Root-level pytest configuration.

Configures:
- Custom markers
- Shared fixtures for the store, the service and the HTTP app
"""

import random

import pytest
from fastapi.testclient import TestClient

from backend.analyst import AnalystService
from backend.config import Settings
from backend.main import create_app
from backend.models import StartupCreate
from backend.store import KVStore


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests that wait on background threads"
    )


TECHNOVA = {
    "name": "TechNova",
    "valuation": 4_500_000,
    "stage": "Seed",
    "sector": "Technology",
    "revenue": 2_100_000,
    "growthRate": 120,
    "teamSize": 25,
    "burnRate": 200_000,
    "runway": 18,
    "foundedYear": 2022,
}


@pytest.fixture
def technova_payload():
    return dict(TECHNOVA)


@pytest.fixture
def technova(technova_payload):
    return StartupCreate.model_validate(technova_payload).with_defaults()


@pytest.fixture
def store():
    return KVStore()


@pytest.fixture
def service(store):
    return AnalystService(store=store, rng=random.Random(7))


@pytest.fixture
def settings():
    return Settings(
        api_key=None,
        api_prefix="/api",
        seed_demo_data=False,
        scoring_seed=7,
        storage_base_url="https://files.test/storage",
    )


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
