"""Pytest configuration and shared fixtures."""

import os

# Cheap hashing and no file-backed default database during tests
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient

from insurance_playground.main import create_app


@pytest.fixture
def app(tmp_path):
    """Fresh, seeded application on its own SQLite file."""
    return create_app(database_url=f"sqlite:///{tmp_path / 'test.db'}", seed=True)


@pytest.fixture
def test_client(app) -> TestClient:
    """Create FastAPI test client.

    Entering the client runs the app lifespan, which creates the tables
    and loads the sample data.
    """
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db(app, test_client):
    """The database behind ``test_client``."""
    return app.state.db


@pytest.fixture
def new_policy_payload() -> dict:
    return {
        "customer_id": 1,
        "broker_id": 1,
        "policy_type": "auto",
        "product_name": "Weekend Driver Cover",
        "coverage_amount": 40000,
        "premium_amount": 900,
        "deductible": 250,
        "policy_term": 12,
        "start_date": "2025-01-01",
        "end_date": "2025-12-31",
    }


@pytest.fixture
def new_broker_payload() -> dict:
    return {
        "first_name": "Iris",
        "last_name": "Quillfeather",
        "email": "iris.quillfeather@quill-brokers.com",
        "company_name": "Quillfeather Brokerage",
        "territory": "Northwest",
    }
