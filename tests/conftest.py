"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test clients for the protected and open apps
- A signed-up user's Authorization header
- Sample job payloads
"""

import os

# Point the app at in-memory SQLite before anything imports the settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["JSON_LOGS"] = "False"

import copy

import pytest
from fastapi.testclient import TestClient

from jobboard.core.database import Base, SessionLocal, engine, get_db
from main import app, create_app

open_app = create_app(auth_enabled=False)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


def _client_for(application, db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    application.dependency_overrides[get_db] = override_get_db
    return TestClient(application)


@pytest.fixture
def client(db_session):
    """
    Test client for the token-protected app.
    """
    with _client_for(app, db_session) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def open_client(db_session):
    """
    Test client for the app without authentication.
    """
    with _client_for(open_app, db_session) as test_client:
        yield test_client

    open_app.dependency_overrides.clear()


@pytest.fixture
def signup_data():
    """Valid signup payload"""
    return {
        "name": "John Doe",
        "email": "john@example.com",
        "password": "password123",
        "phone_number": "1234567890",
        "gender": "Male",
        "date_of_birth": "1990-01-01",
        "membership_status": "Active",
    }


@pytest.fixture
def auth_headers(client, signup_data):
    """Authorization header for a freshly signed-up user"""
    response = client.post("/api/users/signup", json=signup_data)
    assert response.status_code == 201
    return {"Authorization": "bearer " + response.json()["token"]}


@pytest.fixture
def sample_jobs():
    """The two seed jobs"""
    return copy.deepcopy([
        {
            "title": "Software Engineer",
            "type": "Full-Time",
            "description": "Develop and maintain web applications.",
            "company": {
                "name": "Tech Corp",
                "contactEmail": "hr@techcorp.com",
                "contactPhone": "123456789",
            },
        },
        {
            "title": "Data Scientist",
            "type": "Part-Time",
            "description": "Analyze data and build machine learning models.",
            "company": {
                "name": "Data Labs",
                "contactEmail": "hr@datalabs.com",
                "contactPhone": "987654321",
            },
        },
    ])


@pytest.fixture
def new_job_data():
    """A job that is not part of the seed data"""
    return {
        "title": "Product Manager",
        "type": "Full-Time",
        "description": "Lead the product team and define strategy.",
        "company": {
            "name": "Innovative Solutions",
            "contactEmail": "hr@innovativesolutions.com",
            "contactPhone": "1122334455",
        },
    }
