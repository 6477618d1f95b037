import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from wedding_planner.db.database import Base, get_db
from wedding_planner.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PROFILE = {
    "brideName": "Priya Sharma",
    "groomName": "Arjun Patel",
    "weddingStartDate": "2024-12-15",
    "weddingEndDate": "2024-12-20",
    "venue": "Grand Palace Hotel",
    "city": "Mumbai",
    "state": "Maharashtra",
    "guestCount": 300,
    "budget": 50000,
    "functions": ["haldi", "sangeet", "wedding"],
    "theme": "traditional",
}


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: the lifespan would create tables on the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, username, name="Test User", role="bride"):
    """Register a user and return bearer headers for them"""
    response = client.post(
        "/api/auth/register",
        json={"username": username, "password": "password123", "name": name, "role": role},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


def onboard(client, headers, **overrides):
    """Create a wedding profile for the caller and return its id"""
    response = client.post("/api/wedding-profile", json={**PROFILE, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]


@pytest.fixture
def couple(client):
    headers = register(client, "priya.sharma", name="Priya Sharma")
    profile_id = onboard(client, headers)
    return headers, profile_id


@pytest.fixture
def other_couple(client):
    headers = register(client, "neha.gupta", name="Neha Gupta")
    profile_id = onboard(client, headers, brideName="Neha Gupta", groomName="Rohan Mehta")
    return headers, profile_id
