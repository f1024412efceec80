import os

# Configure before the app and its settings are imported
os.environ["SIMULATED_LATENCY_SECONDS"] = "0"
os.environ["SCHEDULER_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite:///file:ka_eco_test?mode=memory&cache=shared&uri=true"

import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.db.seed_data import reset_db
from app.db.session import SessionLocal

CREDENTIALS = {
    "admin": ("admin@ka-eco.rw", "admin123"),
    "researcher": ("researcher@ka-eco.rw", "research123"),
    "public": ("public@ka-eco.rw", "public123"),
}


@pytest.fixture(autouse=True)
def fresh_database():
    """
    Every test starts from the seeded mock data set: 4 users, 4 wetlands
    and 30 days of history.
    """
    reset_db()
    yield


@pytest.fixture
def client():
    """
    Provides a TestClient for making HTTP requests to the FastAPI app.
    The lifespan is not entered, so the scheduler never runs in tests.
    """
    return TestClient(app)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _login(role):
    client = TestClient(app)
    email, password = CREDENTIALS[role]
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return client


@pytest.fixture
def admin_client():
    return _login("admin")


@pytest.fixture
def researcher_client():
    return _login("researcher")


@pytest.fixture
def public_client():
    return _login("public")
