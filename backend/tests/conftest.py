import os

# Settings are cached on first use, so the test environment must be in place before importing the app.
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs512"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "test-password"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENABLE_API_DOCS"] = "false"
os.environ["S3_ENDPOINT"] = "https://s3.example.test"
os.environ["S3_BUCKET_NAME"] = "listings"
os.environ["S3_ACCESS_KEY"] = "test-access-key"
os.environ["S3_SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from realty import models  # noqa: F401
from realty.core.database import Base, SessionLocal, engine
from realty.main import app

ADMIN_PASSWORD = "test-password"


@pytest.fixture(autouse=True)
def reset_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(client):
    """Bearer header for the provisioned admin. The login cookie is dropped so tests stay explicit."""
    res = client.post("/api/auth/login", json={"password": ADMIN_PASSWORD})
    assert res.status_code == 200, res.text
    client.cookies.clear()
    return {"Authorization": f"Bearer {res.json()['token']}"}


def property_payload(**overrides):
    payload = {
        "title": "Loft near the river",
        "description": "Bright two-level loft with a terrace and river views.",
        "shortDescription": "Two-level loft with a terrace.",
        "price": 12500000,
        "area": 95.5,
        "location": "Central district",
        "address": "Embankment 7",
        "coordinates": [55.75, 37.61],
        "type": "Жилые помещения",
        "transactionType": "Продажа",
        "investmentReturn": 18,
        "images": ["https://cdn.example.test/loft-1.jpg"],
        "isFeatured": False,
        "layout": "2 rooms, kitchen, terrace",
        "specifications": {"rooms": 2, "bathrooms": 1, "balcony": True},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_property(client, auth_headers):
    def _create(**overrides):
        res = client.post("/api/properties", json=property_payload(**overrides), headers=auth_headers)
        assert res.status_code == 201, res.text
        return res.json()

    return _create
