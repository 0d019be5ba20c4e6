import os

# Must be set before torqr.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["PHOTO_PUBLIC_BASE_URL"] = "https://photos.test"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"

import pytest
from botocore.exceptions import ClientError
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from torqr.database import Base, get_db
from torqr.main import app
from torqr.utils import photo_storage

PHOTO_BASE = "https://photos.test"

DEFAULT_CUSTOMER = {
    "name": "Max Mustermann",
    "street": "Hauptstraße 1",
    "zipCode": "10115",
    "city": "Berlin",
    "phone": "030 1234567",
    "heatingType": "GAS",
}


class FakeR2Client:
    """Records put/delete calls; keys in fail_deletes raise like a rejected request"""

    def __init__(self):
        self.objects = {}
        self.deleted = []
        self.fail_deletes = set()
        self.fail_uploads = False

    def put_object(self, Bucket, Key, Body, ContentType, CacheControl=None):
        if self.fail_uploads:
            raise ClientError({"Error": {"Code": "500", "Message": "upload rejected"}}, "PutObject")
        self.objects[Key] = {"bucket": Bucket, "body": Body, "content_type": ContentType}

    def delete_object(self, Bucket, Key):
        if Key in self.fail_deletes:
            raise ClientError({"Error": {"Code": "500", "Message": "delete rejected"}}, "DeleteObject")
        self.deleted.append(Key)
        self.objects.pop(Key, None)


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def r2(monkeypatch):
    fake = FakeR2Client()
    monkeypatch.setattr(photo_storage, "get_r2_client", lambda: fake)
    return fake


def register_and_login(client, email, password="Secret123!", name="Technician"):
    response = client.post("/auth/register", json={"email": email, "password": password, "name": name})
    assert response.status_code == 201, response.text
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    token = response.json()["data"]["accessToken"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client, "anna@heizung.de", name="Anna Heizung")


@pytest.fixture
def other_headers(client):
    return register_and_login(client, "bernd@waerme.de", name="Bernd Wärme")


@pytest.fixture
def make_customer(client):
    def _make(headers, **overrides):
        payload = {**DEFAULT_CUSTOMER, **overrides}
        response = client.post("/customers", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make


@pytest.fixture
def make_heater(client):
    def _make(headers, customer_id, **overrides):
        payload = {"customerId": customer_id, "model": "Vitodens 200-W", "maintenanceInterval": 12}
        payload.update(overrides)
        response = client.post("/heaters", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make


@pytest.fixture
def make_maintenance(client):
    def _make(headers, heater_id, date, **overrides):
        payload = {"heaterId": heater_id, "date": date}
        payload.update(overrides)
        response = client.post("/maintenances", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make
