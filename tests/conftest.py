import os

import pytest

os.environ['DB_URL'] = 'sqlite://'
os.environ.setdefault('LOG_LEVEL', 'DEBUG')

from fastapi.testclient import TestClient  # noqa: E402

from cretaceous_park import database  # noqa: E402
from cretaceous_park.app import app  # noqa: E402


@pytest.fixture(autouse=True)
def clean_tables():
    database.drop_tables()
    database.create_tables()
    yield


@pytest.fixture()
def client():
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def db():
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def create_animal(client):
    def _create(species='T-Rex', name='Rex', age=5):
        response = client.post('/animals', json={'species': species, 'name': name, 'age': age})
        assert response.status_code == 201
        return response.json()
    return _create
