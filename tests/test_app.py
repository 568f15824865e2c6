from fastapi.testclient import TestClient

from cretaceous_park.app import create_app
from cretaceous_park.config import Settings


def make_prefixed_client(prefix: str) -> TestClient:
    settings = Settings(_env_file=None, db_url='sqlite://', api_prefix=prefix)
    return TestClient(create_app(settings))


def test_routes_mount_under_prefix():
    with make_prefixed_client('/api/') as client:
        response = client.post('/api/animals', json={'species': 'T-Rex', 'name': 'Rex', 'age': 5})
        assert response.status_code == 201
        animal_id = response.json()['id']
        assert response.headers['location'].endswith(f'/api/animals/{animal_id}')

        assert client.get(response.headers['location']).json() == response.json()
        assert client.get('/api/animals', params={'species': 'T-Rex'}).json() == [response.json()]
        assert client.get(f'/animals/{animal_id}').status_code == 404


def test_default_app_has_no_prefix():
    with make_prefixed_client('') as client:
        assert client.get('/animals').status_code == 200
        assert client.get('/api/animals').status_code == 404
