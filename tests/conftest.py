import pytest
from fastapi.testclient import TestClient

from users_api.api.main import create_app
from users_api.api.settings import Settings

AUTH = {"Authorization": "Bearer mysecrettoken"}
USERS_URL = "/api/v1/users"


@pytest.fixture
def make_client():
    """Фабрика клиентов: каждое приложение со своей коллекцией."""

    def _make(**overrides):
        settings = Settings(**overrides)
        return TestClient(create_app(settings))

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
