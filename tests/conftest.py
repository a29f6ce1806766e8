import pytest
from fastapi.testclient import TestClient

from shopping_cart_api.main import app


@pytest.fixture
def client():
    """
    TestClient entered as a context manager so the startup hook runs:
    every test gets a freshly created and seeded in-memory database.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def widget(client):
    """The seeded product every cart scenario starts from"""
    r = client.get("/products/1")
    assert r.status_code == 200
    return r.json()
