"""
Shared pytest fixtures.

Every test gets a freshly seeded store and a fixed clock, so order ids
and createdAt defaults are predictable.
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from mockretail.asgi import create_app as create_fastapi_app
from mockretail.flask_app import create_app as create_flask_app
from mockretail.store import RetailStore

TODAY = date(2026, 3, 14)


@pytest.fixture
def store() -> RetailStore:
    return RetailStore(today=lambda: TODAY)


@pytest.fixture
def customers(store):
    return store.customers


@pytest.fixture
def catalog(store):
    return store.products


@pytest.fixture
def engine(store):
    return store.orders


@pytest.fixture
def flask_client(store, tmp_path):
    app = create_flask_app(store, openapi_dir=str(tmp_path))
    app.config['TESTING'] = True
    return app.test_client()


@pytest.fixture
def api_client(store):
    return TestClient(create_fastapi_app(store))
