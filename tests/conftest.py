import os
import pytest
from mongomock import MongoClient as MockClient

# Keep real databases out of unit tests
os.environ.setdefault("REGISTRATION_MONGODB_URI", "")
os.environ.setdefault("NEWS_MONGODB_URI", "")
os.environ.setdefault("FLASK_ENV", "testing")

from app import create_app  # noqa: E402
import app.config as cfg  # noqa: E402
import app.db.mongo as mongo_mod  # noqa: E402


@pytest.fixture(autouse=True)
def _patch_cfg(monkeypatch):
    monkeypatch.setattr(cfg, "FLASK_ENV", "testing", raising=False)
    monkeypatch.setattr(cfg, "REGISTRATION_DB", "registrations_test", raising=False)
    monkeypatch.setattr(cfg, "NEWS_DB", "news_test", raising=False)
    yield


@pytest.fixture(autouse=True)
def mock_clients(monkeypatch):
    # One in-memory client per store, dropped after each test
    clients = {store: MockClient() for store in mongo_mod.STORES}
    for store, client in clients.items():
        monkeypatch.setitem(mongo_mod._CLIENTS, store, client)
    yield clients


@pytest.fixture
def registration_db(mock_clients):
    return mock_clients[mongo_mod.REGISTRATION]["registrations_test"]


@pytest.fixture
def news_db(mock_clients):
    return mock_clients[mongo_mod.NEWS]["news_test"]


@pytest.fixture
def app():
    return create_app(testing=True)


@pytest.fixture
def app_client(app):
    with app.test_client() as c:
        yield c
