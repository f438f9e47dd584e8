import random

import pytest
from fastapi.testclient import TestClient

from court_lookup.config import Settings
from court_lookup.db import SqliteQueryStore, StoreError
from court_lookup.main import create_app
from court_lookup.providers import SimulatedCaseProvider


class FailingStore(SqliteQueryStore):
    """Opens normally but every insert fails."""

    def append(self, query, record, outcome, error=None):
        raise StoreError("disk I/O error")


class BrokenProvider:
    def fetch(self, case_type, case_number, year):
        raise RuntimeError("portal exploded")


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite:///:memory:", CASE_PROVIDER="simulated", LOG_LEVEL="WARNING")


@pytest.fixture
def provider():
    return SimulatedCaseProvider(random.Random(42))


@pytest.fixture
def store():
    with SqliteQueryStore(":memory:") as store:
        yield store


@pytest.fixture
def make_client(settings, provider):
    clients = []

    def _make(store=None, provider_override=None):
        app = create_app(
            settings=settings,
            store=store or SqliteQueryStore(":memory:"),
            provider=provider_override or provider,
        )
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
