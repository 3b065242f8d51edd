"""Shared fixtures: a recording stand-in for the external store and a configured app."""

import pytest

from app import create_app
from config import Config
from store import ConsultationStore, StoreResponse


class FakeStore(ConsultationStore):
    """Records every insert; answers with a canned error or exception."""

    def __init__(self, configured=True, error=None, exc=None):
        self.configured = configured
        self.error = error
        self.exc = exc
        self.inserts = []

    def is_configured(self):
        return self.configured

    def insert(self, table, rows):
        self.inserts.append((table, rows))
        if self.exc is not None:
            raise self.exc
        return StoreResponse(error=self.error)


def make_config(**overrides):
    values = dict(
        SUPABASE_URL="",
        SUPABASE_ANON_KEY="",
        SUPABASE_TIMEOUT=None,
        SQLALCHEMY_DATABASE_URI=None,
        DEBUG=False,
        TESTING=True,
    )
    values.update(overrides)
    return Config(**values)


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def app(fake_store):
    return create_app(make_config(), store=fake_store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def valid_fields():
    return {
        "full_name": "Jane Doe",
        "company_name": "",
        "email": "jane@x.com",
        "challenge_description": "Reduce emissions",
        "interest_type": "",
    }
