"""Shared fixtures: in-memory MongoDB via mongomock."""

import mongomock
import pytest

from travel_init.storage.db import get_database


@pytest.fixture
def client():
    c = mongomock.MongoClient()
    yield c
    c.close()


@pytest.fixture
def db(client):
    return get_database(client)
