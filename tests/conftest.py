"""
Shared fixtures: an in-memory stand-in for a pymongo collection.
"""

import sys
from types import SimpleNamespace

import pytest
from bson import ObjectId

from attendees.attendee import AttendeeHandler
from attendees.config import get_config


class FakeCollection:
    """Implements the two collection calls the handler makes."""

    def __init__(self, docs=None, acknowledged=True):
        self.docs = list(docs or [])
        self.acknowledged = acknowledged
        self.calls = []

    def insert_one(self, doc):
        self.calls.append('insert_one')
        if not self.acknowledged:
            return SimpleNamespace(acknowledged=False, inserted_id=None)
        doc = dict(doc, _id=ObjectId())
        self.docs.append(doc)
        return SimpleNamespace(acknowledged=True, inserted_id=doc['_id'])

    def find(self):
        self.calls.append('find')
        return iter([dict(d) for d in self.docs])


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def attendee_handler(collection):
    return AttendeeHandler(collection)


@pytest.fixture(autouse=True)
def reset_process_state():
    get_config.cache_clear()
    sys.modules.pop('attendees.handler', None)
    yield
    get_config.cache_clear()
    sys.modules.pop('attendees.handler', None)


@pytest.fixture
def secret(tmp_path, monkeypatch):
    path = tmp_path / 'mongodb-password'
    path.write_text('s3cr3t\n')
    monkeypatch.setenv('MONGODB_SECRET_PATH', str(path))
    return path


class RuntimeEvent:
    """Request object shaped like the python3-http runtime's Event."""

    def __init__(self, method, body=b'', headers=None, query=None, path='/'):
        self.method = method
        self.body = body
        self.headers = headers or {}
        self.query = query or {}
        self.path = path


class RuntimeContext:
    def __init__(self):
        self.hostname = 'attendees-7d9f'
