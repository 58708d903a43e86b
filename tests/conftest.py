"""
Shared fixtures: a Flask test client over a TaskStore backed by FakeCollection
"""

import pytest

from taskboard.apps.todo.manager import TaskStore
from taskboard.web.webserver import TaskBoardWebServer

from .fakes import FakeCollection


@pytest.fixture()
def collection():
    return FakeCollection()


@pytest.fixture()
def store(collection):
    return TaskStore(collection)


@pytest.fixture()
def app(store):
    server = TaskBoardWebServer(store, port=0)
    server.flask_app.config['TESTING'] = True
    return server.flask_app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_task(store):
    """Insert a task directly through the store and return its id string"""
    def _make(title='Buy milk', description='2 liters'):
        return store.insert_task(title, description)
    return _make
