"""
Tests for application startup
"""

import pytest

from taskboard import main as main_module
from taskboard.apps.todo.manager import StorageConnectionError, TaskStore
from taskboard.main import TaskBoardApp

from .fakes import FakeCollection


@pytest.fixture()
def config_path(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('logging:\n  console: false\n')
    return str(path)


def test_connection_failure_exits(config_path, monkeypatch):
    """Startup storage failure is fatal"""
    def fail(**kwargs):
        raise StorageConnectionError('MongoDB connection failed: refused')

    monkeypatch.setattr(main_module.TaskStore, 'connect', staticmethod(fail))
    app = TaskBoardApp(config_path)

    with pytest.raises(SystemExit) as exc:
        app.start()

    assert exc.value.code == 1


def test_start_wires_server_after_connect(config_path, monkeypatch):
    """The web server is only built once the store is connected"""
    store = TaskStore(FakeCollection())
    seen = {}

    def connect(**kwargs):
        seen['connect'] = kwargs
        return store

    def run(server):
        seen['server_store'] = server.store
        seen['port'] = server.port

    monkeypatch.setattr(main_module.TaskStore, 'connect', staticmethod(connect))
    monkeypatch.setattr(main_module.TaskBoardWebServer, 'run', run)

    TaskBoardApp(config_path).start()

    assert seen['connect']['database'] == 'node_project'
    assert seen['connect']['collection'] == 'todo'
    assert seen['server_store'] is store
    assert seen['port'] == 3009


def test_main_missing_config_exits(tmp_path, monkeypatch):
    monkeypatch.setattr('sys.argv', ['taskboard', str(tmp_path / 'absent.yaml')])

    with pytest.raises(SystemExit) as exc:
        main_module.main()

    assert exc.value.code == 1
