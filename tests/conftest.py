import pytest

from tasklog import create_app
from tasklog.dispatcher import Dispatcher

from .fakes import FakeEntries, FakeRenderer, FakeTasks, fake_serve_static

PASSWORD = "0000"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Tests never see a developer's TASKLOG_* variables."""
    for name in ("PASSWORD", "DATABASE", "HOST", "PORT", "STATIC_DIR",
                 "SECURE_COOKIE", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"TASKLOG_{name}", raising=False)


@pytest.fixture()
def tasks():
    return FakeTasks([{"id": 1, "name": "Chores"}])


@pytest.fixture()
def entries():
    return FakeEntries()


@pytest.fixture()
def renderer():
    return FakeRenderer()


@pytest.fixture()
def dispatcher(tasks, entries, renderer):
    return Dispatcher(
        tasks=tasks,
        entries=entries,
        render=renderer,
        serve_static=fake_serve_static,
        password=PASSWORD,
    )


@pytest.fixture()
def static_dir(tmp_path):
    d = tmp_path / "static"
    d.mkdir()
    (d / "style.less").write_text("body { color: red; }", encoding="utf-8")
    return d


@pytest.fixture()
def app(tmp_path, static_dir):
    return create_app({
        "TESTING": True,
        "DATABASE": str(tmp_path / "tasklog.db"),
        "PASSWORD": PASSWORD,
        "STATIC_DIR": str(static_dir),
    })


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def logged_in(client):
    client.set_cookie("loggedIn", "1")
    return client
