import importlib
import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client(tmp_path, monkeypatch):
    # isolate data dir per test
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    # reload modules so that api/notes.py picks up new env vars
    import sealnote.api.notes
    import sealnote.main
    importlib.reload(sealnote.api.notes)
    importlib.reload(sealnote.main)

    return TestClient(sealnote.main.app)


@pytest.fixture()
def data_dir(client):
    import sealnote.api.notes
    return sealnote.api.notes.settings.data_dir


def create_note(client, title="T", content="C", password="p", **extra):
    r = client.post("/api/create", json={"title": title, "content": content, "password": password, **extra})
    assert r.status_code == 200
    return r.json()["id"]
