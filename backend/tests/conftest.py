import pytest
from fastapi.testclient import TestClient

from catalog.main import create_app
from catalog.storage import ItemStore


@pytest.fixture
def store():
    return ItemStore()


@pytest.fixture
def static_dir(tmp_path):
    directory = tmp_path / "static"
    directory.mkdir()
    (directory / "index.html").write_text("<h1>catalog</h1>", encoding="utf-8")
    (directory / "styles.css").write_text("body { margin: 0; }", encoding="utf-8")
    return directory


@pytest.fixture
def app(store, static_dir):
    return create_app(store=store, static_dir=static_dir, list_latency=0)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
