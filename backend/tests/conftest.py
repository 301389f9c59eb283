import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client() -> TestClient:
    from markdown_to_telegraph.main import app

    return TestClient(app)


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    # Deterministic tests: never pick up a real token or API base from the environment.
    from markdown_to_telegraph import config

    monkeypatch.setattr(config, "TELEGRAPH_API_BASE", "https://telegraph.test")
    monkeypatch.setattr(config, "TELEGRAPH_ACCESS_TOKEN", None)
    monkeypatch.setattr(config, "TELEGRAPH_AUTHOR_NAME", None)
    monkeypatch.setattr(config, "TELEGRAPH_AUTHOR_URL", None)
    yield
