from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from openapi_examples.config import Settings, get_settings
from openapi_examples.main import create_app


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep a developer's .env and exported settings out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def make_client() -> Callable[..., TestClient]:
    """Build a test client for an app created with the given settings overrides."""

    def _make(**overrides) -> TestClient:
        return TestClient(create_app(Settings(_env_file=None, **overrides)))

    return _make


@pytest.fixture()
def client(make_client) -> TestClient:
    return make_client(environment="production")


@pytest.fixture()
def comments_file(tmp_path: Path) -> Callable[[str], Path]:
    def _write(text: str) -> Path:
        path = tmp_path / "route_comments.json"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
