import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app

API_KEY = "APItestkey"
API_SECRET = "test-secret-that-is-long-enough-for-hs256-signing"
SERVER_URL = "wss://voice-test.livekit.cloud"


def make_settings(**overrides) -> Settings:
    values = {
        "livekit_url": SERVER_URL,
        "livekit_api_key": API_KEY,
        "livekit_api_secret": API_SECRET,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def client(settings: Settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
