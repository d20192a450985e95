"""Tests for settings loading and credential resolution."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.config import ConfigurationError, Settings

from conftest import API_KEY, API_SECRET, SERVER_URL, make_settings


def test_require_livekit_returns_credentials(settings: Settings):
    credentials = settings.require_livekit()

    assert credentials.url == SERVER_URL
    assert credentials.api_key == API_KEY
    assert credentials.api_secret == API_SECRET


@pytest.mark.parametrize(
    "missing, message",
    [
        ("livekit_url", "LIVEKIT_URL is not defined"),
        ("livekit_api_key", "LIVEKIT_API_KEY is not defined"),
        ("livekit_api_secret", "LIVEKIT_API_SECRET is not defined"),
    ],
)
def test_require_livekit_names_missing_value(missing: str, message: str):
    settings = make_settings(**{missing: None})

    assert not settings.livekit_configured
    with pytest.raises(ConfigurationError, match=message):
        settings.require_livekit()


def test_empty_value_counts_as_missing():
    settings = make_settings(livekit_api_key="")

    with pytest.raises(ConfigurationError, match="LIVEKIT_API_KEY"):
        settings.require_livekit()


def test_url_is_checked_first():
    settings = make_settings(livekit_url=None, livekit_api_key=None, livekit_api_secret=None)

    with pytest.raises(ConfigurationError, match="LIVEKIT_URL"):
        settings.require_livekit()


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LIVEKIT_URL", SERVER_URL)
    monkeypatch.setenv("LIVEKIT_API_KEY", API_KEY)
    monkeypatch.setenv("LIVEKIT_API_SECRET", API_SECRET)
    monkeypatch.setenv("AGENT_NAME", "survey_agent")
    monkeypatch.setenv(
        "AGENT_METADATA",
        '{"agent_id": "survey", "call_id": "c-1", "phone_number": "+15550100", "locale": "en"}',
    )

    settings = Settings(_env_file=None)

    assert settings.livekit_configured
    assert settings.agent_name == "survey_agent"
    assert settings.agent_metadata.agent_id == "survey"
    assert settings.agent_metadata.model_dump()["locale"] == "en"


def test_default_dispatch_payload():
    settings = make_settings()

    assert settings.agent_name == "base_agent"
    assert settings.agent_metadata.agent_id == "clinic_receptionist"
    assert settings.agent_metadata.phone_number == "+919988877023"


def test_ttl_cannot_exceed_fifteen_minutes():
    with pytest.raises(ValidationError):
        make_settings(token_ttl_seconds=901)
