"""Configuration management for the Voice Connect backend."""

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.connection import DispatchMetadata


class ConfigurationError(RuntimeError):
    """Raised when required configuration is missing or unusable."""


# Demo payload handed to the dispatched agent unless AGENT_METADATA overrides it
DEFAULT_AGENT_METADATA = {
    "agent_id": "clinic_receptionist",
    "call_id": "Rohan-123-call",
    "customer_name": "",
    "customer_id": "9988877023",
    "phone_number": "+919988877023",
}


def load_dispatch_metadata(metadata_path: Path) -> DispatchMetadata:
    """Load dispatch metadata from a JSON file."""
    try:
        with open(metadata_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read agent metadata file {metadata_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid agent metadata JSON in {metadata_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Agent metadata in {metadata_path} must be a JSON object")

    try:
        return DispatchMetadata(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Agent metadata validation failed for {metadata_path}: {e}") from e


@dataclass(frozen=True)
class LiveKitCredentials:
    """Resolved LiveKit connection values, all guaranteed non-empty."""

    url: str
    api_key: str
    api_secret: str


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_allow_origins: list[str] = ["http://localhost:3000"]

    # LiveKit (checked per request, so the app still boots without them)
    livekit_url: Optional[str] = None
    livekit_api_key: Optional[str] = None
    livekit_api_secret: Optional[str] = None

    # Token settings
    token_provider: str = "livekit"
    token_ttl_seconds: int = Field(default=900, gt=0, le=900)  # 15 minutes max
    identity_prefix: str = "voice_assistant_user_"
    room_prefix: str = "voice_assistant_room_"

    # Agent dispatch
    agent_dispatch_enabled: bool = True
    agent_name: str = "base_agent"
    agent_metadata: DispatchMetadata = Field(
        default_factory=lambda: DispatchMetadata(**DEFAULT_AGENT_METADATA)
    )
    agent_metadata_file: Optional[Path] = None

    @model_validator(mode="after")
    def _load_agent_metadata_file(self) -> "Settings":
        # Read once here so requests never touch the filesystem
        if self.agent_metadata_file is not None:
            self.agent_metadata = load_dispatch_metadata(self.agent_metadata_file)
        return self

    @property
    def livekit_configured(self) -> bool:
        return bool(self.livekit_url and self.livekit_api_key and self.livekit_api_secret)

    def require_livekit(self) -> LiveKitCredentials:
        """Return the LiveKit credentials or raise ConfigurationError naming the missing one."""
        if not self.livekit_url:
            raise ConfigurationError("LIVEKIT_URL is not defined")
        if not self.livekit_api_key:
            raise ConfigurationError("LIVEKIT_API_KEY is not defined")
        if not self.livekit_api_secret:
            raise ConfigurationError("LIVEKIT_API_SECRET is not defined")
        return LiveKitCredentials(
            url=self.livekit_url,
            api_key=self.livekit_api_key,
            api_secret=self.livekit_api_secret,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
