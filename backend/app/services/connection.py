"""Service for building client connection details."""

import logging
import secrets
from typing import Optional

from ..config import Settings
from ..models.connection import ConnectionDetails
from ..voice.interface import TokenIssuer

logger = logging.getLogger(__name__)

# Random suffix range for generated identities and room names
SUFFIX_SPACE = 10_000


def _random_suffix() -> int:
    return secrets.randbelow(SUFFIX_SPACE)


def create_connection_details(
    settings: Settings,
    issuer: TokenIssuer,
    identity: Optional[str] = None,
    room_name: Optional[str] = None,
) -> ConnectionDetails:
    """Generate names when not supplied and mint a participant token.

    Raises ConfigurationError before anything is generated if LiveKit
    settings are incomplete.
    """
    credentials = settings.require_livekit()

    identity = identity or f"{settings.identity_prefix}{_random_suffix()}"
    room_name = room_name or f"{settings.room_prefix}{_random_suffix()}"

    logger.info(f"Creating connection: room={room_name}, participant={identity}")

    token = issuer.issue(identity, room_name)

    return ConnectionDetails(
        server_url=credentials.url,
        room_name=room_name,
        participant_name=identity,
        participant_token=token,
    )
