import logging
from datetime import timedelta

from livekit import api

from ..config import Settings
from .dispatch import build_agent_dispatch
from .interface import TokenIssuer

logger = logging.getLogger(__name__)


class LiveKitTokenIssuer(TokenIssuer):
    """LiveKit implementation of TokenIssuer."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def issue(self, identity: str, room_name: str) -> str:
        if not identity:
            raise ValueError("identity must be a non-empty string")
        if not room_name:
            raise ValueError("room_name must be a non-empty string")

        credentials = self.settings.require_livekit()
        dispatch = build_agent_dispatch(self.settings)

        # Create the token
        token = api.AccessToken(credentials.api_key, credentials.api_secret)

        # Set permissions, scoped to this room only
        token.with_identity(identity).with_ttl(
            timedelta(seconds=self.settings.token_ttl_seconds)
        ).with_grants(
            api.VideoGrants(
                room_join=True,
                room=room_name,
                can_publish=True,
                can_publish_data=True,
                can_subscribe=True,
            )
        )

        # The media server reads this to start the agent when the room is created
        if dispatch is not None:
            token.with_room_config(
                api.RoomConfiguration(
                    agents=[
                        api.RoomAgentDispatch(
                            agent_name=dispatch.agent_name,
                            metadata=dispatch.metadata_json(),
                        )
                    ],
                )
            )

        jwt = token.to_jwt()

        logger.info(f"Minted LiveKit token for room {room_name}, user {identity}")
        return jwt
