from abc import ABC, abstractmethod


class TokenIssuer(ABC):
    """Abstract interface for media-server token issuers (LiveKit, etc)."""

    @abstractmethod
    def issue(self, identity: str, room_name: str) -> str:
        """
        Mint a signed access token for one participant in one room.

        Raises:
            ConfigurationError: if signing credentials are missing.

        Returns:
            The serialized token, safe to hand to an untrusted client.
        """
        pass
