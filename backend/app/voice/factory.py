from ..config import Settings
from .interface import TokenIssuer
from .livekit_impl import LiveKitTokenIssuer


def create_token_issuer(settings: Settings) -> TokenIssuer:
    """Factory to get the TokenIssuer for the configured provider."""
    if settings.token_provider == "livekit":
        return LiveKitTokenIssuer(settings)
    else:
        raise ValueError(f"Unknown token provider: {settings.token_provider}")
