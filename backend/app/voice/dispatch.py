"""Agent dispatch configuration embedded into room tokens."""

import logging
from typing import Optional

from ..config import Settings
from ..models.connection import AgentDispatch

logger = logging.getLogger(__name__)


def build_agent_dispatch(settings: Settings) -> Optional[AgentDispatch]:
    """Build a fresh dispatch config for one token, or None when dispatch is off.

    Metadata is copied from settings, which already loaded any
    AGENT_METADATA_FILE at startup, so no I/O happens per request.
    """
    if not settings.agent_dispatch_enabled:
        return None

    metadata = settings.agent_metadata.model_copy(deep=True)

    logger.debug(f"Dispatching agent {settings.agent_name} for call {metadata.call_id}")
    return AgentDispatch(agent_name=settings.agent_name, metadata=metadata)
