"""Pydantic models for connection details and agent dispatch."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DispatchMetadata(BaseModel):
    """Metadata handed to the dispatched agent, JSON-encoded inside the token.

    Unknown fields are kept so deployments can pass agent-specific data.
    """

    model_config = ConfigDict(extra="allow")

    agent_id: str
    call_id: str
    customer_name: str = ""
    customer_id: str = ""
    phone_number: str


class AgentDispatch(BaseModel):
    """Which agent the media server should place into the room."""

    agent_name: str
    metadata: DispatchMetadata

    def metadata_json(self) -> str:
        """Metadata as the JSON string the agent receives on dispatch."""
        return self.metadata.model_dump_json()


class ConnectionDetails(BaseModel):
    """Everything a client needs to join a room."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    server_url: str
    room_name: str
    participant_name: str
    participant_token: str
