"""Wire messages exchanged over a chat socket.

Inbound (client -> server)::

    {"type": "join", "name": "alice"}
    {"type": "chat", "text": "hello"}

Outbound (server -> client)::

    {"type": "note", "text": "alice joined \"lobby\"."}
    {"type": "chat", "name": "alice", "text": "hello"}
"""
import json
from typing import Literal, Union
from pydantic import BaseModel, ValidationError
from app.core.errors import MessageParseError, ProtocolError

class JoinMessage(BaseModel):
    type: Literal["join"] = "join"
    name: str

class ChatInMessage(BaseModel):
    type: Literal["chat"] = "chat"
    text: str

class NoteMessage(BaseModel):
    type: Literal["note"] = "note"
    text: str

class ChatOutMessage(BaseModel):
    type: Literal["chat"] = "chat"
    name: str | None
    text: str

InboundMessage = Union[JoinMessage, ChatInMessage]
OutboundMessage = Union[NoteMessage, ChatOutMessage]

INBOUND_TYPES: dict[str, type[BaseModel]] = {
    "join": JoinMessage,
    "chat": ChatInMessage,
}

def parse_inbound(raw: str | bytes) -> InboundMessage:
    """Turn raw socket text into an inbound message.

    Raises MessageParseError for text that is not a JSON object or that
    lacks the fields its type needs, and ProtocolError for an unknown type.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise MessageParseError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise MessageParseError("message must be a JSON object")

    msg_type = data.get("type")
    model = INBOUND_TYPES.get(msg_type) if isinstance(msg_type, str) else None
    if model is None:
        raise ProtocolError(f"bad message: {msg_type}")

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise MessageParseError(f"invalid {msg_type} message: {exc.error_count()} error(s)") from exc

def serialize(message: OutboundMessage) -> str:
    return message.model_dump_json()
