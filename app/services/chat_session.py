import enum
import logging
from typing import Awaitable, Callable
from app.core.errors import JokeFetchError, ProtocolError
from app.services.jokes import fetch_joke
from app.services.messages import (
    ChatOutMessage,
    JoinMessage,
    NoteMessage,
    parse_inbound,
    serialize,
)
from app.services.rooms import RoomRegistry

logger = logging.getLogger(__name__)

SendFunc = Callable[[str], Awaitable[None]]
JokeFetcher = Callable[[], Awaitable[str]]

JOKE_COMMAND = "/joke"
MEMBERS_COMMAND = "/members"
JOKE_FAILED_TEXT = "Could not fetch a joke right now."

class SessionState(str, enum.Enum):
    UNJOINED = "unjoined"
    JOINED = "joined"
    CLOSED = "closed"

class ChatSession:
    """One client connection to one room.

    The session resolves its room on construction but only becomes a member
    once the client sends a join message.
    """

    def __init__(self, send: SendFunc, room_name: str, rooms: RoomRegistry, joke_fetcher: JokeFetcher = fetch_joke):
        self._send = send
        self._fetch_joke = joke_fetcher
        self.room = rooms.get(room_name)
        self.name: str | None = None
        self.state = SessionState.UNJOINED
        logger.info("created chat in %s", self.room.name)

    async def send(self, data: str) -> None:
        """Deliver one serialized message to this client. Never raises."""
        try:
            await self._send(data)
        except Exception:
            logger.debug("send to %s in %s failed", self.name, self.room.name, exc_info=True)

    async def handle_message(self, raw: str) -> None:
        if self.state == SessionState.CLOSED:
            raise ProtocolError("session is closed")

        # parse_inbound rejects unknown types, so msg is a join or a chat
        msg = parse_inbound(raw)
        if isinstance(msg, JoinMessage):
            await self.handle_join(msg.name)
            return

        if self.state != SessionState.JOINED:
            raise ProtocolError("not joined")
        if msg.text == JOKE_COMMAND:
            await self.handle_joke()
        elif msg.text == MEMBERS_COMMAND:
            await self.handle_members()
        else:
            await self.handle_chat(msg.text)

    async def handle_join(self, name: str) -> None:
        if self.state != SessionState.UNJOINED:
            raise ProtocolError(f"{self.name} already joined {self.room.name}")
        self.name = name
        self.state = SessionState.JOINED
        self.room.join(self)
        logger.info("%s joined %s", name, self.room.name)
        await self.room.broadcast(NoteMessage(text=f'{self.name} joined "{self.room.name}".'))

    async def handle_chat(self, text: str) -> None:
        await self.room.broadcast(ChatOutMessage(name=self.name, text=text))

    async def handle_joke(self) -> None:
        try:
            joke = await self._fetch_joke()
        except JokeFetchError as exc:
            logger.warning("joke for %s failed: %s", self.name, exc)
            await self.send(serialize(NoteMessage(text=JOKE_FAILED_TEXT)))
            return
        await self.send(serialize(ChatOutMessage(name=self.name, text=joke)))

    async def handle_members(self) -> None:
        names = ", ".join(str(member.name) for member in self.room.members)
        await self.send(serialize(ChatOutMessage(name=self.name, text=f"In room: {names}")))

    async def handle_close(self) -> None:
        """Leave the room and tell the others. Safe to call more than once."""
        if self.state == SessionState.CLOSED:
            return
        self.state = SessionState.CLOSED
        self.room.leave(self)
        logger.info("%s left %s", self.name, self.room.name)
        # a session that never joined still announces, as "None left <room>."
        await self.room.broadcast(NoteMessage(text=f"{self.name} left {self.room.name}."))
