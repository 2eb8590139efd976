from __future__ import annotations

import asyncio
import logging
import threading
from typing import TYPE_CHECKING, Dict, Set, Tuple
from app.services.messages import OutboundMessage, serialize

if TYPE_CHECKING:
    from app.services.chat_session import ChatSession

logger = logging.getLogger(__name__)

class Room:
    """Named broadcast group. Members are sessions, compared by identity."""

    def __init__(self, name: str):
        self._name = name
        self._members: Set[ChatSession] = set()
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def members(self) -> Tuple[ChatSession, ...]:
        with self._lock:
            return tuple(self._members)

    def join(self, session: ChatSession) -> None:
        # set insert: joining twice keeps a single entry
        with self._lock:
            self._members.add(session)

    def leave(self, session: ChatSession) -> None:
        with self._lock:
            self._members.discard(session)

    async def broadcast(self, payload: OutboundMessage) -> None:
        """Deliver payload to every current member concurrently.

        A slow or failing member does not hold up or abort delivery to the
        others. The call returns once every delivery has finished.
        """
        data = serialize(payload)
        results = await asyncio.gather(
            *(member.send(data) for member in self.members),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, Exception):
                logger.debug("delivery to a member of %s failed: %r", self._name, result)

    def __repr__(self) -> str:
        return f"Room({self._name!r}, members={len(self._members)})"

class RoomRegistry:
    """Get-or-create map of room name to Room. Rooms are never removed."""

    def __init__(self):
        self._rooms: Dict[str, Room] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Room:
        with self._lock:
            room = self._rooms.get(name)
            if room is None:
                room = Room(name)
                self._rooms[name] = room
                logger.info("created room %s", name)
            return room

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._rooms

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)
