import logging
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from app.core.deps_api import get_rooms
from app.core.errors import MessageParseError, ProtocolError
from app.services.chat_session import ChatSession
from app.services.rooms import RoomRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat")

def frame_text(msg: dict) -> str:
    text = msg.get("text")
    if text is None:
        raise MessageParseError("only text frames are accepted")
    return text

@router.websocket("/{room_name}")
async def chat_endpoint(ws: WebSocket, room_name: str, rooms: RoomRegistry = Depends(get_rooms)):
    await ws.accept()
    session = ChatSession(send=ws.send_text, room_name=room_name, rooms=rooms)
    try:
        while True:
            msg = await ws.receive()
            if msg["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(msg.get("code", status.WS_1000_NORMAL_CLOSURE))
            await session.handle_message(frame_text(msg))
    except WebSocketDisconnect:
        pass
    except ProtocolError as exc:
        logger.warning("closing connection to %s: %s", room_name, exc)
        await ws.close(code=status.WS_1003_UNSUPPORTED_DATA, reason=str(exc)[:120])
    finally:
        await session.handle_close()
