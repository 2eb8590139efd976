from fastapi import WebSocket
from app.services.rooms import RoomRegistry

def get_rooms(websocket: WebSocket) -> RoomRegistry:
    return websocket.app.state.rooms
