from fastapi import APIRouter
from app.api.routes import websocket

api = APIRouter(prefix="/api")
api.include_router(websocket.router, tags=["ws"])
