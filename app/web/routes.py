from pathlib import Path
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from app.core.config import settings

WEB_DIR = Path(__file__).resolve().parent
STATIC_DIR = WEB_DIR / "static"

templates = Jinja2Templates(directory=str(WEB_DIR / "templates"))
web_router = APIRouter(include_in_schema=False)

def redirect(url: str):
    return RedirectResponse(url=url, status_code=302)

@web_router.get("/")
async def home():
    return redirect(f"/{settings.DEFAULT_ROOM}")

@web_router.get("/{room_name}", response_class=HTMLResponse)
async def room_page(request: Request, room_name: str):
    return templates.TemplateResponse(
        request,
        "chat.html",
        {"room_name": room_name, "socket_path": f"/api/chat/{room_name}", "app_name": settings.APP_NAME},
    )
