import logging
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from app.core.config import settings
from app.api.router import api
from app.web.routes import STATIC_DIR, web_router
from app.services.rooms import RoomRegistry

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")

app = FastAPI(title=settings.APP_NAME)
app.state.rooms = RoomRegistry()

@app.get("/health")
def health():
    return {"ok": True, "rooms": len(app.state.rooms)}

app.include_router(api)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
# catch-all room pages go last
app.include_router(web_router)

def run():
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)

if __name__ == "__main__":
    run()
