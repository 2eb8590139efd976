import httpx
from app.core.config import settings
from app.core.errors import JokeFetchError

async def fetch_joke(url: str | None = None, transport: httpx.AsyncBaseTransport | None = None) -> str:
    url = url or settings.JOKE_URL
    headers = {"Accept": "text/plain"}
    try:
        async with httpx.AsyncClient(timeout=settings.JOKE_TIMEOUT_SECONDS, transport=transport) as client:
            r = await client.get(url, headers=headers)
            r.raise_for_status()
            return r.text
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise JokeFetchError(f"joke request to {url} failed: {exc}") from exc
